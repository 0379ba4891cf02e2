"""Resume API: the four sections, their required fields and ``order`` sorting."""

import pytest
from httpx import AsyncClient

SECTIONS = {
    "experiences": (
        {
            "title": "Engineer",
            "company": "Acme",
            "period": "2021 - Present",
            "description": "Built things",
            "achievements": ["Shipped v2"],
        },
        "title",
        "Title, company, period, and description are required",
    ),
    "education": (
        {"degree": "B.Tech", "school": "IIT", "period": "2016 - 2020"},
        "school",
        "Degree, school, and period are required",
    ),
    "skills": (
        {"category": "Frontend", "items": ["React", "TypeScript"]},
        "items",
        "Category and items array are required",
    ),
    "certifications": (
        {"name": "AWS Developer", "issuer": "Amazon", "date": "2023"},
        "name",
        "Certification name is required",
    ),
}


@pytest.mark.parametrize("section", list(SECTIONS))
async def test_create_and_fetch(
    client: AsyncClient, admin_headers: dict[str, str], section: str
) -> None:
    payload, _, _ = SECTIONS[section]
    created = await client.post(f"/api/resume/{section}", json=payload, headers=admin_headers)
    assert created.status_code == 201
    item_id = created.json()["data"]["id"]

    fetched = await client.get(f"/api/resume/{section}/{item_id}")
    assert fetched.status_code == 200
    data = fetched.json()["data"]
    for key, value in payload.items():
        assert data[key] == value
    assert data["order"] == 0


@pytest.mark.parametrize("section", list(SECTIONS))
async def test_missing_required_field_returns_message(
    client: AsyncClient, admin_headers: dict[str, str], section: str
) -> None:
    payload, dropped, message = SECTIONS[section]
    body = {k: v for k, v in payload.items() if k != dropped}
    response = await client.post(f"/api/resume/{section}", json=body, headers=admin_headers)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": message}


@pytest.mark.parametrize("section", list(SECTIONS))
async def test_list_is_sorted_by_order(
    client: AsyncClient, admin_headers: dict[str, str], section: str
) -> None:
    payload, _, _ = SECTIONS[section]
    for order in (3, 1, 2):
        response = await client.post(
            f"/api/resume/{section}", json={**payload, "order": order}, headers=admin_headers
        )
        assert response.status_code == 201

    response = await client.get(f"/api/resume/{section}")
    assert response.status_code == 200
    assert [item["order"] for item in response.json()["data"]] == [1, 2, 3]


async def test_blank_required_field_is_rejected(
    client: AsyncClient, admin_headers: dict[str, str]
) -> None:
    response = await client.post(
        "/api/resume/education",
        json={"degree": "  ", "school": "IIT", "period": "2016"},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Degree, school, and period are required"


async def test_certification_defaults(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    response = await client.post(
        "/api/resume/certifications", json={"name": "CKA"}, headers=admin_headers
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["issuer"] == ""
    assert data["date"] == ""
    assert data["pdfUrl"] == ""


async def test_update_reorders_item(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    created = await client.post(
        "/api/resume/skills",
        json={"category": "Backend", "items": ["Node.js"], "order": 5},
        headers=admin_headers,
    )
    skill_id = created.json()["data"]["id"]
    response = await client.put(
        f"/api/resume/skills/{skill_id}", json={"order": 0}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["data"]["order"] == 0
    assert response.json()["data"]["items"] == ["Node.js"]


async def test_delete_unknown_education_returns_404(
    client: AsyncClient, admin_headers: dict[str, str]
) -> None:
    response = await client.delete("/api/resume/education/missing", headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "Education not found"


async def test_store_failure_names_the_section(client: AsyncClient, fake_db) -> None:
    fake_db.fail = True
    response = await client.get("/api/resume/skills")
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to fetch skills"}
