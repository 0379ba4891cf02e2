"""Seed data and default documents written on first read."""

from typing import Any

DEFAULT_VERSION = "1.0.0"

# Written to an empty services collection; order here is the list order.
DEFAULT_SERVICES: list[dict[str, Any]] = [
    {
        "name": "Mobile App Development",
        "priceUSD": 1500,
        "turnaround": "3-4 weeks",
        "isStartingPrice": True,
        "isMonthly": False,
    },
    {
        "name": "UI/UX Design",
        "priceUSD": 300,
        "turnaround": "3-5 days",
        "isStartingPrice": False,
        "isMonthly": False,
    },
    {
        "name": "API Development",
        "priceUSD": 500,
        "turnaround": "1 week",
        "isStartingPrice": False,
        "isMonthly": False,
    },
    {
        "name": "Database Design & Setup",
        "priceUSD": 400,
        "turnaround": "3-5 days",
        "isStartingPrice": False,
        "isMonthly": False,
    },
    {
        "name": "E-commerce Integration",
        "priceUSD": 800,
        "turnaround": "1-2 weeks",
        "isStartingPrice": False,
        "isMonthly": False,
    },
    {
        "name": "Performance Optimization",
        "priceUSD": 350,
        "turnaround": "2-3 days",
        "isStartingPrice": False,
        "isMonthly": False,
    },
    {
        "name": "SEO & Analytics Setup",
        "priceUSD": 250,
        "turnaround": "2-3 days",
        "isStartingPrice": False,
        "isMonthly": False,
    },
    {
        "name": "Monthly Maintenance",
        "priceUSD": 200,
        "turnaround": "Ongoing",
        "isStartingPrice": False,
        "isMonthly": True,
    },
]


def default_contact_details(admin_email: str) -> dict[str, Any]:
    """Placeholder contact details shown until the admin edits them."""
    return {
        "email": admin_email,
        "phone": "+91 XXX XXXXXXX",
        "location": "India",
        "socialLinks": {
            "github": "#",
            "linkedin": "#",
            "twitter": "#",
        },
    }
