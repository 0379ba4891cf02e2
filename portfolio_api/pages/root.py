"""Root landing page with links to the API docs and the public endpoints."""

from html import escape

_PUBLIC_ENDPOINTS = (
    ("/api/projects", "Projects"),
    ("/api/pricing", "Pricing plans"),
    ("/api/services", "Services"),
    ("/api/resume/experiences", "Resume"),
    ("/api/contact-details", "Contact details"),
    ("/api/version", "Site version"),
    ("/api/health", "Health"),
)


def render_root_page(app_name: str, app_version: str) -> str:
    """Return HTML for the root landing page."""
    links = "\n".join(
        f'            <li><a href="{path}">{label}</a> <code>{path}</code></li>'
        for path, label in _PUBLIC_ENDPOINTS
    )
    name = escape(app_name)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <style>
        body {{
            font-family: system-ui, sans-serif;
            max-width: 560px;
            margin: 3rem auto;
            padding: 0 1rem;
            background: #0b0b0b;
            color: #ddd;
        }}
        h1 {{ color: #fff; margin-bottom: 0.25rem; }}
        .version {{ color: #777; margin-top: 0; }}
        a {{ color: #8ab4f8; }}
        code {{ color: #888; font-size: 0.85rem; }}
        li {{ margin: 0.4rem 0; }}
    </style>
</head>
<body>
    <h1>{name}</h1>
    <p class="version">v{escape(app_version)}</p>
    <p>Portfolio content API. Reads are public; writes need an admin ID token.</p>
    <p><a href="/docs">Swagger UI</a> &middot; <a href="/redoc">ReDoc</a></p>
    <h2>Public endpoints</h2>
    <ul>
{links}
    </ul>
</body>
</html>
"""
