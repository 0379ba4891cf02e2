"""Server-rendered pages (landing page only)."""

from portfolio_api.pages.root import render_root_page

__all__ = ["render_root_page"]
