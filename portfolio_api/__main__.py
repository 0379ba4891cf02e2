"""Run the API with uvicorn: ``python -m portfolio_api`` (listens on PORT)."""

import uvicorn

from portfolio_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "portfolio_api.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
