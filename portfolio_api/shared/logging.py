"""Process-wide logging setup (stdout, one line per record)."""

import logging
import sys

from portfolio_api.core.config import get_settings

# Client libraries that log every outbound request at INFO.
_CHATTY_LOGGERS = ("httpx", "httpcore", "google.auth", "urllib3")


def setup_logging() -> None:
    """Configure the root logger once at startup.

    DEBUG when settings.debug is True, otherwise INFO. Outbound HTTP client
    loggers stay at WARNING unless debugging.
    """
    debug = get_settings().debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    if not debug:
        for name in _CHATTY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
