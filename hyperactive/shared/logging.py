"""
Logging configuration for the application.

What ends up in the log:
- hyperactive.shared.errors.handlers: one warning per client-input error
  (missing/invalid parameter, bad body) and one error per serialization,
  upstream or untagged failure, with the cause that the response body hides
- hyperactive.infrastructure.client: failed outbound calls with method and URL
- hyperactive.interfaces.router: method, path and User-Agent at DEBUG.
  Authorization and X-Api-Key are never logged.

uvicorn's per-request access lines and httpx's per-call INFO lines are
raised to WARNING; the modules above already log what matters.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # uvicorn logs every request line; the routers log what matters
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
