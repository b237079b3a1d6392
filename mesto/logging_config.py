"""Logging setup."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # uvicorn's access log duplicates the request logging middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
