"""Logging configuration."""

import logging

from .config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from settings.

    Args:
        settings: Application settings providing ``log_level``
    """
    logging.basicConfig(level=settings.log_level_number, format=LOG_FORMAT)
    logging.getLogger("web_identifiers").setLevel(settings.log_level_number)
