"""Logging setup for scripts and embedding applications."""

import logging

from studio.core.config import Settings, settings as default_settings


def configure_logging(settings: Settings = default_settings) -> None:
    """Configure the root logger from settings.

    ``DEBUG`` forces debug output regardless of ``LOG_LEVEL``.
    """
    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
