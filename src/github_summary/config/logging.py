"""Logging configuration."""

import sys

from loguru import logger

from github_summary.config.settings import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> None:
    """
    Configure loguru with a single stderr handler.

    Stdout is left to the report, so every log record goes to stderr.

    Args:
        settings: Application settings; loaded from the environment if omitted
    """
    settings = settings or get_settings()
    logger.configure(
        handlers=[
            {
                "sink": sys.stderr,
                "level": settings.logging_level.upper(),
                "format": settings.logging_format,
            }
        ],
        extra={"app": settings.app_name, "version": settings.app_version},
    )
