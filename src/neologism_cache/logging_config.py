"""
Logging configuration for the application.

``setup_logging`` attaches a console handler to the root logger the first
time it is called; later calls are no-ops so the API lifespan and tests can
both call it.
"""

import logging

from neologism_cache.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger.

    Args:
        level: Logging level name (e.g. ``"DEBUG"``). Case insensitive.
            Defaults to ``settings.log_level``.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
