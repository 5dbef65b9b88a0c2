from __future__ import annotations

import logging
from pathlib import Path

from snippets_app.config import Settings
from snippets_app.errors import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s]: %(message)s"


def resolve_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {name!r}")
    return level


def configure_logging(settings: Settings) -> logging.Logger:
    """Send root logging to the configured file at the configured level.

    Called once at process start. Handlers are never torn down explicitly;
    the logging module flushes them at interpreter exit.
    """
    level = resolve_level(settings.log_level)

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    try:
        Path(settings.log_path).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(settings.log_path, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot open log file {settings.log_path}: {e}") from e
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.root.addHandler(handler)
    logging.root.setLevel(level)

    # Keep known noisy libraries quiet by default
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("Log level set to %s", logging.getLevelName(level))
    return logger
