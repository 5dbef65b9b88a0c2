"""Runtime settings: environment variables, optionally seeded from a YAML file.

Recognized keys (environment variable / YAML key):
    SNIPPETS_APP_STORAGE   / storage     JSON:<path> or SQLITE:<path> (required)
    SNIPPETS_APP_LOG_LEVEL / log_level   default "info"
    SNIPPETS_APP_LOG_PATH  / log_path    default "snippets.log"
    SNIPPETS_APP_CONFIG                  path of the YAML file itself
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from snippets_app.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "SNIPPETS_APP_"
STORAGE_ENV = ENV_PREFIX + "STORAGE"
LOG_LEVEL_ENV = ENV_PREFIX + "LOG_LEVEL"
LOG_PATH_ENV = ENV_PREFIX + "LOG_PATH"
CONFIG_ENV = ENV_PREFIX + "CONFIG"

DEFAULT_LOG_LEVEL = "info"
DEFAULT_LOG_PATH = "snippets.log"


@dataclass
class Settings:
    storage: str
    log_level: str = DEFAULT_LOG_LEVEL
    log_path: str = DEFAULT_LOG_PATH


def load_yaml_config(config_path: str) -> Dict[str, Any]:
    """Load and return the YAML settings file as a dict."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e
    logger.debug("Loaded config file %s", config_path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")
    return data


def load_settings(
    config_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Build Settings from the YAML file (if any) overlaid with the environment."""
    env = os.environ if environ is None else environ
    config_path = config_path or env.get(CONFIG_ENV) or None
    file_cfg = load_yaml_config(config_path) if config_path else {}

    def pick(env_name: str, key: str, default: Optional[str]) -> Optional[str]:
        value = env.get(env_name)
        if value:
            return value
        value = file_cfg.get(key)
        return str(value) if value not in (None, "") else default

    storage = pick(STORAGE_ENV, "storage", None)
    if not storage:
        raise ConfigurationError(f"Environment variable {STORAGE_ENV} is not set")

    return Settings(
        storage=storage,
        log_level=pick(LOG_LEVEL_ENV, "log_level", DEFAULT_LOG_LEVEL),
        log_path=pick(LOG_PATH_ENV, "log_path", DEFAULT_LOG_PATH),
    )
