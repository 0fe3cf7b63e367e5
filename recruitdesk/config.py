"""
Runtime settings.

Settings come from an optional YAML file and are then overridden by
environment variables (a `.env` file in the working directory is
loaded first).  Recognised keys and their variables:

    data_dir                 RECRUITDESK_DATA_DIR
    timezone                 RECRUITDESK_TIMEZONE
    default_recruiter_id     RECRUITDESK_RECRUITER_ID
    default_recruiter_name   RECRUITDESK_RECRUITER_NAME
    log_level                RECRUITDESK_LOG_LEVEL
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv

from .errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "RECRUITDESK_"
ENV_NAMES = {
    "data_dir": "DATA_DIR",
    "timezone": "TIMEZONE",
    "default_recruiter_id": "RECRUITER_ID",
    "default_recruiter_name": "RECRUITER_NAME",
    "log_level": "LOG_LEVEL",
}


@dataclass
class Settings:
    """Settings shared by the CLI and the Activity writer."""

    data_dir: str = "data"
    timezone: str = "UTC"
    default_recruiter_id: str = "USR01"
    default_recruiter_name: str = "Recruiter"
    log_level: str = "INFO"


def _load_yaml(path: str) -> Dict[str, object]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def load_settings(path: Optional[str] = None, *, use_dotenv: bool = True) -> Settings:
    """Build `Settings` from a YAML file and the environment.

    Args:
        path: Optional YAML config file.  Unknown keys are ignored with
            a warning.
        use_dotenv: Load a `.env` file before reading the environment.

    Returns:
        The resolved settings.
    """
    if use_dotenv:
        load_dotenv()
    values: Dict[str, str] = {}
    if path:
        known = {f.name for f in fields(Settings)}
        for key, value in _load_yaml(path).items():
            if key not in known:
                logger.warning("Ignoring unknown config key %r in %s", key, path)
                continue
            values[key] = "" if value is None else str(value)
    for key, suffix in ENV_NAMES.items():
        env_value = os.getenv(ENV_PREFIX + suffix)
        if env_value:
            values[key] = env_value
    return Settings(**values)
