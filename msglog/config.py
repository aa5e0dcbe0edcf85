"""Configuration module — frozen dataclass loaded from YAML and environment variables."""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    log_messages_path: str = "storages/logs/messages.log"
    log_level: str = "INFO"


def load_yaml_config(path: str | None) -> dict:
    """Load raw settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.info("Loaded YAML config from %s", path)
        return data
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config from parsed YAML data, with environment variables taking precedence."""
    section = (yaml_data or {}).get("message_log") or {}

    return Config(
        log_messages_path=os.environ.get(
            "LOG_MESSAGES_PATH", section.get("path", Config.log_messages_path)
        ),
        log_level=os.environ.get(
            "LOG_LEVEL", section.get("log_level", Config.log_level)
        ).upper(),
    )


def resolve_config() -> Config:
    """Load config from the YAML file named by ``CONFIG_PATH`` (if any) plus env vars."""
    return load_config(load_yaml_config(os.environ.get("CONFIG_PATH")))
