"""
Configuration settings for the post browser
"""

import copy
import json
import os
from typing import Any, Dict, Optional

import dotenv

from post_browser.errors import ConfigError


DEFAULT_CONFIG = {
    "sqlite": {
        "db_path": "data/posts.db",
    },
    "listing": {
        "base_path": "/blog",
        "per_page": 15,
        "search_debounce": 0.2,
    },
    "ui": {
        "date_format": "%Y-%m-%d",
    },
    "log": {
        "path": "logs/post_browser.log",
        "level": "INFO",
    },
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

CONFIG_FILE = os.path.expanduser("~/.post_browser_config.json")

# environment variable -> (section, key)
ENV_OVERRIDES = {
    "POST_BROWSER_DB": ("sqlite", "db_path"),
    "POST_BROWSER_BASE_PATH": ("listing", "base_path"),
    "POST_BROWSER_PER_PAGE": ("listing", "per_page"),
    "POST_BROWSER_LOG": ("log", "path"),
    "POST_BROWSER_LOG_LEVEL": ("log", "level"),
}


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge `overrides` into `base` section by section."""
    if not isinstance(overrides, dict):
        raise ConfigError(f"Expected a JSON object, got {type(overrides).__name__}")
    for key, value in overrides.items():
        if isinstance(base.get(key), dict):
            if not isinstance(value, dict):
                raise ConfigError(f"Config section '{key}' must be an object")
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def _validate(config: Dict[str, Any]) -> Dict[str, Any]:
    listing = config["listing"]
    try:
        listing["per_page"] = int(listing["per_page"])
        listing["search_debounce"] = float(listing["search_debounce"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid listing settings: {e}") from e

    if listing["per_page"] < 1:
        raise ConfigError("listing.per_page must be at least 1")
    if not str(listing["base_path"]).startswith("/"):
        raise ConfigError("listing.base_path must start with '/'")
    listing["base_path"] = str(listing["base_path"]).rstrip("/") or "/"

    level = str(config["log"]["level"]).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"log.level must be one of {', '.join(LOG_LEVELS)}")
    config["log"]["level"] = level
    return config


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file, .env and environment variables
    """
    dotenv.load_dotenv()
    config = copy.deepcopy(DEFAULT_CONFIG)
    path = config_file or CONFIG_FILE

    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                _merge(config, json.load(f))
        except (json.JSONDecodeError, OSError) as e:
            raise ConfigError(f"Error loading config file {path}: {e}") from e

    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            config[section][key] = value

    return _validate(config)


def save_config(config: Dict[str, Any], config_file: Optional[str] = None) -> bool:
    """
    Save configuration to file
    """
    try:
        with open(config_file or CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        return True
    except OSError:
        return False
