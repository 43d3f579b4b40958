#!/usr/bin/env python3
"""
Settings Management Module.

Loads clipscript settings from a YAML file:
- Missing, empty or malformed files fall back to defaults
- Unknown keys are ignored, known keys are type-checked
- CLIPBOARD_SILENT / CLIPBOARD_NOCONFIRMATION override the file
"""

import os
import yaml
from typing import Any, Dict, Optional

from .constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_SETTINGS,
    ENV_CONFIG_PATH,
    ENV_NO_CONFIRMATION,
    ENV_SILENT,
)
from .logger import log_warning


def get_config_path() -> str:
    """Settings file path, honoring CLIPSCRIPT_CONFIG."""
    return os.environ.get(ENV_CONFIG_PATH) or DEFAULT_CONFIG_PATH


def load_settings(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings from YAML config file.

    Falls back to default values when:
    - Config file doesn't exist
    - Config file has invalid YAML
    - Config file is empty or not a mapping
    - A key holds a value of the wrong type

    Args:
        config_path: Path to YAML settings file (default: get_config_path())

    Returns:
        Settings dictionary with every key of DEFAULT_SETTINGS present
    """
    settings = DEFAULT_SETTINGS.copy()
    path = config_path or get_config_path()

    try:
        if os.path.exists(path):
            with open(path, "r") as f:
                config_data = yaml.safe_load(f)

            if isinstance(config_data, dict):
                for key, default in DEFAULT_SETTINGS.items():
                    value = config_data.get(key, default)
                    # bool is a subclass of int; keep the types apart
                    if type(value) is type(default):
                        settings[key] = value
                    else:
                        log_warning(
                            "settings",
                            f"Ignoring invalid value for '{key}': {value!r}",
                        )

    except yaml.YAMLError as e:
        log_warning("settings", "Failed to parse YAML config, using defaults", e)
    except OSError as e:
        log_warning("settings", "Failed to read config file, using defaults", e)

    if os.environ.get(ENV_SILENT):
        settings["silent"] = True
    if os.environ.get(ENV_NO_CONFIRMATION):
        settings["no_confirmation"] = True

    return settings


def save_settings(settings: Dict[str, Any], config_path: Optional[str] = None) -> None:
    """
    Write settings to the YAML config file.

    Args:
        settings: Settings dictionary (unknown keys are dropped)
        config_path: Path to YAML settings file (default: get_config_path())
    """
    path = config_path or get_config_path()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

    known = {key: settings.get(key, default) for key, default in DEFAULT_SETTINGS.items()}
    with open(path, "w") as f:
        yaml.safe_dump(known, f, default_flow_style=False, sort_keys=False)


def is_quiet(settings: Dict[str, Any]) -> bool:
    """True when confirmations should not be printed."""
    return bool(settings.get("silent") or settings.get("no_confirmation"))
