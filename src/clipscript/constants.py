#!/usr/bin/env python3
"""
Shared constants for clipscript.

Centralizes default settings, file names and environment variable names
so the store, runner and CLI agree on them.
"""

from pathlib import Path
from typing import Dict, Any

# Default settings values
DEFAULT_SETTINGS: Dict[str, Any] = {
    "log_level": 2,
    "silent": False,
    "no_confirmation": False,
    "default_clipboard": "0",
}

# Default file paths
DEFAULT_HOME_DIR = Path.home() / ".clipscript"
DEFAULT_CONFIG_PATH = str(DEFAULT_HOME_DIR / "config.yaml")
DEFAULT_LOG_PATH = str(DEFAULT_HOME_DIR / "clipscript.log")

# Log levels
LOG_LEVEL_OFF = 0
LOG_LEVEL_ERROR = 1
LOG_LEVEL_WARNING = 2
LOG_LEVEL_INFO = 3
LOG_LEVEL_DEBUG = 4

# Clipboard layout
DATA_DIR_NAME = "data"
METADATA_DIR_NAME = "metadata"
SCRIPT_FILE_NAME = "script"
SCRIPT_CONFIG_FILE_NAME = "script_config"
TEMPORARY_ROOT_NAME = "Clipboard"
PERSISTENT_ROOT_NAME = ".clipboard"
PERSISTENT_PREFIX = "_"

# Environment variables read by clipscript
ENV_CONFIG_PATH = "CLIPSCRIPT_CONFIG"
ENV_TMPDIR = "CLIPBOARD_TMPDIR"
ENV_PERSISTDIR = "CLIPBOARD_PERSISTDIR"
ENV_ALWAYS_PERSIST = "CLIPBOARD_ALWAYS_PERSIST"
ENV_SILENT = "CLIPBOARD_SILENT"
ENV_NO_CONFIRMATION = "CLIPBOARD_NOCONFIRMATION"

# Environment variables exported to the hook script
ENV_ACTION = "CLIPBOARD_ACTION"
ENV_SCRIPT_TIMING = "CLIPBOARD_SCRIPT_TIMING"

# Timing keywords
TIMING_BEFORE = "before"
TIMING_AFTER = "after"
VALID_TIMINGS = (TIMING_BEFORE, TIMING_AFTER)

DEFAULT_INVOCATION = "clipscript"
