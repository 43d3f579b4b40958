#!/usr/bin/env python3
"""
Clipboard storage layout.

A clipboard lives in <root>/<name>/ with a data/ directory (the working
directory for hook scripts) and a metadata/ directory holding the script
and its config. Names starting with "_" are persistent and live under the
persistent root; everything else lives under the temporary root.
"""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .constants import (
    DATA_DIR_NAME,
    ENV_ALWAYS_PERSIST,
    ENV_PERSISTDIR,
    ENV_TMPDIR,
    METADATA_DIR_NAME,
    PERSISTENT_PREFIX,
    PERSISTENT_ROOT_NAME,
    SCRIPT_CONFIG_FILE_NAME,
    SCRIPT_FILE_NAME,
    TEMPORARY_ROOT_NAME,
)


def temporary_root() -> Path:
    """Root directory for temporary clipboards."""
    override = os.environ.get(ENV_TMPDIR)
    if override:
        return Path(override)
    return Path(tempfile.gettempdir()) / TEMPORARY_ROOT_NAME


def persistent_root() -> Path:
    """Root directory for persistent clipboards."""
    override = os.environ.get(ENV_PERSISTDIR)
    if override:
        return Path(override)
    return Path.home() / PERSISTENT_ROOT_NAME


def is_persistent(name: str) -> bool:
    """True if the clipboard called name is stored persistently."""
    return name.startswith(PERSISTENT_PREFIX) or bool(
        os.environ.get(ENV_ALWAYS_PERSIST)
    )


@dataclass(frozen=True)
class ClipboardPaths:
    """Filesystem locations belonging to one clipboard."""

    root: Path

    @classmethod
    def for_clipboard(cls, name: str) -> "ClipboardPaths":
        base = persistent_root() if is_persistent(name) else temporary_root()
        return cls(base / name)

    @property
    def data(self) -> Path:
        return self.root / DATA_DIR_NAME

    @property
    def metadata(self) -> Path:
        return self.root / METADATA_DIR_NAME

    @property
    def script(self) -> Path:
        return self.metadata / SCRIPT_FILE_NAME

    @property
    def script_config(self) -> Path:
        return self.metadata / SCRIPT_CONFIG_FILE_NAME

    def ensure(self) -> "ClipboardPaths":
        """Create the data and metadata directories if missing."""
        self.data.mkdir(parents=True, exist_ok=True)
        self.metadata.mkdir(parents=True, exist_ok=True)
        return self
