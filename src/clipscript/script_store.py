#!/usr/bin/env python3
"""
Script Store Module.

Persists the clipboard script and its eligibility config:
- Save a script from a file or from literal text
- Remove and read the script
- Write and read the two-line script config (actions / timings)

Filesystem errors are not handled here; callers see them as raised.
"""

import os
import shutil
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .clipboard_paths import ClipboardPaths
from .logger import log_debug, log_info


@dataclass
class ScriptConfig:
    """Parsed view of the script config file."""

    actions: List[str] = field(default_factory=list)
    timings: List[str] = field(default_factory=list)


def _serialize_line(tokens: Sequence[str]) -> str:
    """Join tokens with single spaces and terminate with a newline."""
    return " ".join(tokens) + "\n"


def serialize_config(actions: Sequence[str], timings: Sequence[str]) -> str:
    """
    Serialize the two-line config format.

    The result always has exactly two lines, even when one is empty.

    Args:
        actions: Action names or shortcuts
        timings: Subset of "before" / "after"

    Returns:
        Config file content
    """
    return _serialize_line(actions) + _serialize_line(timings)


def _make_executable(path: Path) -> None:
    """Add the owner-execute bit to path."""
    mode = os.stat(path).st_mode
    os.chmod(path, mode | stat.S_IXUSR)


class ScriptStore:
    """Reads and writes the script artifact and config for one clipboard."""

    def __init__(self, paths: ClipboardPaths):
        self.paths = paths

    @property
    def script_path(self) -> Path:
        return self.paths.script

    @property
    def config_path(self) -> Path:
        return self.paths.script_config

    def exists(self) -> bool:
        return self.script_path.is_file()

    def save(self, body: Union[str, Sequence[str]], from_file: bool = False) -> None:
        """
        Replace the script artifact and mark it executable.

        Args:
            body: Path of a script file (from_file=True), literal script
                text, or a sequence of text fragments joined with spaces
            from_file: Copy the file at body instead of writing text
        """
        self.remove()
        self.paths.metadata.mkdir(parents=True, exist_ok=True)

        if from_file:
            shutil.copy(str(body), str(self.script_path))
            log_info("script_store", f"Installed script from {body}")
        else:
            text = body if isinstance(body, str) else " ".join(body)
            self.script_path.write_text(text, encoding="utf-8")
            log_info("script_store", "Installed script from text")

        _make_executable(self.script_path)

    def remove(self) -> None:
        """Delete the script artifact; does nothing if it is absent."""
        if self.script_path.exists():
            self.script_path.unlink()
            log_info("script_store", f"Removed script {self.script_path}")

    def read(self) -> Optional[str]:
        """Current script content, or None when no script is set."""
        if not self.exists():
            return None
        return self.script_path.read_text(encoding="utf-8", errors="replace")

    def write_config(self, actions: Sequence[str], timings: Sequence[str]) -> None:
        """
        Persist the action and timing selections.

        Args:
            actions: Action names or shortcuts (empty: every action)
            timings: Subset of "before" / "after" (empty: both)
        """
        self.paths.metadata.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(serialize_config(actions, timings), encoding="utf-8")
        log_debug(
            "script_store",
            f"Wrote script config actions={list(actions)} timings={list(timings)}",
        )

    def read_config_lines(self) -> Optional[List[str]]:
        """
        Lines of the config file, blank lines preserved.

        Returns:
            List of lines without terminators, or None if the file is absent
        """
        if not self.config_path.is_file():
            return None
        return self.config_path.read_text(encoding="utf-8").splitlines()

    def load_config(self) -> ScriptConfig:
        """Parsed config with empty tokens dropped; defaults when absent."""
        lines = self.read_config_lines() or []
        config = ScriptConfig()
        if len(lines) > 0:
            config.actions = [token for token in lines[0].split(" ") if token]
        if len(lines) > 1:
            config.timings = [token for token in lines[1].split(" ") if token]
        return config
