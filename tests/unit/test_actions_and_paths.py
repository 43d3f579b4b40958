#!/usr/bin/env python3
"""
Unit tests for the action registry and clipboard storage layout.
"""

import tempfile
from pathlib import Path

import pytest

from clipscript import actions
from clipscript.clipboard_paths import (
    ClipboardPaths,
    is_persistent,
    persistent_root,
    temporary_root,
)
from clipscript.constants import ENV_ALWAYS_PERSIST, ENV_PERSISTDIR, ENV_TMPDIR


class TestActions:
    def test_lookup_by_name_and_shortcut(self):
        assert actions.get_action("copy") is actions.get_action("cp")
        assert actions.find_action("paste").shortcut == "p"

    def test_unknown_action(self):
        assert actions.find_action("teleport") is None
        with pytest.raises(ValueError, match="teleport"):
            actions.get_action("teleport")

    def test_names_and_shortcuts_are_unique(self):
        tokens = [a.name for a in actions.ACTIONS] + [a.shortcut for a in actions.ACTIONS]
        assert len(tokens) == len(set(tokens))

    def test_matches(self):
        copy = actions.get_action("copy")
        assert copy.matches(["cut", "copy"])
        assert copy.matches(["cp"])
        assert not copy.matches(["paste", ""])

    def test_str_is_canonical_name(self):
        assert str(actions.get_action("cp")) == "copy"

    def test_script_action(self):
        assert actions.SCRIPT.name == "script"
        assert "script" in actions.action_names()


class TestClipboardPaths:
    def test_layout(self, tmp_path):
        paths = ClipboardPaths(tmp_path / "0")

        assert paths.data == tmp_path / "0" / "data"
        assert paths.metadata == tmp_path / "0" / "metadata"
        assert paths.script == tmp_path / "0" / "metadata" / "script"
        assert paths.script_config == tmp_path / "0" / "metadata" / "script_config"

    def test_ensure_creates_directories(self, tmp_path):
        paths = ClipboardPaths(tmp_path / "0").ensure()

        assert paths.data.is_dir()
        assert paths.metadata.is_dir()

    def test_temporary_clipboard(self, tmp_path):
        paths = ClipboardPaths.for_clipboard("0")
        assert paths.root == tmp_path / "tmp-clipboards" / "0"

    def test_persistent_clipboard(self, tmp_path):
        paths = ClipboardPaths.for_clipboard("_notes")
        assert paths.root == tmp_path / "persistent-clipboards" / "_notes"

    def test_always_persist(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ENV_ALWAYS_PERSIST, "1")

        assert is_persistent("0")
        assert ClipboardPaths.for_clipboard("0").root.parent == persistent_root()

    def test_default_roots(self, monkeypatch):
        monkeypatch.delenv(ENV_TMPDIR)
        monkeypatch.delenv(ENV_PERSISTDIR)

        assert temporary_root() == Path(tempfile.gettempdir()) / "Clipboard"
        assert persistent_root() == Path.home() / ".clipboard"
