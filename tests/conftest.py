"""Shared test fixtures."""

import os

import pytest

from clipscript.actions import get_action
from clipscript.clipboard_paths import ClipboardPaths
from clipscript.constants import (
    ENV_ACTION,
    ENV_ALWAYS_PERSIST,
    ENV_CONFIG_PATH,
    ENV_NO_CONFIRMATION,
    ENV_PERSISTDIR,
    ENV_SCRIPT_TIMING,
    ENV_SILENT,
    ENV_TMPDIR,
)
from clipscript.script_store import ScriptStore


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep logs, settings, clipboards and hook variables inside tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr("clipscript.logger.DEFAULT_LOG_PATH", str(home / "clipscript.log"))
    monkeypatch.setenv(ENV_CONFIG_PATH, str(home / "config.yaml"))
    monkeypatch.setenv(ENV_TMPDIR, str(tmp_path / "tmp-clipboards"))
    monkeypatch.setenv(ENV_PERSISTDIR, str(tmp_path / "persistent-clipboards"))

    for name in (
        ENV_ACTION,
        ENV_SCRIPT_TIMING,
        ENV_SILENT,
        ENV_NO_CONFIRMATION,
        ENV_ALWAYS_PERSIST,
    ):
        # setenv first so the original (absent) state is restored afterwards
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    monkeypatch.chdir(tmp_path)
    yield home


@pytest.fixture
def paths(tmp_path):
    return ClipboardPaths(tmp_path / "clipboard").ensure()


@pytest.fixture
def store(paths):
    return ScriptStore(paths)


@pytest.fixture
def copy_action():
    return get_action("copy")


@pytest.fixture
def paste_action():
    return get_action("paste")


@pytest.fixture
def recording_script(store, paths):
    """
    Install a script that appends "<action> <timing> <cwd>" to hooks.log.

    The relative path makes the line land in the clipboard data directory.
    """
    store.save(
        '#!/bin/sh\necho "$CLIPBOARD_ACTION $CLIPBOARD_SCRIPT_TIMING $(pwd)" >> hooks.log\n'
    )
    return paths.data / "hooks.log"


@pytest.fixture
def read_hook_log():
    """Parse hooks.log written by recording_script into split lines."""

    def _read(log_path):
        if not os.path.exists(log_path):
            return []
        with open(log_path) as f:
            return [line.split() for line in f.read().splitlines()]

    return _read
