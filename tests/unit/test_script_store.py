#!/usr/bin/env python3
"""
Unit tests for script_store module.

Tests cover:
- Saving scripts from text, text fragments and files
- Executable bit on saved scripts
- Idempotent removal
- Two-line config serialization and reloading
"""

import os
import stat

from clipscript.script_store import ScriptConfig, ScriptStore, serialize_config


def test_save_text_writes_script_and_marks_executable(store):
    """Literal text is written as the script body."""
    store.save("echo hello")

    assert store.exists()
    assert store.read() == "echo hello"
    assert os.stat(store.script_path).st_mode & stat.S_IXUSR


def test_save_joins_fragments_with_single_spaces(store):
    """A sequence of text fragments becomes one space-joined script."""
    store.save(["echo", "Hello", "World!"])

    assert store.read() == "echo Hello World!"


def test_save_from_file_copies_content(store, tmp_path):
    """from_file=True copies the referenced file."""
    source = tmp_path / "myscript.sh"
    source.write_text("#!/bin/sh\necho copied\n")

    store.save(str(source), from_file=True)

    assert store.read() == "#!/bin/sh\necho copied\n"
    assert os.stat(store.script_path).st_mode & stat.S_IXUSR
    # The source file is left untouched
    assert source.read_text() == "#!/bin/sh\necho copied\n"


def test_save_replaces_previous_script(store):
    store.save("echo first")
    store.save("echo second")

    assert store.read() == "echo second"


def test_remove_deletes_script(store):
    store.save("echo hello")

    store.remove()

    assert not store.exists()
    assert store.read() is None


def test_remove_is_idempotent(store):
    """Removing an absent script does not fail."""
    assert not store.exists()

    store.remove()
    store.remove()

    assert not store.exists()


def test_read_returns_none_without_script(store):
    assert store.read() is None


def test_serialize_config_always_has_two_lines():
    assert serialize_config(["copy", "cut"], ["after"]) == "copy cut\nafter\n"
    assert serialize_config([], []) == "\n\n"
    assert serialize_config(["paste"], []) == "paste\n\n"
    assert serialize_config([], ["before"]) == "\nbefore\n"


def test_write_config_round_trip(store):
    """Written selections reload as the same action and timing sets."""
    store.write_config(["copy", "cut"], ["after"])

    config = store.load_config()

    assert set(config.actions) == {"copy", "cut"}
    assert set(config.timings) == {"after"}
    assert store.config_path.read_text() == "copy cut\nafter\n"


def test_read_config_lines_preserves_blank_lines(store):
    store.write_config([], ["before"])

    assert store.read_config_lines() == ["", "before"]


def test_read_config_lines_none_without_file(store):
    assert store.read_config_lines() is None
    assert store.load_config() == ScriptConfig()


def test_load_config_drops_empty_tokens(store):
    store.config_path.write_text("copy  cut \nbefore\n")

    config = store.load_config()

    assert config.actions == ["copy", "cut"]
    assert config.timings == ["before"]


def test_save_creates_metadata_directory(tmp_path):
    """A clipboard whose metadata directory is missing still accepts a script."""
    from clipscript.clipboard_paths import ClipboardPaths

    store = ScriptStore(ClipboardPaths(tmp_path / "fresh"))

    store.save("echo hello")

    assert store.read() == "echo hello"
