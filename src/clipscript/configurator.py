#!/usr/bin/env python3
"""
Script configurator - the user-facing "script" action.

Installs, removes and shows a clipboard's script and records which
actions and timings it applies to.
"""

import os
from enum import Enum
from typing import Optional, Sequence

from .actions import SCRIPT, Action
from .clipboard_paths import ClipboardPaths
from .constants import DEFAULT_INVOCATION
from .eligibility import EligibilityFilter
from .errors import UserError
from .logger import log_info
from .messages import print_message, render
from .script_store import ScriptStore


class InputMode(Enum):
    FILE = "file"
    TEXT = "text"


def detect_input_mode(items: Sequence[str]) -> InputMode:
    """
    Decide whether items name script files or are script text.

    No items, or items that are all existing regular files, mean FILE.
    """
    if all(os.path.isfile(item) for item in items):
        return InputMode.FILE
    return InputMode.TEXT


class ScriptConfigurator:
    """Applies a "script" action request to one clipboard."""

    def __init__(
        self,
        paths: ClipboardPaths,
        invocation: str = DEFAULT_INVOCATION,
        silent: bool = False,
        eligibility_filter: Optional[EligibilityFilter] = None,
    ):
        self.paths = paths
        self.store = ScriptStore(paths)
        self.eligibility_filter = eligibility_filter or EligibilityFilter(self.store)
        self.invocation = invocation
        self.silent = silent

    def apply(
        self,
        input_mode: InputMode,
        items: Sequence[str],
        actions: Sequence[str] = (),
        timings: Sequence[str] = (),
        current_action: Action = SCRIPT,
    ) -> Optional[str]:
        """
        Record the selections, then install, remove or show the script.

        Args:
            input_mode: FILE when items are paths, TEXT when they are script text
            items: Script file paths or script text fragments
            actions: Actions the script should run for (empty: all)
            timings: "before" and/or "after" (empty: both)
            current_action: Action being performed, named in guidance text

        Returns:
            Script content after the operation, or None if no script is set

        Raises:
            UserError: If more than one script file is given
        """
        self.store.write_config(actions, timings)
        self.eligibility_filter.refresh(current_action)

        items = list(items)
        if not items:
            return self.inspect(current_action)

        if input_mode == InputMode.FILE:
            if len(items) > 1:
                raise UserError(render("too_many_files"))
            self.store.save(items[0], from_file=True)
            return self._confirm_saved()

        if items == [""]:
            self.store.remove()
            log_info("configurator", f"Removed script for {self.paths.root}")
            if not self.silent:
                print_message(render("removed"))
            return None

        self.store.save(items)
        return self._confirm_saved()

    def inspect(self, current_action: Action = SCRIPT) -> Optional[str]:
        """Show the current script, or explain how to set one."""
        script = self.store.read()
        if script is None:
            print_message(
                render(
                    "no_script",
                    invocation=self.invocation,
                    action=current_action.name,
                )
            )
        else:
            print_message(render("current_script", script=script))
        return script

    def _confirm_saved(self) -> Optional[str]:
        script = self.store.read()
        if not self.silent:
            print_message(render("saved", script=script))
        return script
