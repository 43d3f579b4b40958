#!/usr/bin/env python3
"""
Hook runner - executes the clipboard script around an action.

The dispatcher calls the runner exactly twice per action: once before it
executes and once after. A runner instance lives for one action execution
and tracks which of the two calls it is on:

    FRESH --invoke()--> AFTER_FIRST_CALL --invoke()--> AFTER_SECOND_CALL

Only the first two calls can run the script. Failures are reported and
never raised; a hook must not break the action it surrounds.
"""

import os
import shlex
import subprocess
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .actions import Action
from .clipboard_paths import ClipboardPaths
from .constants import ENV_ACTION, ENV_SCRIPT_TIMING, TIMING_AFTER, TIMING_BEFORE
from .eligibility import EligibilityFilter
from .errors import DiagnosticKind
from .logger import log_debug, log_error, log_info, log_warning
from .messages import print_message, render
from .script_store import ScriptStore


class HookRunState(Enum):
    FRESH = 0
    AFTER_FIRST_CALL = 1
    AFTER_SECOND_CALL = 2


_PHASE_FOR_STATE = {
    HookRunState.FRESH: TIMING_BEFORE,
    HookRunState.AFTER_FIRST_CALL: TIMING_AFTER,
}

_STATE_AFTER_PHASE = {
    TIMING_BEFORE: HookRunState.AFTER_FIRST_CALL,
    TIMING_AFTER: HookRunState.AFTER_SECOND_CALL,
}


@dataclass
class HookResult:
    """Outcome of one script execution."""

    phase: Optional[str]
    exit_code: Optional[int] = None
    diagnostics: List[Tuple[DiagnosticKind, str]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


def spawning_supported() -> bool:
    """True on platforms where scripts are run through /bin/sh."""
    return os.name == "posix"


def _export(variable: str, value: str) -> None:
    os.environ[variable] = value


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """Change into path for the duration of the block, then change back."""
    previous = os.getcwd()
    os.chdir(path)
    try:
        yield path
    finally:
        os.chdir(previous)


class HookRunner:
    """Runs one clipboard's script before and after an action."""

    def __init__(
        self,
        paths: ClipboardPaths,
        eligibility_filter: Optional[EligibilityFilter] = None,
    ):
        self.paths = paths
        self.store = ScriptStore(paths)
        self.eligibility_filter = eligibility_filter or EligibilityFilter(self.store)
        self.state = HookRunState.FRESH
        self._refreshed = False

    @property
    def eligibility(self):
        return self.eligibility_filter.eligibility

    def refresh(self, action: Action):
        """Load the eligibility decision for action."""
        self._refreshed = True
        return self.eligibility_filter.refresh(action)

    def notify_before(self, action: Action) -> Optional[HookResult]:
        return self.invoke(action, TIMING_BEFORE)

    def notify_after(self, action: Action) -> Optional[HookResult]:
        return self.invoke(action, TIMING_AFTER)

    @contextmanager
    def guard(self, action: Action) -> Iterator["HookRunner"]:
        """Run the "before" phase on entry and the "after" phase on exit."""
        self.refresh(action)
        self.notify_before(action)
        try:
            yield self
        finally:
            self.notify_after(action)

    def invoke(self, action: Action, phase: Optional[str] = None) -> Optional[HookResult]:
        """
        Perform one call of the two-call protocol.

        Args:
            action: Action currently being performed
            phase: "before" or "after"; derived from the call count when None

        Returns:
            HookResult if the script was run or could not be run here, else None
        """
        if not self._refreshed and self.state == HookRunState.FRESH:
            # Saved selections are read once, on the first call for this action
            self.refresh(action)

        requested = phase
        if phase is None:
            phase = _PHASE_FOR_STATE.get(self.state)
        elif self.state.value >= _STATE_AFTER_PHASE[phase].value:
            # This phase already happened for this action
            phase = None

        if not self.store.exists():
            self._advance(requested)
            return None

        if not spawning_supported():
            message = render("platform_unsupported")
            print_message(message)
            log_warning("hook_runner", message)
            return HookResult(
                phase=phase,
                diagnostics=[(DiagnosticKind.PLATFORM_UNSUPPORTED, message)],
            )

        result = None
        self.paths.data.mkdir(parents=True, exist_ok=True)
        with working_directory(self.paths.data):
            if phase is not None and self.eligibility.allows(phase):
                result = self._execute(action, phase)

        self._advance(requested)
        return result

    def _advance(self, requested: Optional[str]) -> None:
        if requested is None:
            step = min(self.state.value + 1, HookRunState.AFTER_SECOND_CALL.value)
        else:
            step = max(self.state.value, _STATE_AFTER_PHASE[requested].value)
        self.state = HookRunState(step)

    def _execute(self, action: Action, phase: str) -> HookResult:
        result = HookResult(phase=phase)

        for variable, value in ((ENV_ACTION, action.name), (ENV_SCRIPT_TIMING, phase)):
            try:
                _export(variable, value)
            except (OSError, ValueError) as e:
                message = render("environment_setup_failure", variable=variable)
                result.diagnostics.append(
                    (DiagnosticKind.ENVIRONMENT_SETUP_FAILURE, message)
                )
                print_message(message)
                log_warning("hook_runner", message, e)

        log_info("hook_runner", f"Running script for {action.name} ({phase})")
        # Through the shell so scripts without a shebang run as sh scripts
        completed = subprocess.run(shlex.quote(str(self.paths.script)), shell=True)
        result.exit_code = completed.returncode

        if completed.returncode != 0:
            code = completed.returncode
            if code < 0:
                # Killed by a signal; report it the way the shell would
                code = 128 - code
            message = render("child_process_failure", code=code)
            result.diagnostics.append((DiagnosticKind.CHILD_PROCESS_FAILURE, message))
            print_message(message)
            log_error("hook_runner", message)
        else:
            log_debug("hook_runner", f"Script finished for {action.name} ({phase})")

        return result
