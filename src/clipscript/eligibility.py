#!/usr/bin/env python3
"""
Script eligibility decision.

Reads the script config and decides whether the script runs for the
current action, and whether it runs before the action, after it, or both.
Without a config every flag stays true.
"""

from dataclasses import dataclass
from typing import List, Optional

from .actions import Action
from .constants import TIMING_AFTER, TIMING_BEFORE
from .logger import log_debug
from .script_store import ScriptStore


@dataclass
class Eligibility:
    """Derived decision, one per process."""

    run_for_this_action: bool = True
    run_before: bool = True
    run_after: bool = True

    def allows(self, timing: str) -> bool:
        """True if the script should fire at the given timing."""
        if not self.run_for_this_action:
            return False
        if timing == TIMING_BEFORE:
            return self.run_before
        if timing == TIMING_AFTER:
            return self.run_after
        return False


def _explicit_tokens(line: str) -> Optional[List[str]]:
    """
    Split a config line on single spaces.

    A line whose last token is empty (blank, or ending in a space) counts
    as "no explicit list" and yields None.
    """
    tokens = line.split(" ")
    if not tokens or tokens[-1] == "":
        return None
    return tokens


class EligibilityFilter:
    """Applies the persisted script config to an Eligibility."""

    def __init__(self, store: ScriptStore, eligibility: Optional[Eligibility] = None):
        self.store = store
        self.eligibility = eligibility or Eligibility()

    def refresh(self, action: Action) -> Eligibility:
        """
        Re-read the config for the action being performed.

        Flags are only ever overwritten by an explicit line in the config;
        a missing file or a missing line keeps the current values.

        Args:
            action: Action currently being performed

        Returns:
            The (mutated) Eligibility held by this filter
        """
        lines = self.store.read_config_lines()
        if not lines:
            return self.eligibility

        actions = _explicit_tokens(lines[0])
        if actions is not None:
            self.eligibility.run_for_this_action = action.matches(actions)

        if len(lines) < 2:
            return self.eligibility

        timings = _explicit_tokens(lines[1])
        if timings is not None:
            self.eligibility.run_before = TIMING_BEFORE in timings
            self.eligibility.run_after = TIMING_AFTER in timings

        log_debug("eligibility", f"{action.name}: {self.eligibility}")
        return self.eligibility
