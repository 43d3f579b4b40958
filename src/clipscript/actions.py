#!/usr/bin/env python3
"""
Action registry.

Every clipboard action has a canonical name (exported to hook scripts as
CLIPBOARD_ACTION) and a shortcut alias; the script config may list either.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Action:
    """A clipboard action identified by canonical name and shortcut."""

    name: str
    shortcut: str

    def matches(self, tokens: List[str]) -> bool:
        """True if the canonical name or the shortcut is among tokens."""
        return self.name in tokens or self.shortcut in tokens

    def __str__(self) -> str:
        return self.name


ACTIONS: List[Action] = [
    Action("cut", "ct"),
    Action("copy", "cp"),
    Action("paste", "p"),
    Action("clear", "clr"),
    Action("show", "sh"),
    Action("edit", "ed"),
    Action("add", "ad"),
    Action("remove", "rm"),
    Action("note", "nt"),
    Action("swap", "sw"),
    Action("status", "st"),
    Action("info", "in"),
    Action("load", "ld"),
    Action("import", "imp"),
    Action("export", "ex"),
    Action("history", "hs"),
    Action("ignore", "ig"),
    Action("search", "sr"),
    Action("undo", "u"),
    Action("redo", "re"),
    Action("config", "cfg"),
    Action("script", "scr"),
]

_BY_TOKEN: Dict[str, Action] = {}
for _action in ACTIONS:
    _BY_TOKEN[_action.name] = _action
    _BY_TOKEN[_action.shortcut] = _action

SCRIPT = _BY_TOKEN["script"]


def find_action(token: str) -> Optional[Action]:
    """Look up an action by canonical name or shortcut."""
    return _BY_TOKEN.get(token)


def get_action(token: str) -> Action:
    """
    Look up an action by canonical name or shortcut.

    Raises:
        ValueError: If token names no known action
    """
    action = find_action(token)
    if action is None:
        raise ValueError(f"Unknown action: {token}")
    return action


def action_names() -> List[str]:
    """Canonical names of all actions, in registry order."""
    return [action.name for action in ACTIONS]
