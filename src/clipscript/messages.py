#!/usr/bin/env python3
"""
Message loader for user-facing text.

Loads message templates from the messages/ package folder with
{{var}} placeholder replacement. Inline fallbacks keep the tool usable
when the JSON file is missing from an installation.
"""

import json
import re
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .logger import log_warning

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

FALLBACK_MESSAGES: Dict[str, str] = {
    "current_script": "Here is this clipboard's current script: {{script}}",
    "no_script": (
        "There is currently no script set for this clipboard. To set a script, "
        "add it to the end, like {{invocation}} {{action}} myscript.sh, or specify "
        'it as an argument, like {{invocation}} {{action}} "echo Hello World!".'
    ),
    "too_many_files": "You can only set one script file to run.",
    "saved": 'Saved script "{{script}}"',
    "removed": "Removed script",
    "platform_unsupported": "Clipboard scripts aren't supported on this platform yet.",
    "environment_setup_failure": "Failed to set the {{variable}} environment variable",
    "child_process_failure": "Failed to run the clipboard script (returned exit code {{code}})",
}


class MessageLoader:
    """Loads message templates from a messages directory."""

    def __init__(self, messages_base_dir: Optional[str] = None):
        """
        Initialize MessageLoader.

        Args:
            messages_base_dir: Base directory for messages (default: clipscript/messages)
        """
        if messages_base_dir:
            self.messages_dir = Path(messages_base_dir)
        else:
            self.messages_dir = Path(__file__).parent / "messages"

    def load_json_messages(self, name: str, subfolder: str) -> Dict[str, Any]:
        """
        Load JSON message file.

        Args:
            name: Filename (e.g., "messages.json")
            subfolder: Subfolder (e.g., "script")

        Returns:
            Parsed JSON content

        Raises:
            FileNotFoundError: If file not found
        """
        path = self.messages_dir / subfolder / name
        if not path.exists():
            raise FileNotFoundError(f"Messages file not found: {path}")

        return json.loads(path.read_text(encoding="utf-8"))


def format_message(template: str, variables: Optional[Dict[str, Any]] = None) -> str:
    """
    Replace {{var}} placeholders in a template.

    Placeholders are checked against the template before substitution, so
    values that themselves contain braces (script bodies) are left alone.

    Raises:
        ValueError: If the template has a placeholder with no value
    """
    variables = variables or {}
    missing = [name for name in _PLACEHOLDER.findall(template) if name not in variables]
    if missing:
        raise ValueError(f"Unreplaced placeholders in message: {missing}")

    return _PLACEHOLDER.sub(lambda m: str(variables[m.group(1)]), template)


# Load messages on module import
_message_loader = MessageLoader()
try:
    MESSAGES = _message_loader.load_json_messages("messages.json", "script")
except FileNotFoundError:
    log_warning("messages", "messages.json not found, using fallback messages", None)
    MESSAGES = {}


def render(key: str, **variables: Any) -> str:
    """Render the message template registered under key."""
    template = MESSAGES.get(key, FALLBACK_MESSAGES[key])
    return format_message(template, variables)


def print_message(text: str) -> None:
    """Print a user-facing message to stderr."""
    print(text, file=sys.stderr, flush=True)
