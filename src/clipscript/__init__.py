"""Per-clipboard scripts that run before and after clipboard actions."""

from .actions import Action, find_action, get_action
from .clipboard_paths import ClipboardPaths
from .configurator import InputMode, ScriptConfigurator, detect_input_mode
from .eligibility import Eligibility, EligibilityFilter
from .errors import ClipScriptError, DiagnosticKind, UserError
from .hook_runner import HookResult, HookRunner, HookRunState
from .script_store import ScriptConfig, ScriptStore

__version__ = "1.0.0"

__all__ = [
    "Action",
    "ClipScriptError",
    "ClipboardPaths",
    "DiagnosticKind",
    "Eligibility",
    "EligibilityFilter",
    "HookResult",
    "HookRunState",
    "HookRunner",
    "InputMode",
    "ScriptConfig",
    "ScriptConfigurator",
    "ScriptStore",
    "UserError",
    "detect_input_mode",
    "find_action",
    "get_action",
]
