#!/usr/bin/env python3
"""
Command line interface for clipscript.

Commands:
  script  - set, remove or show the clipboard script
  run     - run a command as a clipboard action, firing the script around it
  status  - show the script and its eligibility for an action
"""

import argparse
import subprocess
import sys
from typing import Any, Dict, List, Optional

from .actions import SCRIPT, action_names, find_action, get_action
from .clipboard_paths import ClipboardPaths
from .configurator import InputMode, ScriptConfigurator, detect_input_mode
from .constants import DEFAULT_INVOCATION, TIMING_AFTER, TIMING_BEFORE, VALID_TIMINGS
from .errors import ClipScriptError
from .hook_runner import HookRunner
from .logger import log_error, log_warning
from .settings import is_quiet, load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=DEFAULT_INVOCATION,
        description="Per-clipboard scripts that run before and after clipboard actions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  clipscript script myscript.sh                    Install a script from a file
  clipscript script "echo Hello World!"            Install a script from text
  clipscript script myscript.sh --actions copy cut --timings after
  clipscript script --actions copy -- myscript.sh  End an option list with --
  clipscript script ""                             Remove the script
  clipscript script                                Show the current script
  clipscript run copy -- cp a.txt b.txt            Run a command as the copy action
  clipscript status paste                          Show eligibility for paste
        """,
    )
    parser.add_argument(
        "-c",
        "--clipboard",
        help="Clipboard name (default: setting 'default_clipboard')",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    script = subparsers.add_parser(
        "script", aliases=["scr"], help="Set, remove or show the clipboard script"
    )
    mode = script.add_mutually_exclusive_group()
    mode.add_argument(
        "--file", action="store_true", help="Treat items as script file paths"
    )
    mode.add_argument("--text", action="store_true", help="Treat items as script text")
    script.add_argument(
        "--actions",
        action="extend",
        nargs="+",
        default=[],
        metavar="ACTION",
        help=(
            "Actions the script runs for (default: all). Takes every following"
            " word, so give ITEMs first or end the list with --"
        ),
    )
    script.add_argument(
        "--timings",
        action="extend",
        nargs="+",
        default=[],
        choices=VALID_TIMINGS,
        metavar="TIMING",
        help="When the script runs: before and/or after (default: both)",
    )
    script.add_argument("items", nargs="*", help="Script file or script text")

    run = subparsers.add_parser(
        "run", help="Run a command as a clipboard action, with the script around it"
    )
    run.add_argument(
        "action", help=f"Action name or shortcut ({', '.join(action_names())})"
    )
    run.add_argument("cmd", nargs=argparse.REMAINDER, help="Command to run")

    status = subparsers.add_parser("status", help="Show script and eligibility")
    status.add_argument(
        "action", nargs="?", default=SCRIPT.name, help="Action name or shortcut"
    )

    return parser


def execute_command(
    args: argparse.Namespace, settings: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Execute a parsed clipscript command.

    Returns:
        Dictionary with:
        - success: bool
        - message: str (printed to stdout when non-empty)
        - exit_code: int
    """
    clipboard = args.clipboard or settings["default_clipboard"]
    paths = ClipboardPaths.for_clipboard(clipboard).ensure()

    if args.command in ("script", "scr"):
        return _execute_script(args, paths, settings)
    elif args.command == "run":
        return _execute_run(args, paths)
    elif args.command == "status":
        return _execute_status(args, paths)
    else:
        return {"success": False, "message": f"Unknown command: {args.command}", "exit_code": 1}


def _execute_script(
    args: argparse.Namespace, paths: ClipboardPaths, settings: Dict[str, Any]
) -> Dict[str, Any]:
    for token in args.actions:
        if find_action(token) is None:
            log_warning("cli", f"Script config names unknown action '{token}'")

    if args.file:
        input_mode = InputMode.FILE
    elif args.text:
        input_mode = InputMode.TEXT
    else:
        input_mode = detect_input_mode(args.items)

    configurator = ScriptConfigurator(
        paths, invocation=DEFAULT_INVOCATION, silent=is_quiet(settings)
    )
    try:
        configurator.apply(input_mode, args.items, args.actions, args.timings)
    except ClipScriptError as e:
        return {"success": False, "message": str(e), "exit_code": 1}

    return {"success": True, "message": "", "exit_code": 0}


def _execute_run(args: argparse.Namespace, paths: ClipboardPaths) -> Dict[str, Any]:
    try:
        action = get_action(args.action)
    except ValueError as e:
        return {"success": False, "message": str(e), "exit_code": 1}

    cmd = list(args.cmd)
    if cmd and cmd[0] == "--":
        cmd = cmd[1:]

    exit_code = 0
    runner = HookRunner(paths)
    with runner.guard(action):
        if cmd:
            try:
                exit_code = subprocess.run(cmd).returncode
            except OSError as e:
                log_error("cli", f"Failed to run {cmd[0]}", e)
                return {
                    "success": False,
                    "message": f"Failed to run {cmd[0]}: {e}",
                    "exit_code": 127,
                }

    return {"success": exit_code == 0, "message": "", "exit_code": exit_code}


def _execute_status(args: argparse.Namespace, paths: ClipboardPaths) -> Dict[str, Any]:
    try:
        action = get_action(args.action)
    except ValueError as e:
        return {"success": False, "message": str(e), "exit_code": 1}

    runner = HookRunner(paths)
    eligibility = runner.refresh(action)
    config = runner.store.load_config()

    lines: List[str] = [
        f"Clipboard: {paths.root}",
        f"Script: {'set' if runner.store.exists() else 'not set'}",
        f"Actions: {' '.join(config.actions) or 'all'}",
        f"Timings: {' '.join(config.timings) or 'before after'}",
        f"For '{action.name}':",
        f"  before: {'runs' if eligibility.allows(TIMING_BEFORE) else 'skipped'}",
        f"  after: {'runs' if eligibility.allows(TIMING_AFTER) else 'skipped'}",
    ]
    return {"success": True, "message": "\n".join(lines), "exit_code": 0}


def main(argv: Optional[List[str]] = None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    result = execute_command(args, settings)

    if result["message"]:
        stream = sys.stdout if result["success"] else sys.stderr
        print(result["message"], file=stream)

    sys.exit(result["exit_code"])


if __name__ == "__main__":
    main()
