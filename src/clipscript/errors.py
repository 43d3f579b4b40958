#!/usr/bin/env python3
"""
Error taxonomy for clipscript.

Only UserError is raised. The diagnostic kinds describe recoverable
conditions that are reported and then ignored, since a script hook must
never break the action it surrounds.
"""

from enum import Enum


class ClipScriptError(Exception):
    """Base exception for clipscript."""


class UserError(ClipScriptError):
    """Invalid request from the user; aborts only the current operation."""


class DiagnosticKind(str, Enum):
    """Non-fatal conditions reported while running a hook."""

    PLATFORM_UNSUPPORTED = "platform_unsupported"
    ENVIRONMENT_SETUP_FAILURE = "environment_setup_failure"
    CHILD_PROCESS_FAILURE = "child_process_failure"
