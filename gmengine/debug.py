"""Diagnostic helpers: the engine's fatal error type and debug output."""

from __future__ import annotations

import sys


class EngineError(Exception):
    """Raised when the engine meets a condition it cannot continue from."""


def output_string(text: str) -> None:
    """Write one line of debug output to standard error."""
    sys.stderr.write(text + "\n")
    sys.stderr.flush()