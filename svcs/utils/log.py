"""Diagnostic output for SVCS.

stdout carries command results only; everything here goes to stderr.
"""

from __future__ import annotations

import sys

from .env import is_debug_mode


def log_debug(message: str) -> None:
    """Log debug message to stderr.
    
    Only outputs if SVCS_DEBUG is set.
    """
    if is_debug_mode():
        print(f"[svcs] {message}", file=sys.stderr)


def log_warning(message: str) -> None:
    """Log a warning to stderr unconditionally."""
    print(f"[svcs] warning: {message}", file=sys.stderr)
