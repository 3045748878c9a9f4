"""Result type shared by every SVCS operation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class OperationResult:
    """Result of a store or controller operation.

    User-input problems come back with success=False; the message is what
    the CLI prints either way.
    """
    success: bool
    message: str = ""
    commit_id: str | None = None
