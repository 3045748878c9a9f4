"""Tracked file index.

The index is append-only text, one relative path per line. Nothing
deduplicates or prunes it.
"""

from __future__ import annotations

from pathlib import Path

from ..utils.fs import append_text, read_text
from ..utils.log import log_debug
from .results import OperationResult


class IndexStore:
    """Manages index.txt for one working directory."""
    
    def __init__(self, index_file: Path, project_root: Path):
        """Initialize index store.
        
        Args:
            index_file: Path of the index file
            project_root: Directory tracked paths are relative to
        """
        self.index_file = Path(index_file)
        self.project_root = Path(project_root)
    
    def track(self, path: str) -> OperationResult:
        """Start tracking a file.
        
        Existence is checked here only; commit does not re-check.
        
        Args:
            path: File path relative to the project root
            
        Returns:
            OperationResult with the message to show
        """
        if not path or not path.strip() or not (self.project_root / path).exists():
            return OperationResult(success=False, message=f"Can't find '{path}'.")
        
        append_text(self.index_file, f"{path}\n")
        log_debug(f"Tracking {path}")
        return OperationResult(success=True, message=f"The file '{path}' is tracked.")
    
    def list_tracked(self) -> list[str]:
        """Get tracked paths in insertion order, duplicates included."""
        content = read_text(self.index_file)
        if content is None or not content.strip():
            return []
        return content.strip().split("\n")
    
    def read_bytes(self) -> bytes:
        """Raw index bytes, empty if the index does not exist."""
        if not self.index_file.exists():
            return b""
        return self.index_file.read_bytes()
    
    def tracked_summary(self) -> str:
        """Text shown by `add` without arguments."""
        content = read_text(self.index_file)
        if content is None:
            return "Add a file to the index."
        return "Tracked files:\n" + content.rstrip("\n")
    
    def print_tracked(self) -> None:
        print(self.tracked_summary())
