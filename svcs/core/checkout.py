"""Checkout engine.

Copies a commit's snapshot back over the working directory. Files that are
not in the snapshot are never touched or deleted.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from ..config.types import VcsPaths
from ..utils.log import log_debug, log_warning
from .commit_log import CommitLog
from .results import OperationResult


class CheckoutEngine:
    """Restores working-directory files from a commit."""
    
    def __init__(self, paths: VcsPaths, log: CommitLog):
        self.paths = paths
        self.log = log
    
    def checkout(self, commit_id: str) -> OperationResult:
        """Restore files from a commit's snapshot.
        
        Args:
            commit_id: Commit to switch to
            
        Returns:
            OperationResult with the message to show
        """
        if not commit_id or not commit_id.strip():
            return OperationResult(success=False, message="Commit id was not passed.")
        
        if commit_id not in self.log.list_commit_ids():
            return OperationResult(success=False, message="Commit does not exist.")
        
        snapshot = self.paths.commit_dir(commit_id)
        if not snapshot.is_dir():
            log_warning(f"snapshot directory for {commit_id} is missing, nothing restored")
        
        restored = 0
        for root, _, files in os.walk(snapshot, topdown=False):
            for file in files:
                src = Path(root) / file
                rel_path = src.relative_to(snapshot)
                dst = self.paths.project_root / rel_path
                
                dst.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(src, dst)
                restored += 1
        
        log_debug(f"Restored {restored} files from {commit_id}")
        return OperationResult(success=True, message=f"Switched to commit {commit_id}.", commit_id=commit_id)
