"""Commit storage for SVCS.

Snapshots tracked files into commits/<id>/ and records the commit in the
log. Also holds the working-directory comparator used to skip empty commits.
"""

from __future__ import annotations

import shutil
from datetime import datetime
from pathlib import Path, PurePath

from ..config.types import CommitIdScheme, VcsPaths
from ..utils.log import log_debug, log_warning
from .commit_id import digest_commit_id, legacy_commit_id
from .commit_log import CommitLog
from .config_store import ConfigStore
from .index_store import IndexStore
from .results import OperationResult


def snapshot_relpath(tracked_path: str) -> PurePath:
    """Location of a tracked file inside a snapshot directory.

    Anchors and '..' segments are dropped so every copy stays under the
    snapshot root.
    """
    pure = PurePath(tracked_path)
    parts = [p for p in pure.parts if p not in (pure.anchor, "", ".", "..")]
    return PurePath(*parts)


class CommitStore:
    """Creates commits and compares the working directory to them."""
    
    def __init__(
        self,
        paths: VcsPaths,
        index: IndexStore,
        log: CommitLog,
        config_store: ConfigStore,
        commit_id_scheme: CommitIdScheme = CommitIdScheme.DIGEST,
    ):
        """Initialize commit store.
        
        Args:
            paths: Resolved layout of the working directory
            index: Source of tracked paths
            log: Commit log to record into
            config_store: Source of the author name
            commit_id_scheme: How new commit IDs are derived
        """
        self.paths = paths
        self.index = index
        self.log = log
        self.config_store = config_store
        self.commit_id_scheme = commit_id_scheme
    
    @property
    def project_root(self) -> Path:
        return self.paths.project_root
    
    def snapshot_dir(self, commit_id: str) -> Path:
        return self.paths.commit_dir(commit_id)
    
    def is_clean(self, commit_id: str) -> bool:
        """Check whether tracked files match a commit's snapshot.
        
        Only currently tracked files are compared; files dropped from the
        index since that commit do not make the directory dirty.
        
        Args:
            commit_id: Commit to compare against
            
        Returns:
            True if every tracked file exists in the snapshot with identical bytes
        """
        snapshot = self.snapshot_dir(commit_id)
        for tracked in self.index.list_tracked():
            committed = snapshot / snapshot_relpath(tracked)
            if not committed.is_file():
                log_debug(f"{tracked} missing from commit {commit_id}")
                return False
            
            working = self.project_root / tracked
            if not working.is_file():
                log_debug(f"{tracked} missing from working directory")
                return False
            
            if working.read_bytes() != committed.read_bytes():
                log_debug(f"{tracked} differs from commit {commit_id}")
                return False
        
        return True
    
    def commit(self, message: str) -> OperationResult:
        """Snapshot every tracked file as a new commit.
        
        Args:
            message: Commit message; blank messages are rejected
            
        Returns:
            OperationResult carrying the new commit ID on success
        """
        if not message or not message.strip():
            return OperationResult(success=False, message="Message was not passed.")
        
        author = self.config_store.get_username()
        
        latest = self.log.latest_commit_id()
        if latest is not None and self.is_clean(latest):
            return OperationResult(success=True, message="Nothing to commit.")
        
        tracked = self.index.list_tracked()
        commit_id = self._new_commit_id(message, tracked)
        
        commit_dir = self.snapshot_dir(commit_id)
        if commit_dir.exists():
            log_warning(f"commit id {commit_id} already exists, existing snapshot kept")
            return OperationResult(success=False, message=f"Commit {commit_id} already exists.")
        commit_dir.mkdir(parents=True)
        
        for path in tracked:
            dst = commit_dir / snapshot_relpath(path)
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(self.project_root / path, dst)
        
        self.log.prepend(commit_id, author, message)
        log_debug(f"Created commit {commit_id} with {len(tracked)} files")
        
        return OperationResult(success=True, message="Changes are committed.", commit_id=commit_id)
    
    def _new_commit_id(self, message: str, tracked: list[str]) -> str:
        if self.commit_id_scheme == CommitIdScheme.LEGACY:
            return legacy_commit_id(self.index.read_bytes(), message)
        
        files = [(path, (self.project_root / path).read_bytes()) for path in tracked]
        return digest_commit_id(message, datetime.now().isoformat(), files)
