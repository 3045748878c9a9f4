"""SVCS controller - main orchestrator.

Owns the resolved layout and settings and builds every store from them.
"""

from __future__ import annotations

from pathlib import Path

from ..config import ConfigLoader, SvcsConfig, VcsPaths
from ..utils.fs import ensure_dir
from .checkout import CheckoutEngine
from .commit_log import CommitLog, LogEntry
from .commit_store import CommitStore
from .config_store import ConfigStore
from .index_store import IndexStore
from .results import OperationResult


class VersionControl:
    """Main controller for SVCS operations."""
    
    def __init__(self, project_root: Path | str | None = None, config: SvcsConfig | None = None):
        """Initialize controller.
        
        Args:
            project_root: Working directory root (defaults to cwd)
            config: Settings; loaded from the settings files when omitted
        """
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self._config_loader = ConfigLoader(project_root=self.project_root)
        self._config = config
        self._index: IndexStore | None = None
        self._log: CommitLog | None = None
        self._commits: CommitStore | None = None
    
    @property
    def config(self) -> SvcsConfig:
        """Get current configuration."""
        if self._config is None:
            self._config = self._config_loader.config
        return self._config
    
    @property
    def paths(self) -> VcsPaths:
        return VcsPaths.for_project(self.project_root, self.config)
    
    @property
    def users(self) -> ConfigStore:
        return ConfigStore(self.paths.config_file)
    
    @property
    def index(self) -> IndexStore:
        if self._index is None:
            self._index = IndexStore(self.paths.index_file, self.project_root)
        return self._index
    
    @property
    def commit_log(self) -> CommitLog:
        if self._log is None:
            self._log = CommitLog(self.paths.log_file)
        return self._log
    
    @property
    def commits(self) -> CommitStore:
        """Get commit store (lazy init)."""
        if self._commits is None:
            self._commits = CommitStore(
                paths=self.paths,
                index=self.index,
                log=self.commit_log,
                config_store=self.users,
                commit_id_scheme=self.config.commit_id_scheme,
            )
        return self._commits
    
    def init_layout(self) -> Path:
        """Create the VCS directory if needed and return it."""
        return ensure_dir(self.paths.vcs_dir)
    
    def config_username(self, new_username: str = "") -> str:
        """Set the username when one is given, then return the stored one."""
        if new_username:
            self.users.set_username(new_username)
        return self.users.get_username()
    
    def add(self, path: str) -> OperationResult:
        return self.index.track(path)
    
    def tracked_summary(self) -> str:
        return self.index.tracked_summary()
    
    def list_tracked(self) -> list[str]:
        return self.index.list_tracked()
    
    def log(self) -> OperationResult:
        """Get the commit history.
        
        Returns:
            success=False with "No commits yet." when the log is empty,
            otherwise success=True with the raw log text
        """
        content = self.commit_log.read()
        if not content:
            return OperationResult(success=False, message="No commits yet.")
        return OperationResult(success=True, message=content.rstrip("\n"))
    
    def log_entries(self) -> list[LogEntry]:
        return self.commit_log.entries()
    
    def list_commit_ids(self) -> list[str]:
        return self.commit_log.list_commit_ids()
    
    def commit(self, message: str = "") -> OperationResult:
        return self.commits.commit(message)
    
    def checkout(self, commit_id: str = "") -> OperationResult:
        engine = CheckoutEngine(self.paths, self.commit_log)
        return engine.checkout(commit_id)
