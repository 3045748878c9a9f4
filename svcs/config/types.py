"""Configuration types for SVCS.

Defines dataclasses for settings and the on-disk layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


DEFAULT_VCS_DIR_NAME = "vcs"


class CommitIdScheme(str, Enum):
    """How commit identifiers are derived."""
    DIGEST = "digest"  # sha1 over message, timestamp and tracked file bytes
    LEGACY = "legacy"  # index hash + message hash, collision-prone


@dataclass
class SvcsConfig:
    """Main SVCS configuration."""
    vcs_dir_name: str = DEFAULT_VCS_DIR_NAME
    commit_id_scheme: CommitIdScheme = CommitIdScheme.DIGEST
    
    @classmethod
    def from_dict(cls, data: dict) -> SvcsConfig:
        """Create SvcsConfig from dictionary."""
        storage_data = data.get("storage", {})
        dir_name = storage_data.get("dirName") if isinstance(storage_data, dict) else None
        if not isinstance(dir_name, str) or not dir_name.strip() or "/" in dir_name or "\\" in dir_name:
            dir_name = DEFAULT_VCS_DIR_NAME

        scheme_str = data.get("commitId", CommitIdScheme.DIGEST.value)
        scheme = CommitIdScheme.DIGEST
        if isinstance(scheme_str, str) and scheme_str in {s.value for s in CommitIdScheme}:
            scheme = CommitIdScheme(scheme_str)

        return cls(vcs_dir_name=dir_name.strip(), commit_id_scheme=scheme)


@dataclass(frozen=True)
class VcsPaths:
    """Resolved file locations for one working directory.

    Layout:
        <project_root>/
        └── vcs/
            ├── config.txt      # username
            ├── index.txt       # tracked paths, one per line
            ├── log.txt         # commit blocks, newest first
            └── commits/<id>/   # snapshot of tracked files
    """
    project_root: Path
    vcs_dir_name: str = DEFAULT_VCS_DIR_NAME

    @classmethod
    def for_project(cls, project_root: Path | str, config: SvcsConfig | None = None) -> VcsPaths:
        name = config.vcs_dir_name if config else DEFAULT_VCS_DIR_NAME
        return cls(project_root=Path(project_root), vcs_dir_name=name)

    @property
    def vcs_dir(self) -> Path:
        return self.project_root / self.vcs_dir_name

    @property
    def config_file(self) -> Path:
        return self.vcs_dir / "config.txt"

    @property
    def index_file(self) -> Path:
        return self.vcs_dir / "index.txt"

    @property
    def log_file(self) -> Path:
        return self.vcs_dir / "log.txt"

    @property
    def commits_dir(self) -> Path:
        return self.vcs_dir / "commits"

    def commit_dir(self, commit_id: str) -> Path:
        return self.commits_dir / commit_id
