"""Username storage."""

from __future__ import annotations

from pathlib import Path

from ..utils.fs import atomic_write, read_text


class ConfigStore:
    """Persists the single username string in config.txt."""

    def __init__(self, config_file: Path):
        self.config_file = Path(config_file)

    def set_username(self, name: str) -> None:
        atomic_write(self.config_file, name)

    def get_username(self) -> str:
        return read_text(self.config_file) or ""
