"""Commit log storage.

log.txt holds one block per commit, newest first:

    commit <id>
    Author: <name>
    <message>

Blocks are separated by a blank line. The raw text is the source of truth;
entries() is a parsed view of it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from ..utils.fs import atomic_write, read_text


COMMIT_LINE = re.compile(r"^commit (\S+)$", re.MULTILINE)
AUTHOR_PREFIX = "Author: "


@dataclass
class LogEntry:
    """One parsed log block."""
    commit_id: str
    author: str
    message: str


class CommitLog:
    """Reads and prepends commit blocks in log.txt."""
    
    def __init__(self, log_file: Path):
        self.log_file = Path(log_file)
    
    def read(self) -> str:
        """Raw log text, empty if the log does not exist."""
        return read_text(self.log_file) or ""
    
    def is_empty(self) -> bool:
        return self.read() == ""
    
    def list_commit_ids(self) -> list[str]:
        """Commit IDs in log order (most recent first)."""
        content = self.read()
        if not content:
            return []
        return COMMIT_LINE.findall(content)
    
    def latest_commit_id(self) -> str | None:
        ids = self.list_commit_ids()
        return ids[0] if ids else None
    
    def prepend(self, commit_id: str, author: str, message: str) -> None:
        """Write a new block in front of the existing ones.
        
        Args:
            commit_id: Identifier of the new commit
            author: Configured username (may be empty)
            message: Commit message, written as-is
        """
        block = f"commit {commit_id}\n{AUTHOR_PREFIX}{author}\n{message}\n"
        existing = self.read()
        if existing.strip():
            block += "\n" + existing
        atomic_write(self.log_file, block)
    
    def entries(self) -> list[LogEntry]:
        """Parse the log into entries, newest first."""
        lines = self.read().split("\n")
        headers = [
            i for i in range(len(lines) - 1)
            if COMMIT_LINE.match(lines[i]) and lines[i + 1].startswith(AUTHOR_PREFIX)
        ]
        
        entries = []
        for n, start in enumerate(headers):
            end = headers[n + 1] if n + 1 < len(headers) else len(lines)
            message = "\n".join(lines[start + 2:end])
            # Drop the newline that terminates the block
            if message.endswith("\n"):
                message = message[:-1]
            entries.append(LogEntry(
                commit_id=COMMIT_LINE.match(lines[start]).group(1),
                author=lines[start + 1][len(AUTHOR_PREFIX):],
                message=message,
            ))
        return entries
