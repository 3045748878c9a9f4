"""SVCS - a small single-user version control system.

Tracks a flat list of files, snapshots them into per-commit directories,
and keeps a plain-text commit log.
"""

__version__ = "1.0.0"
