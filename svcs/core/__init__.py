"""Core modules for SVCS."""

from .checkout import CheckoutEngine
from .commit_log import CommitLog, LogEntry
from .commit_store import CommitStore
from .config_store import ConfigStore
from .controller import VersionControl
from .index_store import IndexStore
from .results import OperationResult

__all__ = [
    "CheckoutEngine",
    "CommitLog",
    "LogEntry",
    "CommitStore",
    "ConfigStore",
    "VersionControl",
    "IndexStore",
    "OperationResult",
]
