"""Utility modules for SVCS."""

from .fs import append_text, atomic_write, ensure_dir, read_text, safe_json_load
from .env import get_global_svcs_dir, get_home_dir, get_project_root, is_debug_mode
from .log import log_debug, log_warning

__all__ = [
    "append_text",
    "atomic_write",
    "ensure_dir",
    "read_text",
    "safe_json_load",
    "get_global_svcs_dir",
    "get_home_dir",
    "get_project_root",
    "is_debug_mode",
    "log_debug",
    "log_warning",
]
