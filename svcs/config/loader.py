"""Configuration loader for SVCS.

Handles loading and merging settings from the global and project files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..utils.env import get_global_svcs_dir
from ..utils.fs import safe_json_load
from .types import SvcsConfig


PROJECT_SETTINGS_NAME = ".svcs.json"
GLOBAL_SETTINGS_NAME = "settings.json"


class ConfigLoader:
    """Loads and manages SVCS configuration."""
    
    def __init__(self, project_root: Path | None = None):
        """Initialize config loader.
        
        Args:
            project_root: Project root directory (for project-local settings)
        """
        self.project_root = project_root
        self._config: SvcsConfig | None = None
    
    @property
    def config(self) -> SvcsConfig:
        """Get loaded configuration, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config
    
    def load(self) -> SvcsConfig:
        """Load configuration from all sources.
        
        Priority (highest to lowest):
        1. Project settings (<project_root>/.svcs.json)
        2. Global settings (~/.svcs/settings.json)
        3. Default values
        
        Returns:
            Merged SvcsConfig
        """
        merged: dict[str, Any] = {}
        
        global_path = get_global_svcs_dir() / GLOBAL_SETTINGS_NAME
        if global_path.exists():
            global_data = safe_json_load(global_path, {})
            if isinstance(global_data, dict):
                merged = self._deep_merge(merged, global_data)
        
        if self.project_root:
            project_path = Path(self.project_root) / PROJECT_SETTINGS_NAME
            if project_path.exists():
                project_data = safe_json_load(project_path, {})
                if isinstance(project_data, dict):
                    merged = self._deep_merge(merged, project_data)
        
        return SvcsConfig.from_dict(merged)
    
    def reload(self) -> SvcsConfig:
        """Force reload configuration."""
        self._config = None
        return self.config
    
    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Deep merge two dictionaries.
        
        Args:
            base: Base dictionary
            override: Dictionary to merge (takes precedence)
            
        Returns:
            Merged dictionary
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = value
        return result
