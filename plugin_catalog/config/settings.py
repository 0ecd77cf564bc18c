"""
Settings
Configuration management for the plugin catalog.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .paths import get_catalog_path, get_project_root

TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


@dataclass
class Config:
    """Catalog configuration."""
    environment: str = "development"
    log_level: str = "DEBUG"
    host: str = "127.0.0.1"
    http_port: int = 3000
    root: Path = field(default_factory=get_project_root)
    catalog_path: Path = field(default_factory=get_catalog_path)
    sort_items: bool = False


class ConfigManager:
    """Configuration manager - loads and provides config."""
    
    _instance: Optional["ConfigManager"] = None
    
    def __init__(self):
        self._config: Optional[Config] = None
    
    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance
    
    def load(self) -> Config:
        """Load configuration from environment."""
        env = os.getenv("ENVIRONMENT", "development")
        self._config = Config(
            environment=env,
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env != "production" else "INFO"),
            host=os.getenv("HOST", "127.0.0.1"),
            http_port=int(os.getenv("PORT", "3000")),
            root=get_project_root(),
            catalog_path=get_catalog_path(),
            sort_items=_env_flag("PLUGIN_CATALOG_SORT"),
        )
        return self._config
    
    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            self.load()
        return self._config
