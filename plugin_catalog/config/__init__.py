"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config
from .paths import get_project_root, get_catalog_path, resolve_in_root, DEFAULT_CATALOG_PATH

__all__ = [
    "ConfigManager",
    "Config",
    "get_project_root",
    "get_catalog_path",
    "resolve_in_root",
    "DEFAULT_CATALOG_PATH",
]
