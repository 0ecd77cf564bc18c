"""
Path Configuration

Where the plugin bundle lives and where the catalog artifact is written.
"""

import os
from pathlib import Path

# Relative to the working directory, like the dashboard's app/data/components.json
DEFAULT_CATALOG_PATH = Path("data") / "components.json"


def get_project_root() -> Path:
    """Get the plugin bundle root.
    
    Uses PLUGIN_CATALOG_ROOT env var if set, otherwise the parent of the
    current working directory (the catalog tooling runs one level below
    the bundle it describes).
    """
    env_root = os.environ.get("PLUGIN_CATALOG_ROOT")
    if env_root:
        return Path(os.path.expanduser(env_root)).resolve()
    return Path.cwd().parent.resolve()


def get_catalog_path() -> Path:
    """Get the catalog artifact path (PLUGIN_CATALOG_DATA overrides)."""
    env_path = os.environ.get("PLUGIN_CATALOG_DATA")
    if env_path:
        return Path(os.path.expanduser(env_path))
    return Path.cwd() / DEFAULT_CATALOG_PATH


def resolve_in_root(root: Path, relative: str) -> Path | None:
    """
    Resolve a repository-relative path against root.
    
    Returns None when the canonical target escapes root (``..`` segments,
    absolute paths, symlinks pointing outside).
    """
    root = root.resolve()
    target = (root / relative).resolve()
    try:
        target.relative_to(root)
    except ValueError:
        return None
    if target == root:
        return None
    return target
