"""
Catalog artifact storage.

The artifact is a JSON array of catalog items. It is the only hand-off
between the builder and the server and carries no schema version.
"""

import json
from pathlib import Path
from typing import Iterable

from .models import CatalogItem


def save_catalog(path: Path, items: Iterable[CatalogItem]) -> Path:
    """Write the catalog, creating the parent directory if needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [item.to_dict() for item in items]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def load_catalog(path: Path) -> list[CatalogItem]:
    """
    Load the catalog artifact.
    
    Raises:
        FileNotFoundError: artifact does not exist
        ValueError: artifact is not a JSON array of catalog entries
    """
    content = Path(path).read_text(encoding="utf-8")
    data = json.loads(content)
    if not isinstance(data, list):
        raise ValueError(f"Catalog must be a JSON array, got {type(data).__name__}")
    return [CatalogItem.from_dict(entry) for entry in data]
