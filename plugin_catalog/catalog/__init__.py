"""Catalog building, storage and retrieval."""

from .builder import BuildReport, CatalogBuilder
from .extract import describe, extract_description
from .models import MCP_CONFIG_PATH, CatalogItem, ItemType
from .service import CatalogService, CatalogSnapshot
from .store import load_catalog, save_catalog

__all__ = [
    "BuildReport",
    "CatalogBuilder",
    "CatalogItem",
    "CatalogService",
    "CatalogSnapshot",
    "ItemType",
    "MCP_CONFIG_PATH",
    "describe",
    "extract_description",
    "load_catalog",
    "save_catalog",
]
