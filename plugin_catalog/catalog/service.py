"""
Catalog Service

Answers list/detail queries from a loaded catalog snapshot and writes edits
back to the bundle's source files.

The snapshot is immutable. Saving a file does not touch it, so detail reads
keep returning the cached content until ``reload()`` or ``rebuild()`` swaps
in a fresh snapshot.
"""

import errno
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from plugin_catalog.config import Config, resolve_in_root
from plugin_catalog.errors import (
    BadRequestError,
    CatalogUnavailableError,
    NotFoundError,
    WriteFailureError,
)
from plugin_catalog.utils.logger import Logger

from .builder import BuildReport, CatalogBuilder
from .models import MCP_CONFIG_PATH, CatalogItem, ItemType
from .store import load_catalog


@dataclass(frozen=True)
class CatalogSnapshot:
    """An immutable loaded copy of the catalog artifact."""
    items: tuple[CatalogItem, ...]

    @classmethod
    def load(cls, path: Path) -> "CatalogSnapshot":
        return cls(items=tuple(load_catalog(path)))

    @property
    def paths(self) -> frozenset[str]:
        return frozenset(item.path for item in self.items)

    def find(self, path: str, server: str | None = None) -> CatalogItem | None:
        """Exact match on ``path``; ``server`` narrows MCP entries by name."""
        if path != MCP_CONFIG_PATH:
            server = None
        for item in self.items:
            if item.path != path:
                continue
            if server is not None and (item.type is not ItemType.MCP or item.name != server):
                continue
            return item
        return None


def classify_write_error(error: OSError) -> str:
    """Map an OSError from a file write to a log-friendly reason."""
    if isinstance(error, PermissionError):
        return "permission_denied"
    if isinstance(error, FileNotFoundError):
        return "missing_directory"
    if isinstance(error, IsADirectoryError):
        return "is_directory"
    if error.errno == errno.ENOSPC:
        return "disk_full"
    return "os_error"


class CatalogService:
    """List, read and save catalog components."""

    def __init__(
        self,
        root: Path,
        catalog_path: Path,
        sort_items: bool = False,
        logger: Logger | None = None,
        log_level: str | None = None,
    ):
        self.root = Path(root).resolve()
        self.catalog_path = Path(catalog_path)
        self.sort_items = sort_items
        self.log_level = log_level
        self.logger = logger or Logger("service")
        self._snapshot: CatalogSnapshot | None = None

    @classmethod
    def from_config(cls, config: Config) -> "CatalogService":
        return cls(
            root=config.root,
            catalog_path=config.catalog_path,
            sort_items=config.sort_items,
            logger=Logger("service", level=config.log_level),
            log_level=config.log_level,
        )

    # =========================================================================
    # Snapshot lifecycle
    # =========================================================================

    @property
    def snapshot(self) -> CatalogSnapshot:
        """Current snapshot, loaded on first use."""
        if self._snapshot is None:
            self._snapshot = self._load()
        return self._snapshot

    def reload(self) -> CatalogSnapshot:
        """Load the artifact again and swap it in."""
        snapshot = self._load()
        self._snapshot = snapshot
        return snapshot

    def rebuild(self) -> BuildReport:
        """Rebuild the artifact from the bundle, then reload it."""
        builder = CatalogBuilder(
            self.root,
            self.catalog_path,
            sort_items=self.sort_items,
            logger=Logger("builder", level=self.log_level),
        )
        try:
            report = builder.run()
        except OSError as e:
            reason = classify_write_error(e)
            self.logger.error(
                f"Failed to write catalog: {e}",
                extra={"catalog": self.catalog_path, "reason": reason},
            )
            raise WriteFailureError("Failed to write catalog", reason=reason) from e
        self.reload()
        return report

    def _load(self) -> CatalogSnapshot:
        try:
            snapshot = CatalogSnapshot.load(self.catalog_path)
        except (OSError, ValueError) as e:
            self.logger.error(
                f"Failed to load catalog: {e}",
                extra={"catalog": self.catalog_path},
            )
            raise CatalogUnavailableError("Catalog not available") from e
        self.logger.debug(f"Loaded catalog with {len(snapshot.items)} components")
        return snapshot

    # =========================================================================
    # Operations
    # =========================================================================

    def list_items(self) -> list[dict[str, Any]]:
        """All catalog entries without their content, in catalog order."""
        return [item.summary() for item in self.snapshot.items]

    def get_item_content(self, path: str, server: str | None = None) -> dict[str, str]:
        """Cached content for the catalog entry whose path is exactly ``path``."""
        if not path:
            raise BadRequestError("Path required")

        item = self.snapshot.find(path, server)
        if item is None:
            raise NotFoundError("Component not found")

        return {"path": path, "content": item.content}

    def save_item_content(
        self,
        path: str,
        content: Any,
        server: str | None = None,
    ) -> dict[str, Any]:
        """
        Write ``content`` to the source file behind a catalog entry.

        Only paths present in the loaded catalog are writable, and the
        resolved target must stay inside the project root. MCP entries
        share one config file, so they are edited per server.
        """
        if not path:
            raise BadRequestError("Path required")
        if not isinstance(content, str) or not content:
            raise BadRequestError("Content required")

        if path not in self.snapshot.paths:
            raise NotFoundError("Component not found")

        target = resolve_in_root(self.root, path)
        if target is None:
            self.logger.warning("Rejected write outside project root", extra={"path": path})
            raise BadRequestError("Path outside project root")

        if path == MCP_CONFIG_PATH:
            content = self._merge_mcp_server(target, server, content)

        self._write(target, path, content)
        self.logger.info(f"Saved {path}", extra={"bytes": len(content.encode("utf-8"))})
        return {"success": True, "path": path}

    # =========================================================================
    # Helpers
    # =========================================================================

    def _merge_mcp_server(self, target: Path, server: str | None, content: str) -> str:
        """Replace one server's entry in the MCP config, return the new file text."""
        if not server:
            raise BadRequestError("Server name required for MCP config edits")
        if self.snapshot.find(MCP_CONFIG_PATH, server) is None:
            raise NotFoundError("MCP server not found")

        try:
            server_config = json.loads(content)
        except json.JSONDecodeError as e:
            raise BadRequestError(f"Invalid JSON: {e.msg}") from e
        if not isinstance(server_config, dict):
            raise BadRequestError("MCP server config must be a JSON object")

        try:
            config = json.loads(target.read_bytes().decode("utf-8"))
        except (OSError, ValueError) as e:
            reason = classify_write_error(e) if isinstance(e, OSError) else "invalid_config"
            self.logger.error(
                f"Failed to read MCP config: {e}",
                extra={"path": MCP_CONFIG_PATH, "reason": reason},
            )
            raise WriteFailureError("Failed to save file", reason=reason) from e
        if not isinstance(config, dict):
            self.logger.error(
                "MCP config is not a JSON object",
                extra={"path": MCP_CONFIG_PATH, "reason": "invalid_config"},
            )
            raise WriteFailureError("Failed to save file", reason="invalid_config")

        servers = config.get("mcpServers")
        if not isinstance(servers, dict):
            servers = {}
            config["mcpServers"] = servers
        servers[server] = server_config
        return json.dumps(config, indent=2, ensure_ascii=False) + "\n"

    def _write(self, target: Path, path: str, content: str) -> None:
        try:
            target.write_text(content, encoding="utf-8", newline="")
        except OSError as e:
            reason = classify_write_error(e)
            self.logger.error(
                f"Failed to save {path}: {e}",
                extra={"path": path, "reason": reason},
            )
            raise WriteFailureError("Failed to save file", reason=reason) from e
