"""
Catalog Client

Async client for the catalog HTTP server, following the dashboard's
interaction contract:

- load: fetch the list and group it by component type
- open: fetch one component's content, falling back to an error string
- save: write content back and report a confirmation or an error

Nothing here retries. A failed save leaves the caller's buffer untouched.
"""

from dataclasses import dataclass
from typing import Any

import httpx

from plugin_catalog.catalog.models import ItemType
from plugin_catalog.utils.logger import Logger

LOAD_FAILED = "Failed to load content"


@dataclass(frozen=True)
class SaveOutcome:
    """What the editor shows after a save."""
    ok: bool
    message: str


class CatalogClient:
    """Talks to ``/api/components`` and ``/api/component/{path}``."""

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: Logger | None = None,
    ):
        self.logger = logger or Logger("client")
        self.is_loading = False
        self._client = httpx.AsyncClient(base_url=base_url.rstrip("/"), transport=transport)

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def load(self) -> dict[ItemType, list[dict[str, Any]]]:
        """Fetch the catalog list grouped by type, keeping catalog order."""
        response = await self._client.get("/api/components")
        response.raise_for_status()

        groups: dict[ItemType, list[dict[str, Any]]] = {item_type: [] for item_type in ItemType}
        for entry in response.json():
            groups[ItemType(entry["type"])].append(entry)
        return groups

    async def open(self, path: str, server: str | None = None) -> str:
        """Fetch a component's content, or the fallback string on failure."""
        params = {"server": server} if server else None
        self.is_loading = True
        try:
            response = await self._client.get(f"/api/component/{path}", params=params)
            response.raise_for_status()
            return response.json()["content"]
        except (httpx.HTTPError, ValueError, KeyError) as e:
            self.logger.warning(f"Could not load {path}: {e}")
            return LOAD_FAILED
        finally:
            self.is_loading = False

    async def save(self, path: str, content: str, server: str | None = None) -> SaveOutcome:
        """Write ``content`` for ``path`` and describe the result."""
        body: dict[str, Any] = {"content": content}
        if server:
            body["server"] = server

        try:
            response = await self._client.put(f"/api/component/{path}", json=body)
        except httpx.HTTPError as e:
            self.logger.error(f"Save failed for {path}: {e}")
            return SaveOutcome(ok=False, message=f"Failed to save: {e}")

        if response.is_success:
            return SaveOutcome(ok=True, message=f"Saved {path}")

        try:
            data = response.json()
        except ValueError:
            data = None
        message = (data.get("error") if isinstance(data, dict) else None) or response.reason_phrase
        self.logger.error(f"Save failed for {path}: {response.status_code} {message}")
        return SaveOutcome(ok=False, message=message)
