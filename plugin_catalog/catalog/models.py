"""
Catalog Models
The catalog item record and its serialized form.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class ItemType(str, Enum):
    """Kinds of plugin components in the catalog."""
    AGENT = "agent"
    SKILL = "skill"
    COMMAND = "command"
    MCP = "mcp"


# Every MCP server entry points at the same config file
MCP_CONFIG_PATH = ".mcp.json"

ITEM_FIELDS = ("id", "name", "type", "description", "path", "content")


@dataclass(frozen=True)
class CatalogItem:
    """One agent, skill, command or MCP server definition."""
    id: str
    name: str
    type: ItemType
    description: str
    path: str  # Repository-relative, POSIX separators
    content: str
    
    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["type"] = self.type.value
        return data
    
    def summary(self) -> dict[str, Any]:
        """Serialized form without ``content`` (list view)."""
        data = self.to_dict()
        del data["content"]
        return data
    
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CatalogItem":
        if not isinstance(data, dict):
            raise ValueError(f"Catalog entry must be an object, got {type(data).__name__}")
        missing = [key for key in ITEM_FIELDS if key not in data]
        if missing:
            raise ValueError(f"Catalog entry missing fields: {', '.join(missing)}")
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            type=ItemType(data["type"]),
            description=str(data["description"]),
            path=str(data["path"]),
            content=str(data["content"]),
        )
