"""
Catalog Builder

Scans the plugin bundle and writes the catalog artifact. Four sources,
scanned in this order:

1. Agents   - agents/*.md
2. Skills   - skills/<name>/SKILL.md
3. Commands - commands/*.md
4. MCP      - .mcp.json (one item per mcpServers entry)

Each source is scanned independently: a missing directory or unparseable
config drops that source, an unreadable file drops that file, and the
build carries on with the rest.
"""

import json
import os
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from plugin_catalog.errors import SourceUnavailable
from plugin_catalog.utils.logger import Logger

from .extract import (
    MARKDOWN_SUFFIX,
    agent_name,
    command_name,
    describe,
    describe_mcp_server,
    render_mcp_config,
    skill_name,
    strip_suffix,
)
from .models import MCP_CONFIG_PATH, CatalogItem, ItemType
from .store import save_catalog

AGENTS_DIR = "agents"
SKILLS_DIR = "skills"
COMMANDS_DIR = "commands"
SKILL_FILE = "SKILL.md"


@dataclass
class BuildReport:
    """Result of one build-and-write pass."""
    items: list[CatalogItem]
    output_path: Path
    errors: list[SourceUnavailable] = field(default_factory=list)

    @property
    def counts(self) -> dict[str, int]:
        counter = Counter(item.type.value for item in self.items)
        return {item_type.value: counter.get(item_type.value, 0) for item_type in ItemType}


class CatalogBuilder:
    """Builds the component catalog from a plugin bundle root."""

    def __init__(
        self,
        root: Path,
        output_path: Path,
        sort_items: bool = False,
        logger: Logger | None = None,
    ):
        """
        Args:
            root: Plugin bundle root containing agents/, skills/, commands/, .mcp.json
            output_path: Where the catalog artifact is written
            sort_items: Sort each source by file name instead of listing order
            logger: Logger override
        """
        self.root = Path(root)
        self.output_path = Path(output_path)
        self.sort_items = sort_items
        self.logger = logger or Logger("builder")
        self.errors: list[SourceUnavailable] = []

    # =========================================================================
    # Public API
    # =========================================================================

    def build(self) -> list[CatalogItem]:
        """Scan all four sources. Never raises for a bad source."""
        self.errors = []
        items: list[CatalogItem] = []
        for source, scan in (
            ("agents", self._scan_agents),
            ("skills", self._scan_skills),
            ("commands", self._scan_commands),
            ("mcp", self._scan_mcp),
        ):
            try:
                items.extend(scan())
            except (OSError, ValueError) as e:
                self._record(source, e)
        return items

    def write(self, items: list[CatalogItem]) -> Path:
        """Overwrite the catalog artifact with items."""
        return save_catalog(self.output_path, items)

    def run(self) -> BuildReport:
        """Build, write, and report the item count."""
        items = self.build()
        path = self.write(items)
        self.logger.info(f"Generated data for {len(items)} components", extra={"output": path})
        return BuildReport(items=items, output_path=path, errors=list(self.errors))

    # =========================================================================
    # Sources
    # =========================================================================

    def _scan_agents(self) -> list[CatalogItem]:
        items = []
        for filename in self._list(self.root / AGENTS_DIR):
            if not filename.endswith(MARKDOWN_SUFFIX):
                continue
            rel_path = f"{AGENTS_DIR}/{filename}"
            content = self._read_item(rel_path)
            if content is None:
                continue
            items.append(CatalogItem(
                id=f"agent-{strip_suffix(filename)}",
                name=agent_name(filename),
                type=ItemType.AGENT,
                description=describe(content, ItemType.AGENT),
                path=rel_path,
                content=content,
            ))
        return items

    def _scan_skills(self) -> list[CatalogItem]:
        items = []
        skills_dir = self.root / SKILLS_DIR
        for dirname in self._list(skills_dir):
            # Skill folders without a SKILL.md are not skills
            if not (skills_dir / dirname / SKILL_FILE).exists():
                continue
            rel_path = f"{SKILLS_DIR}/{dirname}/{SKILL_FILE}"
            content = self._read_item(rel_path)
            if content is None:
                continue
            items.append(CatalogItem(
                id=f"skill-{dirname}",
                name=skill_name(dirname),
                type=ItemType.SKILL,
                description=describe(content, ItemType.SKILL),
                path=rel_path,
                content=content,
            ))
        return items

    def _scan_commands(self) -> list[CatalogItem]:
        items = []
        for filename in self._list(self.root / COMMANDS_DIR):
            if not filename.endswith(MARKDOWN_SUFFIX):
                continue
            rel_path = f"{COMMANDS_DIR}/{filename}"
            content = self._read_item(rel_path)
            if content is None:
                continue
            name = strip_suffix(filename)
            items.append(CatalogItem(
                id=f"command-{name}",
                name=command_name(filename),
                type=ItemType.COMMAND,
                description=describe(content, ItemType.COMMAND),
                path=rel_path,
                content=content,
            ))
        return items

    def _scan_mcp(self) -> list[CatalogItem]:
        config = json.loads(_read_text(self.root / MCP_CONFIG_PATH))
        servers = config.get("mcpServers") if isinstance(config, dict) else None
        if not isinstance(servers, dict):
            return []
        return [
            CatalogItem(
                id=f"mcp-{name}",
                name=name,
                type=ItemType.MCP,
                description=describe_mcp_server(server),
                path=MCP_CONFIG_PATH,
                content=render_mcp_config(server),
            )
            for name, server in servers.items()
        ]

    # =========================================================================
    # Helpers
    # =========================================================================

    def _list(self, directory: Path) -> list[str]:
        names = os.listdir(directory)
        return sorted(names) if self.sort_items else names

    def _read_item(self, rel_path: str) -> str | None:
        """Read one source file; log and return None if it is unreadable."""
        try:
            return _read_text(self.root / rel_path)
        except (OSError, UnicodeDecodeError) as e:
            self._record(rel_path, e)
            return None

    def _record(self, source: str, error: Exception) -> None:
        reason = f"{type(error).__name__}: {error}"
        self.errors.append(SourceUnavailable(source=source, reason=reason))
        self.logger.error(f"Error reading {source}: {reason}")


def _read_text(path: Path) -> str:
    # Decode bytes directly so line endings are kept verbatim
    return path.read_bytes().decode("utf-8")
