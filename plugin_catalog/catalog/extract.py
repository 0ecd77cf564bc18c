"""
Description and name extraction for catalog items.

Pure functions over file text and file names; no filesystem access.
"""

import json
import re
from typing import Any

from .models import ItemType

# ``[:\s]*`` may cross a newline, so a bare "## Description" heading picks up
# the first non-blank line below it.
DESCRIPTION_PATTERN = re.compile(r"##\s*(?:Purpose|Description)[:\s]*([^\n]+)", re.IGNORECASE)

DEFAULT_DESCRIPTIONS = {
    ItemType.AGENT: "AI agent for specialized tasks",
    ItemType.SKILL: "Pattern/skill for development",
    ItemType.COMMAND: "Scaffold command",
    ItemType.MCP: "stdio server",
}

MARKDOWN_SUFFIX = ".md"


def extract_description(text: str) -> str | None:
    """Return the text after the first Purpose/Description heading, if any."""
    match = DESCRIPTION_PATTERN.search(text)
    if not match:
        return None
    description = match.group(1).rstrip()
    return description or None


def describe(text: str, item_type: ItemType) -> str:
    """Description for a markdown-backed item, with the per-type fallback."""
    return extract_description(text) or DEFAULT_DESCRIPTIONS[item_type]


def strip_suffix(filename: str) -> str:
    """Drop the markdown extension from a file name."""
    if filename.endswith(MARKDOWN_SUFFIX):
        return filename[:-len(MARKDOWN_SUFFIX)]
    return filename


def agent_name(filename: str) -> str:
    """``code-reviewer.md`` -> ``Code reviewer``."""
    name = strip_suffix(filename).replace("-", " ")
    return name[:1].upper() + name[1:]


def skill_name(dirname: str) -> str:
    """``threejs-development`` -> ``Threejs Development``."""
    words = dirname.replace("-", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def command_name(filename: str) -> str:
    """``new-component.md`` -> ``/new-component``."""
    return "/" + strip_suffix(filename)


def describe_mcp_server(config: Any) -> str:
    """``HTTP: <url>`` for http transports, ``stdio server`` otherwise."""
    if isinstance(config, dict) and config.get("type") == "http":
        return f"HTTP: {config.get('url')}"
    return DEFAULT_DESCRIPTIONS[ItemType.MCP]


def render_mcp_config(config: Any) -> str:
    """Pretty-print one server's config object the way the catalog stores it."""
    return json.dumps(config, indent=2, ensure_ascii=False)
