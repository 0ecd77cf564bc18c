"""
Shared pytest fixtures for plugin catalog tests

Builds throwaway plugin bundles on disk so builder, service and server tests
all work against the same realistic layout.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional
from unittest.mock import Mock

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# ============================================================================
# Bundle Helpers
# ============================================================================

CODE_REVIEWER = """# Code Reviewer

## Purpose: Reviews code for bugs

Read the diff and point out defects.
"""

TEST_WRITER = """# Test Writer

Writes tests. No purpose heading here.
"""

THREEJS_SKILL = """# Three.js Development

## Description

Builds 3D scenes with three.js
"""

NEW_COMPONENT = """# New Component

## Purpose: Scaffold a Vue component
"""

MCP_CONFIG = {
    "mcpServers": {
        "docs": {"type": "http", "url": "https://x"},
        "filesystem": {"command": "npx", "args": ["-y", "@modelcontextprotocol/server-filesystem"]},
    }
}


def write_bundle(
    root: Path,
    agents: Optional[Dict[str, str]] = None,
    skills: Optional[Dict[str, Optional[str]]] = None,
    commands: Optional[Dict[str, str]] = None,
    mcp: Optional[Any] = None,
) -> Path:
    """
    Lay out a plugin bundle under root.

    Args:
        agents: filename -> text, written to agents/
        skills: dirname -> SKILL.md text (None creates the folder without SKILL.md)
        commands: filename -> text, written to commands/
        mcp: object dumped to .mcp.json (a str is written verbatim)
    """
    root.mkdir(parents=True, exist_ok=True)

    if agents is not None:
        (root / "agents").mkdir(parents=True, exist_ok=True)
        for filename, text in agents.items():
            (root / "agents" / filename).write_text(text, encoding="utf-8")

    if skills is not None:
        (root / "skills").mkdir(parents=True, exist_ok=True)
        for dirname, text in skills.items():
            skill_dir = root / "skills" / dirname
            skill_dir.mkdir(parents=True, exist_ok=True)
            if text is not None:
                (skill_dir / "SKILL.md").write_text(text, encoding="utf-8")

    if commands is not None:
        (root / "commands").mkdir(parents=True, exist_ok=True)
        for filename, text in commands.items():
            (root / "commands" / filename).write_text(text, encoding="utf-8")

    if mcp is not None:
        text = mcp if isinstance(mcp, str) else json.dumps(mcp, indent=2)
        (root / ".mcp.json").write_text(text, encoding="utf-8")

    return root


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from plugin_catalog.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def bundle(tmp_path):
    """A plugin bundle with two agents, one skill, one command and two MCP servers."""
    return write_bundle(
        tmp_path / "bundle",
        agents={
            "code-reviewer.md": CODE_REVIEWER,
            "test-writer.md": TEST_WRITER,
            "README.txt": "not an agent",
        },
        skills={
            "threejs-development": THREEJS_SKILL,
            "drafts": None,
        },
        commands={"new-component.md": NEW_COMPONENT},
        mcp=MCP_CONFIG,
    )


@pytest.fixture
def catalog_path(tmp_path):
    """Artifact location outside the bundle."""
    return tmp_path / "dashboard" / "data" / "components.json"


@pytest.fixture
def builder(bundle, catalog_path, logger):
    """Sorted builder over the standard bundle."""
    from plugin_catalog.catalog.builder import CatalogBuilder
    return CatalogBuilder(bundle, catalog_path, sort_items=True, logger=logger)


@pytest.fixture
def service(builder, bundle, catalog_path, logger):
    """Catalog service over a freshly built artifact."""
    from plugin_catalog.catalog.service import CatalogService
    builder.run()
    return CatalogService(bundle, catalog_path, sort_items=True, logger=logger)


@pytest.fixture
def code_reviewer_text():
    """Source text of the standard bundle's code-reviewer agent."""
    return CODE_REVIEWER


@pytest.fixture
def mcp_config():
    """The standard bundle's .mcp.json object."""
    return MCP_CONFIG


@pytest.fixture
def make_bundle():
    """Factory laying out custom bundles, see ``write_bundle``."""
    return write_bundle
