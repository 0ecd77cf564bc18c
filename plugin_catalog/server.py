#!/usr/bin/env python3
"""
Plugin Catalog MCP Server
Exposes the component catalog as MCP tools over stdio, so the assistant can
browse and edit its own plugin bundle.
"""

import json
from typing import Any

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from plugin_catalog import __package_name__, __version__
from plugin_catalog.catalog.service import CatalogService
from plugin_catalog.config import ConfigManager
from plugin_catalog.errors import CatalogError
from plugin_catalog.utils.logger import Logger

PATH_PROPERTY = {
    "type": "string",
    "description": "Repository-relative path, e.g. agents/code-reviewer.md or .mcp.json",
}
SERVER_PROPERTY = {
    "type": "string",
    "description": "MCP server name, required when path is .mcp.json",
}

TOOLS = [
    types.Tool(
        name="list_components",
        description="List agents, skills, commands and MCP servers in the plugin catalog.",
        inputSchema={"type": "object", "properties": {}},
    ),
    types.Tool(
        name="get_component",
        description="Get the catalogued content of one component by its path.",
        inputSchema={
            "type": "object",
            "properties": {"path": PATH_PROPERTY, "server": SERVER_PROPERTY},
            "required": ["path"],
        },
    ),
    types.Tool(
        name="save_component",
        description="Overwrite the source file of one component. The catalog is not rebuilt.",
        inputSchema={
            "type": "object",
            "properties": {
                "path": PATH_PROPERTY,
                "content": {"type": "string", "description": "New file content"},
                "server": SERVER_PROPERTY,
            },
            "required": ["path", "content"],
        },
    ),
]


def call_catalog_tool(service: CatalogService, name: str, arguments: dict[str, Any]) -> str:
    """Run one catalog tool and return its JSON result text."""
    arguments = arguments or {}
    if name == "list_components":
        result: Any = service.list_items()
    elif name == "get_component":
        result = service.get_item_content(arguments.get("path", ""), server=arguments.get("server"))
    elif name == "save_component":
        result = service.save_item_content(
            arguments.get("path", ""),
            arguments.get("content"),
            server=arguments.get("server"),
        )
    else:
        raise ValueError(f"Tool '{name}' not found")
    return json.dumps(result, indent=2, ensure_ascii=False)


class CatalogMCPServer:
    """MCP server over the plugin catalog."""

    def __init__(self, service: CatalogService | None = None):
        config = ConfigManager.get_instance().get()
        self.service = service or CatalogService.from_config(config)
        self.server = Server(__package_name__)
        self.logger = Logger("mcp", level=config.log_level)
        self._setup_handlers()

    def _setup_handlers(self):
        """Set up MCP protocol request handlers using decorators."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            return TOOLS

        @self.server.call_tool()
        async def handle_call_tool(name: str, arguments: dict) -> list[types.TextContent]:
            try:
                text = call_catalog_tool(self.service, name, arguments)
            except ValueError as e:
                self.logger.error(f"Tool not found: {e}")
                raise
            except CatalogError as e:
                self.logger.warning(f"{name} failed: {e.code.value} {e.message}")
                raise RuntimeError(e.message) from e
            return [types.TextContent(type="text", text=text)]

    async def start(self):
        """Run the server on stdio until the client disconnects."""
        self.logger.info(f"Serving catalog from {self.service.catalog_path}")
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=__package_name__,
                    server_version=__version__,
                    capabilities=self.server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                ),
            )


async def run_stdio():
    """Run in stdio mode."""
    server = CatalogMCPServer()
    await server.start()
