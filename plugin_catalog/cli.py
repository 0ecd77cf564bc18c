#!/usr/bin/env python3
"""
Plugin Catalog CLI Entry Point

Handles:
- Building the catalog artifact from the plugin bundle
- Server modes (http, mcp stdio)
"""

import argparse
import asyncio
import os
import sys

from plugin_catalog import __package_name__, __version__
from plugin_catalog.config import ConfigManager


def print_version():
    """Print version info."""
    print(f"{__package_name__} v{__version__}")


def run_build(args) -> int:
    """Scan the bundle and write the catalog. Source errors are not fatal."""
    from plugin_catalog.catalog.builder import CatalogBuilder
    from plugin_catalog.utils.logger import Logger

    config = ConfigManager.get_instance().get()
    builder = CatalogBuilder(
        config.root,
        config.catalog_path,
        sort_items=args.sort or config.sort_items,
        logger=Logger("builder", level=config.log_level),
    )
    report = builder.run()

    print(f"Generated data for {len(report.items)} components -> {report.output_path}")
    for item_type, count in report.counts.items():
        print(f"  {item_type:<8} {count}")
    for error in report.errors:
        print(f"  ⚠ {error.source}: {error.reason}", file=sys.stderr)
    return 0


async def run_http(port: int | None):
    """Run in HTTP mode."""
    from plugin_catalog.server_http import main as http_main
    await http_main(port)


async def run_stdio():
    """Run the MCP server on stdio."""
    from plugin_catalog.server import run_stdio as mcp_main
    await mcp_main()


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="plugin-catalog",
        description="Build and serve the component catalog of a plugin bundle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  plugin-catalog build                  Scan ../agents, ../skills, ../commands, ../.mcp.json
  plugin-catalog --root . build --sort  Scan the current directory, sorted by name
  plugin-catalog serve --port 3000      Serve the catalog over HTTP
  plugin-catalog mcp                    Serve the catalog as MCP tools on stdio

Environment:
  PLUGIN_CATALOG_ROOT   Plugin bundle root (default: parent of the working directory)
  PLUGIN_CATALOG_DATA   Catalog artifact path (default: data/components.json)
  PLUGIN_CATALOG_SORT   Sort items by name within each type
  LOG_LEVEL             DEBUG, INFO, WARNING, ERROR
"""
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )
    parser.add_argument(
        "--root",
        help="Plugin bundle root (overrides PLUGIN_CATALOG_ROOT)"
    )
    parser.add_argument(
        "--data",
        help="Catalog artifact path (overrides PLUGIN_CATALOG_DATA)"
    )

    subparsers = parser.add_subparsers(dest="command")

    build_parser = subparsers.add_parser("build", help="Build the catalog artifact")
    build_parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort items by name within each type"
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        help="HTTP port (default: PORT or 3000)"
    )

    subparsers.add_parser("mcp", help="Run the MCP server on stdio")

    args = parser.parse_args(argv)

    if args.version:
        print_version()
        return 0

    if args.root:
        os.environ["PLUGIN_CATALOG_ROOT"] = args.root
    if args.data:
        os.environ["PLUGIN_CATALOG_DATA"] = args.data
    ConfigManager.get_instance().load()

    if args.command == "build":
        return run_build(args)
    if args.command == "serve":
        asyncio.run(run_http(args.port))
        return 0
    if args.command == "mcp":
        asyncio.run(run_stdio())
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
