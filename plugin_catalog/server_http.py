#!/usr/bin/env python3
"""
Plugin Catalog - HTTP Server

Serves the component catalog to the dashboard and accepts edits to the
underlying source files.

Endpoints:
- GET  /api/components        - catalog entries without content
- GET  /api/component/{path}  - cached content of one entry
- PUT  /api/component/{path}  - write new content to the entry's source file
- POST /api/rebuild           - rebuild the catalog and swap it in
- GET  /health                - health check

Catalog reads, writes and rebuilds touch the filesystem, so they run in
Starlette's threadpool rather than on the event loop.
"""

import asyncio
import json

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route

from plugin_catalog import __version__
from plugin_catalog.catalog.service import CatalogService
from plugin_catalog.config import ConfigManager
from plugin_catalog.errors import BadRequestError, CatalogError
from plugin_catalog.utils.logger import Logger

logger = Logger("http")


async def catalog_error(request: Request, exc: CatalogError):
    """Render catalog errors as ``{"error": message}`` with their status."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code.value}")
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def _service(request: Request) -> CatalogService:
    return request.app.state.service


def list_components(request: Request):
    """Catalog entries for the list view (no content)."""
    return JSONResponse(_service(request).list_items())


def get_component(request: Request):
    """Cached content of the entry whose path matches exactly."""
    path = request.path_params.get("path", "")
    server = request.query_params.get("server")
    return JSONResponse(_service(request).get_item_content(path, server=server))


async def put_component(request: Request):
    """Write new content for one entry.

    Body: ``{"content": "...", "server": "..."}``; ``server`` is only used
    for entries backed by the MCP config.
    """
    path = request.path_params.get("path", "")
    if not path:
        raise BadRequestError("Path required")

    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise BadRequestError("Content required")
    if not isinstance(body, dict):
        raise BadRequestError("Content required")

    result = await run_in_threadpool(
        _service(request).save_item_content,
        path,
        body.get("content"),
        server=body.get("server"),
    )
    return JSONResponse(result)


def rebuild_catalog(request: Request):
    """Rebuild the catalog artifact and replace the served snapshot."""
    report = _service(request).rebuild()
    return JSONResponse({
        "success": True,
        "count": len(report.items),
        "counts": report.counts,
        "errors": [{"source": e.source, "reason": e.reason} for e in report.errors],
    })


async def health_check(request: Request):
    """Health check endpoint."""
    service = _service(request)
    return PlainTextResponse(
        f"Plugin Catalog (HTTP)\n"
        f"Version: {__version__}\n"
        f"Status: Running\n"
        f"Root: {service.root}\n"
        f"Catalog: {service.catalog_path}\n"
    )


def create_app(service: CatalogService | None = None) -> Starlette:
    """Create the Starlette app around a catalog service."""
    if service is None:
        service = CatalogService.from_config(ConfigManager.get_instance().get())

    app = Starlette(
        routes=[
            Route("/health", endpoint=health_check),
            Route("/api/components", endpoint=list_components, methods=["GET"]),
            Route("/api/component/{path:path}", endpoint=get_component, methods=["GET"]),
            Route("/api/component/{path:path}", endpoint=put_component, methods=["PUT"]),
            Route("/api/rebuild", endpoint=rebuild_catalog, methods=["POST"]),
        ],
        exception_handlers={CatalogError: catalog_error},
    )
    app.state.service = service
    return app


async def main(port: int | None = None):
    """Run the HTTP server."""
    import uvicorn

    config = ConfigManager.get_instance().get()
    port = port or config.http_port
    app = create_app(CatalogService.from_config(config))

    server = uvicorn.Server(uvicorn.Config(
        app,
        host=config.host,
        port=port,
        log_level=config.log_level.lower(),
    ))

    print(f"Plugin Catalog (HTTP) starting on http://{config.host}:{port}")
    print(f"  Root:    {config.root}")
    print(f"  Catalog: {config.catalog_path}")

    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
