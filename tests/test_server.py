"""Tests for the catalog MCP server."""

import json

import pytest

from plugin_catalog.errors import BadRequestError, NotFoundError
from plugin_catalog.server import TOOLS, CatalogMCPServer, call_catalog_tool


class TestCatalogTools:
    """Test the tool dispatch shared by the MCP handlers."""
    
    def test_tool_names(self):
        """Should expose list, get and save."""
        assert [tool.name for tool in TOOLS] == ["list_components", "get_component", "save_component"]
    
    def test_list_components(self, service):
        """Should return the list view as JSON."""
        items = json.loads(call_catalog_tool(service, "list_components", {}))
        
        assert len(items) == 6
        assert "content" not in items[0]
    
    def test_get_component(self, service, code_reviewer_text):
        """Should return cached content."""
        result = json.loads(call_catalog_tool(service, "get_component", {"path": "agents/code-reviewer.md"}))
        
        assert result["content"] == code_reviewer_text
    
    def test_save_component(self, service, bundle):
        """Should write through the service."""
        result = json.loads(call_catalog_tool(
            service,
            "save_component",
            {"path": "commands/new-component.md", "content": "## Purpose: Updated"},
        ))
        
        assert result == {"success": True, "path": "commands/new-component.md"}
        assert (bundle / "commands" / "new-component.md").read_text() == "## Purpose: Updated"
    
    def test_catalog_errors_propagate(self, service):
        """Should raise catalog errors for the handler to report."""
        with pytest.raises(NotFoundError):
            call_catalog_tool(service, "get_component", {"path": "nope.md"})
        with pytest.raises(BadRequestError):
            call_catalog_tool(service, "save_component", {"path": "agents/code-reviewer.md"})
    
    def test_unknown_tool(self, service):
        """Should raise ValueError for unknown tools."""
        with pytest.raises(ValueError, match="not found"):
            call_catalog_tool(service, "delete_component", {})
    
    def test_server_wraps_service(self, service):
        """Should build an MCP server around an existing service."""
        server = CatalogMCPServer(service)
        
        assert server.service is service
        assert server.server.name == "plugin-catalog"
