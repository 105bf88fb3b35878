"""Tests for the FastMCP server wiring.

Skipped when the mcp extra is not installed.
"""

import asyncio

import pytest

from logictree.config import LogicTreeConfig
from logictree.graph import LogicTree


class TestMCPAvailability:
    def test_flag_is_boolean(self):
        from logictree.mcp import MCP_AVAILABLE

        assert isinstance(MCP_AVAILABLE, bool)

    def test_create_server_without_mcp_raises(self, monkeypatch):
        import logictree.mcp as logictree_mcp

        monkeypatch.setattr(logictree_mcp, "MCP_AVAILABLE", False)
        with pytest.raises(ImportError, match="pip install logictree\\[mcp\\]"):
            logictree_mcp.create_server()


class TestCreateServer:
    def test_registers_logictree_tool(self):
        pytest.importorskip("mcp.server.fastmcp")
        from logictree.mcp.server import create_server

        server = create_server(config=LogicTreeConfig())
        tools = asyncio.run(server.list_tools())

        assert [tool.name for tool in tools] == ["logictree"]

    def test_server_name_from_config(self):
        pytest.importorskip("mcp.server.fastmcp")
        from logictree.mcp.server import create_server

        server = create_server(config=LogicTreeConfig(server_name="analyst"))
        assert server.name == "analyst"

    def test_tool_operates_on_injected_tree(self):
        pytest.importorskip("mcp.server.fastmcp")
        from logictree.mcp.server import create_server

        tree = LogicTree()
        server = create_server(tree=tree, config=LogicTreeConfig(disable_tree_logging=True))

        asyncio.run(
            server.call_tool(
                "logictree",
                {"operation": "add_node", "content": "Low conversion rate", "nodeType": "problem"},
            )
        )
        asyncio.run(server.call_tool("logictree", {"operation": "get_status"}))

        assert tree.node_count() == 1
        assert tree.root.content == "Low conversion rate"

    def test_servers_do_not_share_trees(self):
        pytest.importorskip("mcp.server.fastmcp")
        from logictree.mcp.server import create_server

        first = LogicTree()
        second = LogicTree()
        config = LogicTreeConfig(disable_tree_logging=True)
        server_a = create_server(tree=first, config=config)
        create_server(tree=second, config=config)

        asyncio.run(
            server_a.call_tool(
                "logictree", {"operation": "add_node", "content": "Only here", "nodeType": "problem"}
            )
        )

        assert first.node_count() == 1
        assert second.node_count() == 0
