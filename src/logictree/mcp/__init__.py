"""logictree.mcp - Model Context Protocol server for logictree.

This module provides an MCP server that exposes the logic tree to AI
agents through a single ``logictree`` tool.

Usage:
    # Check if MCP is available
    from logictree.mcp import MCP_AVAILABLE

    if MCP_AVAILABLE:
        from logictree.mcp import create_server, run_server

        # Create server
        server = create_server()

        # Or run directly
        run_server()
"""

try:
    from mcp.server.fastmcp import FastMCP

    MCP_AVAILABLE = True
except ImportError:
    MCP_AVAILABLE = False
    FastMCP = None


def create_server(*args, **kwargs):
    """Create the MCP server.

    Raises:
        ImportError: If MCP dependencies are not installed.
    """
    if not MCP_AVAILABLE:
        raise ImportError("MCP dependencies not installed. Install with: pip install logictree[mcp]")
    from logictree.mcp.server import create_server as _create

    return _create(*args, **kwargs)


def run_server(*args, **kwargs):
    """Run the MCP server.

    Raises:
        ImportError: If MCP dependencies are not installed.
    """
    if not MCP_AVAILABLE:
        raise ImportError("MCP dependencies not installed. Install with: pip install logictree[mcp]")
    from logictree.mcp.server import run_server as _run

    return _run(*args, **kwargs)


__all__ = [
    "MCP_AVAILABLE",
    "create_server",
    "run_server",
]
