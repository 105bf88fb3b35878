"""Entry point for running the logictree MCP server directly.

Usage:
    python -m logictree.mcp
"""

from logictree.mcp.server import run_server

if __name__ == "__main__":
    run_server()
