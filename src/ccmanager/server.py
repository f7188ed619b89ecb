"""
ccmanager MCP Server

FastMCP-based server exposing prompt and session state detection for
assistant CLI sessions running in git worktrees.
"""

import logging

from mcp.server.fastmcp import FastMCP

from .tools import register_all_tools

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("ccmanager")


def create_server() -> FastMCP:
    """Create the MCP server with all tools registered."""
    server = FastMCP("ccmanager")
    register_all_tools(server)
    return server


mcp = create_server()


def run_server():
    """Run the MCP server with stdio transport."""
    logger.info("Starting ccmanager MCP Server...")
    mcp.run(transport="stdio")
