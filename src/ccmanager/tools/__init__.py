"""
ccmanager MCP tools package.

Provides all tool registration functions for the MCP server.
"""

from mcp.server.fastmcp import FastMCP

from . import prompt_state


def register_all_tools(mcp: FastMCP) -> None:
    """
    Register all tools on the MCP server.

    Args:
        mcp: The FastMCP server instance
    """
    prompt_state.register_tools(mcp)


__all__ = [
    "register_all_tools",
    "prompt_state",
]
