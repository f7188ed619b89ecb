"""
ccmanager

Prompt and session state detection for coding-assistant CLI sessions
running in git worktrees, served over MCP.
"""

from .prompt_detector import PromptBoundaryDetector, includes_prompt_box_bottom_border

__version__ = "0.1.0"

__all__ = [
    "PromptBoundaryDetector",
    "includes_prompt_box_bottom_border",
]


def main():
    """Entry point for the ccmanager-mcp command."""
    from .server import run_server
    run_server()
