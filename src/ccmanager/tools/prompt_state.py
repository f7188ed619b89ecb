"""
Prompt state tools.

Provides check_prompt_box, classify_screens and get_session_command for an
orchestrating agent that captures session screens itself.
"""

from mcp.server.fastmcp import FastMCP

from ..cli_backends import AgentCLI, get_cli_backend
from ..session_state import SessionState, detect_session_state
from ..utils import error_response


def _resolve_backend(engine: str) -> AgentCLI | dict:
    """Return the backend for `engine`, or an error response if unknown."""
    try:
        return get_cli_backend(engine)
    except ValueError as exc:
        return error_response(str(exc), hint_key="unknown_engine")


def check_prompt_box_impl(screen_text: str, engine: str = "claude") -> dict:
    """Report whether the engine's input prompt is drawn and waiting."""
    backend = _resolve_backend(engine)
    if isinstance(backend, dict):
        return backend
    return {"has_bottom_border": backend.is_prompt_idle(screen_text)}


def classify_screens_impl(
    screens: dict[str, str],
    tail_lines: int | None = None,
    engine: str = "claude",
) -> dict:
    """Classify each captured screen and summarize which sessions are idle."""
    if not screens:
        return error_response("No screens provided", hint_key="no_screens")

    if tail_lines is not None and tail_lines <= 0:
        return error_response(
            f"Invalid tail_lines: {tail_lines}",
            hint_key="invalid_tail_lines",
        )

    backend = _resolve_backend(engine)
    if isinstance(backend, dict):
        return backend

    states: dict[str, str] = {}
    for session_id, screen_text in screens.items():
        state = detect_session_state(
            screen_text,
            tail_lines=tail_lines,
            is_prompt_idle=backend.is_prompt_idle,
        )
        states[session_id] = state.value

    idle_ids = [sid for sid, state in states.items() if state == SessionState.IDLE.value]

    return {
        "states": states,
        "idle_ids": idle_ids,
        "all_idle": len(idle_ids) == len(states),
    }


def get_session_command_impl(
    engine: str = "claude",
    use_fallback: bool = False,
) -> dict:
    """Build the command line used to launch a session."""
    backend = _resolve_backend(engine)
    if isinstance(backend, dict):
        return backend

    return {
        "engine": backend.engine_id,
        "command": backend.command(),
        "args": backend.build_args(use_fallback=use_fallback),
        "command_line": backend.build_full_command(use_fallback=use_fallback),
    }


def register_tools(mcp: FastMCP) -> None:
    """Register prompt state tools on the MCP server."""

    @mcp.tool()
    async def check_prompt_box(screen_text: str, engine: str = "claude") -> dict:
        """
        Check if captured screen text shows a finished prompt box.

        The bottom border of the assistant's input box (╰───╯, or the
        right-hand fragment ───╯) appears once it is waiting for input.

        Args:
            screen_text: Captured terminal text of one session
            engine: CLI engine id (default "claude")

        Returns:
            Dict with:
                - has_bottom_border: Whether a bottom border line is present
        """
        return check_prompt_box_impl(screen_text, engine)

    @mcp.tool()
    async def classify_screens(
        screens: dict[str, str],
        tail_lines: int | None = None,
        engine: str = "claude",
    ) -> dict:
        """
        Classify captured screens as busy, waiting_input or idle.

        Quick non-blocking check over screens you captured yourself (for
        example with 'tmux capture-pane -p').

        Args:
            screens: Mapping of session id to captured screen text
            tail_lines: Only examine the last N lines of each screen
                (defaults to CCMANAGER_STATE_TAIL_LINES, 30)
            engine: CLI engine id running in every session (default "claude")

        Returns:
            Dict with:
                - states: Dict mapping session id to state
                - idle_ids: Sessions whose prompt is idle
                - all_idle: Whether every session is idle
        """
        return classify_screens_impl(screens, tail_lines, engine)

    @mcp.tool()
    async def get_session_command(
        engine: str = "claude",
        use_fallback: bool = False,
    ) -> dict:
        """
        Get the command line used to launch an assistant session.

        Args:
            engine: CLI engine id (default "claude")
            use_fallback: Use the fallback arguments instead of the primary ones

        Returns:
            Dict with:
                - engine: The engine id
                - command: The executable
                - args: The argument list
                - command_line: The complete shell command
        """
        return get_session_command_impl(engine, use_fallback)
