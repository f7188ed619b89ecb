"""
Error responses returned by MCP tools instead of raising.
"""

# Recovery hints, keyed by the failure a tool reports.
HINTS = {
    "no_screens": (
        "Pass a mapping of session id to captured screen text, e.g. the output "
        "of 'tmux capture-pane -p -t <pane>'"
    ),
    "invalid_tail_lines": (
        "tail_lines must be a positive number of lines, or omitted to use "
        "CCMANAGER_STATE_TAIL_LINES"
    ),
    "unknown_engine": "Only the 'claude' engine is available",
}


def error_response(message: str, hint_key: str | None = None, **extra_fields) -> dict:
    """
    Build a tool error payload.

    Args:
        message: What went wrong
        hint_key: Key into HINTS for the recovery instructions, if any
        **extra_fields: Additional fields merged into the payload

    Raises:
        KeyError: If hint_key is not a known hint
    """
    response = {"error": message, **extra_fields}
    if hint_key is not None:
        response["hint"] = HINTS[hint_key]
    return response
