"""
Session state detection from captured screen text.

Classifies what an assistant CLI is doing by looking at the bottom of its
terminal: a confirmation question, an interrupt hint while it works, or a
finished prompt box.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from enum import Enum

from .prompt_detector import VERTICAL, includes_prompt_box_bottom_border
from .utils.env_vars import read_positive_int_env

logger = logging.getLogger("ccmanager")

DEFAULT_TAIL_LINES = 30

# CSI sequences (colors, cursor moves) and OSC sequences (titles, links).
_ANSI_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")

WAITING_INPUT_PATTERNS = (
    f"{VERTICAL} Do you want",
    f"{VERTICAL} Would you like",
)

BUSY_PATTERN = "esc to interrupt"


class SessionState(str, Enum):
    """What an assistant CLI is doing right now."""

    BUSY = "busy"
    WAITING_INPUT = "waiting_input"
    IDLE = "idle"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from captured terminal text."""
    return _ANSI_RE.sub("", text)


def resolve_tail_lines(env: Mapping[str, str] | None = None) -> int:
    """Number of trailing screen lines to examine, from CCMANAGER_STATE_TAIL_LINES."""
    return read_positive_int_env(
        "CCMANAGER_STATE_TAIL_LINES", default=DEFAULT_TAIL_LINES, env=env
    )


def detect_session_state(
    screen_text: str,
    *,
    tail_lines: int | None = None,
    is_prompt_idle: Callable[[str], bool] = includes_prompt_box_bottom_border,
) -> SessionState:
    """
    Classify a screen capture into a SessionState.

    Checks, in order:
        1. a boxed confirmation question -> WAITING_INPUT
        2. the "esc to interrupt" hint -> BUSY
        3. an idle prompt (by default a prompt box bottom border) -> IDLE

    Anything else means the CLI is still drawing its output, so BUSY.

    Args:
        screen_text: Captured terminal text (ANSI sequences allowed)
        tail_lines: Only the last N lines are examined (defaults to config)
        is_prompt_idle: Backend check for a finished input prompt

    Returns:
        The detected SessionState
    """
    if tail_lines is None:
        tail_lines = resolve_tail_lines()

    lines = strip_ansi(screen_text).split("\n")
    tail = "\n".join(lines[-tail_lines:]) if tail_lines > 0 else ""

    if any(pattern in tail for pattern in WAITING_INPUT_PATTERNS):
        state = SessionState.WAITING_INPUT
    elif BUSY_PATTERN in tail.lower():
        state = SessionState.BUSY
    elif is_prompt_idle(tail):
        state = SessionState.IDLE
    else:
        state = SessionState.BUSY

    logger.debug("Detected session state %s", state.value)
    return state
