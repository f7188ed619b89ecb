"""
Prompt box detection for coding-assistant CLIs.

Assistant CLIs draw their input prompt inside a rounded box:

    ╭──────────────╮
    │ > hello      │
    ╰──────────────╯

Once the bottom border of that box is on screen the CLI has finished
rendering and is waiting for input. This module recognises that border in
captured terminal text without emulating a terminal.
"""

import logging
import re

logger = logging.getLogger("ccmanager")

HORIZONTAL = "─"
VERTICAL = "│"
TOP_LEFT = "╭"
TOP_RIGHT = "╮"
BOTTOM_LEFT = "╰"
BOTTOM_RIGHT = "╯"

# One or more horizontal bars closed by the bottom-right corner, at line end.
_BOTTOM_BORDER_RE = re.compile(f"{HORIZONTAL}+{BOTTOM_RIGHT}$")


def _is_bottom_border(line: str) -> bool:
    """Check a single trimmed line against the bottom border shapes."""
    # An unterminated left corner is a border still being drawn.
    if line.startswith(BOTTOM_LEFT) and not line.endswith(BOTTOM_RIGHT):
        return False
    return _BOTTOM_BORDER_RE.search(line) is not None


def includes_prompt_box_bottom_border(output: str) -> bool:
    """
    Return True if the output contains a prompt box bottom border line.

    Accepts a complete border (``╰───╯``) or the right-hand fragment of one
    (``───╯``), including one that trails other text on the line. Leading and
    trailing whitespace on each line is ignored.

    Rejected shapes:
        - a bare corner with no horizontal bars (``╯``, ``╰╯``)
        - anything after the corner on the same line (``──╯ │``)
        - a left corner that never reaches ``╯`` (``╰───``)
        - top borders (``╭───╮``) and side walls (``│ > │``)

    Args:
        output: Captured terminal text, possibly empty or multi-line

    Returns:
        True if any non-blank line is a bottom border
    """
    # Terminal rows end at "\n"; a stray "\r" stays inside its row.
    for line in output.split("\n"):
        candidate = line.strip()
        if candidate and _is_bottom_border(candidate):
            logger.debug("Prompt box bottom border found: %r", candidate)
            return True
    return False


class PromptBoundaryDetector:
    """Stateless detector for the prompt box bottom border."""

    def detects(self, blob: str) -> bool:
        return includes_prompt_box_bottom_border(blob)

    __call__ = detects
