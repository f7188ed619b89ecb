"""Tests for the prompt state MCP tools."""

import pytest
from mcp.server.fastmcp import FastMCP

from ccmanager.server import create_server
from ccmanager.tools import prompt_state, register_all_tools
from ccmanager.utils import HINTS, error_response


def test_check_prompt_box_impl():
    assert prompt_state.check_prompt_box_impl("╰───╯") == {"has_bottom_border": True}
    assert prompt_state.check_prompt_box_impl("╭───╮") == {"has_bottom_border": False}


def test_classify_screens_impl():
    screens = {
        "worker-1": "╭───╮\n│ > │\n╰───╯",
        "worker-2": "✻ Working… (esc to interrupt)",
        "worker-3": "│ Do you want to proceed? │\n╰───╯",
    }
    result = prompt_state.classify_screens_impl(screens, tail_lines=10)

    assert result["states"] == {
        "worker-1": "idle",
        "worker-2": "busy",
        "worker-3": "waiting_input",
    }
    assert result["idle_ids"] == ["worker-1"]
    assert result["all_idle"] is False


def test_classify_screens_impl_all_idle():
    result = prompt_state.classify_screens_impl({"a": "──╯", "b": "╰─╯"}, tail_lines=10)
    assert result["all_idle"] is True
    assert result["idle_ids"] == ["a", "b"]


def test_classify_screens_impl_requires_screens():
    result = prompt_state.classify_screens_impl({})
    assert result["error"] == "No screens provided"
    assert "hint" in result


@pytest.mark.parametrize("tail_lines", [0, -3])
def test_classify_screens_impl_rejects_bad_tail_lines(tail_lines):
    result = prompt_state.classify_screens_impl({"a": "──╯"}, tail_lines=tail_lines)
    assert result["error"] == f"Invalid tail_lines: {tail_lines}"


def test_get_session_command_impl(monkeypatch):
    monkeypatch.setenv("CCMANAGER_COMMAND", "claude")
    monkeypatch.setenv("CCMANAGER_ARGS", "--resume")
    monkeypatch.setenv("CCMANAGER_FALLBACK_ARGS", "--continue")

    result = prompt_state.get_session_command_impl()
    assert result == {
        "engine": "claude",
        "command": "claude",
        "args": ["--resume"],
        "command_line": "claude --resume",
    }

    fallback = prompt_state.get_session_command_impl(use_fallback=True)
    assert fallback["command_line"] == "claude --continue"


def test_get_session_command_impl_unknown_engine():
    result = prompt_state.get_session_command_impl(engine="codex")
    assert "Unknown engine: codex" in result["error"]
    assert result["hint"] == "Only the 'claude' engine is available"


class _PromptCharBackend:
    engine_id = "plain"

    def is_prompt_idle(self, screen_text):
        return screen_text.rstrip().endswith(">")


def test_classify_screens_impl_uses_backend_prompt_check(monkeypatch):
    monkeypatch.setattr(prompt_state, "get_cli_backend", lambda engine: _PromptCharBackend())

    result = prompt_state.classify_screens_impl({"a": "done\n> ", "b": "╰───╯"}, tail_lines=10)
    assert result["states"] == {"a": "idle", "b": "busy"}

    assert prompt_state.check_prompt_box_impl("done\n> ") == {"has_bottom_border": True}


def test_unknown_engine_in_screen_tools():
    assert "Unknown engine" in prompt_state.check_prompt_box_impl("──╯", engine="codex")["error"]
    result = prompt_state.classify_screens_impl({"a": "──╯"}, engine="codex")
    assert result["hint"] == HINTS["unknown_engine"]


def test_error_response_looks_up_hint():
    assert error_response("boom") == {"error": "boom"}
    assert error_response("boom", hint_key="no_screens", session_id="a") == {
        "error": "boom",
        "hint": HINTS["no_screens"],
        "session_id": "a",
    }
    with pytest.raises(KeyError):
        error_response("boom", hint_key="missing")


@pytest.mark.asyncio
async def test_register_all_tools():
    mcp = FastMCP("test")
    register_all_tools(mcp)
    names = {tool.name for tool in await mcp.list_tools()}
    assert names == {"check_prompt_box", "classify_screens", "get_session_command"}


@pytest.mark.asyncio
async def test_create_server_registers_tools():
    server = create_server()
    names = {tool.name for tool in await server.list_tools()}
    assert "check_prompt_box" in names
