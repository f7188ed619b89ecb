"""
Claude Code CLI backend.

Implements the AgentCLI protocol for Claude Code, driven by a CommandConfig.
"""

from ..command_config import CommandConfig, load_command_config
from .base import AgentCLI


class ClaudeCLI(AgentCLI):
    """
    Claude Code CLI implementation.

    Supports:
    - Configurable command, arguments and fallback arguments
    - Idle detection via the prompt box bottom border
    """

    def __init__(self, config: CommandConfig | None = None) -> None:
        self._config = config if config is not None else load_command_config()

    @property
    def config(self) -> CommandConfig:
        return self._config

    @property
    def engine_id(self) -> str:
        """Return 'claude' as the engine identifier."""
        return "claude"

    def command(self) -> str:
        return self._config.command

    def build_args(self, *, use_fallback: bool = False) -> list[str]:
        """
        Build Claude CLI arguments.

        Fallback arguments replace the primary ones when requested. Without
        configured fallback arguments the primary ones are used.
        """
        if use_fallback and self._config.fallback_args:
            return list(self._config.fallback_args)
        return list(self._config.args or [])
