"""
Base protocol for assistant CLI backends.

Defines the interface every CLI backend must implement so sessions can be
launched and monitored without knowing which assistant runs inside them.
"""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from ..prompt_detector import includes_prompt_box_bottom_border


@runtime_checkable
class AgentCLI(Protocol):
    """
    Protocol defining the interface for assistant CLI backends.

    Each implementation encapsulates the CLI-specific details:
    - Command and arguments (primary and fallback)
    - Prompt idle detection
    """

    @property
    @abstractmethod
    def engine_id(self) -> str:
        """
        Unique identifier for this CLI engine (e.g., "claude").

        Used for configuration, logging, and distinguishing between backends.
        """
        ...

    @abstractmethod
    def command(self) -> str:
        """
        Return the CLI executable name or path.

        Examples: "claude", "/usr/local/bin/custom-agent"
        """
        ...

    @abstractmethod
    def build_args(self, *, use_fallback: bool = False) -> list[str]:
        """
        Build the argument list for the CLI command.

        Args:
            use_fallback: If True, use the fallback arguments configured for
                relaunching after the primary launch failed

        Returns:
            List of command-line arguments (not including the command itself)
        """
        ...

    def is_prompt_idle(self, screen_text: str) -> bool:
        """
        Whether the CLI has drawn its input prompt and is waiting.

        The default looks for the bottom border of a boxed prompt.
        """
        return includes_prompt_box_bottom_border(screen_text)

    def build_full_command(
        self,
        *,
        env_vars: dict[str, str] | None = None,
        use_fallback: bool = False,
    ) -> str:
        """
        Build the complete command string including env vars.

        Args:
            env_vars: Environment variables to prepend
            use_fallback: Use the fallback argument list

        Returns:
            Complete command string ready for shell execution
        """
        cmd = self.command()
        args = self.build_args(use_fallback=use_fallback)

        if args:
            cmd = f"{cmd} {' '.join(args)}"

        if env_vars:
            env_exports = " ".join(f"{k}={v}" for k, v in env_vars.items())
            cmd = f"{env_exports} {cmd}"

        return cmd
