"""
Command configuration for the assistant CLI launched in each worktree.

A CommandConfig holds the executable, its arguments, and an alternative
argument list used when the primary launch has to be retried.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Optional

from .utils.env_vars import read_env

logger = logging.getLogger("ccmanager")

DEFAULT_COMMAND = "claude"

EDITABLE_FIELDS = ("command", "args", "fallback_args")


class ConfigError(ValueError):
    """Raised when a command configuration edit is invalid."""


def parse_args(value: str | None) -> Optional[list[str]]:
    """
    Split an argument string on whitespace.

    Blank input means "no arguments" and returns None rather than an empty list.

    Examples:
        >>> parse_args("--resume  --verbose")
        ['--resume', '--verbose']

        >>> parse_args("   ") is None
        True
    """
    if value is None:
        return None
    stripped = value.strip()
    if not stripped:
        return None
    return stripped.split()


@dataclass(frozen=True)
class CommandConfig:
    """Executable plus primary and fallback arguments."""

    command: str = DEFAULT_COMMAND
    args: Optional[list[str]] = None
    fallback_args: Optional[list[str]] = None

    def with_field(self, field: str, value: str) -> CommandConfig:
        """
        Return a copy with one text field applied.

        Args:
            field: One of "command", "args", "fallback_args"
            value: Raw text as typed by the user

        Raises:
            ConfigError: If field is not an editable field name
        """
        if field == "command":
            return replace(self, command=value or DEFAULT_COMMAND)
        if field == "args":
            return replace(self, args=parse_args(value))
        if field == "fallback_args":
            return replace(self, fallback_args=parse_args(value))
        raise ConfigError(
            f"Unknown command config field: {field}. Valid: {list(EDITABLE_FIELDS)}"
        )

    def has_changes(self, original: CommandConfig) -> bool:
        """Whether this config differs from `original`."""
        return self != original

    def display_args(self, fallback: bool = False) -> str:
        """Render an argument list for display, "(none)" when empty."""
        args = self.fallback_args if fallback else self.args
        return " ".join(args) if args else "(none)"


def load_command_config(env: Mapping[str, str] | None = None) -> CommandConfig:
    """
    Build a CommandConfig from the environment.

    Reads CCMANAGER_COMMAND, CCMANAGER_ARGS and CCMANAGER_FALLBACK_ARGS.
    Unset or blank variables keep their defaults.
    """
    config = CommandConfig()

    command = read_env("CCMANAGER_COMMAND", env=env)
    if command:
        config = config.with_field("command", command)

    args = read_env("CCMANAGER_ARGS", env=env)
    if args:
        config = config.with_field("args", args)

    fallback_args = read_env("CCMANAGER_FALLBACK_ARGS", env=env)
    if fallback_args:
        config = config.with_field("fallback_args", fallback_args)

    logger.debug("Loaded command config: %s", config)
    return config
