"""
Assistant CLI backends.
"""

from ..command_config import CommandConfig
from .base import AgentCLI
from .claude import ClaudeCLI

BACKENDS = {
    "claude": ClaudeCLI,
}


def get_cli_backend(
    engine_id: str = "claude",
    config: CommandConfig | None = None,
) -> AgentCLI:
    """
    Return the CLI backend for an engine id.

    Raises:
        ValueError: If the engine id is unknown
    """
    backend_cls = BACKENDS.get(engine_id.strip().lower())
    if backend_cls is None:
        raise ValueError(f"Unknown engine: {engine_id}. Available: {list(BACKENDS)}")
    return backend_cls(config)


__all__ = [
    "AgentCLI",
    "BACKENDS",
    "ClaudeCLI",
    "get_cli_backend",
]
