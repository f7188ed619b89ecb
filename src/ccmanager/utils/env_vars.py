"""Readers for `CCMANAGER_*` settings in the environment."""

from __future__ import annotations

from collections.abc import Mapping
import os


def read_env(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    """Return the stripped value of `name`, or None when unset or blank."""
    environ = os.environ if env is None else env
    value = (environ.get(name) or "").strip()
    return value or None


def read_positive_int_env(
    name: str,
    *,
    default: int,
    env: Mapping[str, str] | None = None,
) -> int:
    """
    Return `name` as a positive integer.

    Missing, non-integer, zero and negative values all give `default`.
    """
    raw = read_env(name, env=env)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default
