"""
Shared utilities for ccmanager.
"""

from .env_vars import read_env, read_positive_int_env
from .errors import error_response, HINTS

__all__ = [
    "error_response",
    "HINTS",
    "read_env",
    "read_positive_int_env",
]
