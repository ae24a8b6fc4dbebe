"""envperm: permanently set environment variables via the shell profile."""

from __future__ import annotations

__version__ = "0.1.0"

from envperm.api import append, append_to_end, check_or_set, find_profile, set

__all__ = [
    "__version__",
    "append",
    "append_to_end",
    "check_or_set",
    "find_profile",
    "set",
]
