"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, envperm.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from envperm.infrastructure.profile import PROFILE_CANDIDATES, PROFILE_FALLBACK


class ProfileConfig(BaseModel):
    """[profile] section."""

    model_config = {"frozen": True}

    candidates: tuple[str, ...] = PROFILE_CANDIDATES
    fallback: str = PROFILE_FALLBACK

    @field_validator("candidates")
    @classmethod
    def _non_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            msg = "profile.candidates must name at least one file"
            raise ValueError(msg)
        return value
