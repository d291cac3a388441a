"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, workfriends.toml only contains
overrides. A useful config needs only ``[organization] known_domains``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OrganizationConfig(BaseModel):
    """[organization] section."""

    model_config = {"frozen": True}

    known_domains: list[str] = Field(default_factory=list)
