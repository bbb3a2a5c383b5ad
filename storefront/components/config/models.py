"""
Config component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from storefront.domain.entities import SiteConfig


@dataclass(frozen=True)
class LoadConfigInput:
    """Input for loading the configuration document."""

    pass


@dataclass(frozen=True)
class LoadConfigOutput:
    """Output from loading the configuration document."""

    config: SiteConfig | None
    error: str | None = None
    success: bool = True


@dataclass(frozen=True)
class SaveConfigInput:
    """Input for saving a full document or a partial update."""

    updates: SiteConfig | dict[str, Any]


@dataclass(frozen=True)
class ConfigValidationError:
    """Validation error with actionable message."""

    field: str
    code: str
    message: str


@dataclass(frozen=True)
class SaveConfigOutput:
    """Output from saving the configuration document."""

    config: SiteConfig | None
    errors: list[ConfigValidationError] = field(default_factory=list)
    success: bool = True
