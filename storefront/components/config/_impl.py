"""
ConfigStore - owner of the in-memory SiteConfig.

Key behaviors:
- load() fetches the canonical document and normalizes it (self-healing layout)
- save() sends a full document or a partial update of mergeable keys, then
  replaces local state with the server's response, never the request
- a failed load leaves the store in the "error" state; no default document
  is substituted
- listeners (the theme applier, page renderers) run once per load/save
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from storefront.domain.defaults import MERGEABLE_KEYS, normalize_config
from storefront.domain.entities import SiteConfig
from storefront.domain.errors import ConfigLoadError, ConfigSaveError, RemoteStoreError
from storefront.ports.remote_store import RemoteStorePort

from .models import ConfigValidationError

logger = logging.getLogger(__name__)

ConfigStatus = Literal["idle", "loading", "ready", "error"]
ConfigListener = Callable[[SiteConfig], None]


def _to_wire(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, list):
        return [_to_wire(v) for v in value]
    return value


def validate_update_keys(updates: dict[str, Any]) -> list[ConfigValidationError]:
    """Reject keys that a partial save may not carry."""
    errors: list[ConfigValidationError] = []
    for key in updates:
        if to_camel(key) not in MERGEABLE_KEYS:
            errors.append(
                ConfigValidationError(
                    field=key,
                    code="not_mergeable",
                    message=f"Field '{key}' cannot be updated through a configuration save",
                )
            )
    return errors


def build_save_payload(updates: SiteConfig | dict[str, Any]) -> dict[str, Any]:
    """
    Turn a full document or a partial update into the request body.

    Raises:
        ConfigSaveError: If a partial update carries non-mergeable keys.
    """
    if isinstance(updates, SiteConfig):
        return updates.model_dump(by_alias=True, mode="json")

    errors = validate_update_keys(updates)
    if errors:
        raise ConfigSaveError("; ".join(e.message for e in errors))
    return {to_camel(key): _to_wire(value) for key, value in updates.items()}


class ConfigStore:
    """
    Holder of the current SiteConfig.

    All dependent rendering is gated on `status == "ready"`.
    """

    def __init__(
        self,
        remote: RemoteStorePort,
        listeners: list[ConfigListener] | None = None,
    ) -> None:
        self._remote = remote
        self._config: SiteConfig | None = None
        self._listeners: list[ConfigListener] = list(listeners or [])
        self.status: ConfigStatus = "idle"
        self.error: str | None = None

    @property
    def config(self) -> SiteConfig:
        """
        Current document.

        Raises:
            ConfigLoadError: If nothing has been loaded or the last load failed.
        """
        if self.status == "error":
            raise ConfigLoadError(self.error or "Configuration failed to load")
        if self._config is None:
            raise ConfigLoadError("Configuration has not been loaded")
        return self._config

    @property
    def is_ready(self) -> bool:
        return self.status == "ready"

    def subscribe(self, listener: ConfigListener) -> None:
        """Run `listener` after every successful load and save."""
        self._listeners.append(listener)

    def load(self) -> SiteConfig:
        """
        Fetch and normalize the canonical document.

        Raises:
            ConfigLoadError: If the store is unreachable or the document is invalid.
        """
        self.status = "loading"
        try:
            config = normalize_config(self._remote.get_config())
        except (RemoteStoreError, ValidationError, TypeError) as e:
            self.status = "error"
            self.error = str(e)
            logger.error("Configuration load failed: %s", e)
            raise ConfigLoadError(f"Failed to load configuration: {e}") from e

        self._replace(config)
        return config

    def save(self, updates: SiteConfig | dict[str, Any]) -> SiteConfig:
        """
        Persist a full document or a partial update.

        Local state becomes whatever the server returns. On failure local
        state is left untouched.

        Raises:
            ConfigSaveError: If the update is not mergeable or the save fails.
        """
        payload = build_save_payload(updates)
        try:
            saved = normalize_config(self._remote.save_config(payload))
        except (RemoteStoreError, ValidationError, TypeError) as e:
            logger.error("Configuration save failed: %s", e)
            raise ConfigSaveError(f"Failed to save configuration: {e}") from e

        self._replace(saved)
        return saved

    def _replace(self, config: SiteConfig) -> None:
        self._config = config
        self.status = "ready"
        self.error = None
        for listener in self._listeners:
            listener(config)
