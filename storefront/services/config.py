"""
Server-side configuration document service.

get() creates the canonical default on first read; save() merges the
incoming keys over the stored document. Both return the normalized
document, so the non-empty layout rule holds on every response.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from storefront.domain.defaults import default_home_layout, get_default_config, normalize_config
from storefront.domain.entities import SiteConfig, User
from storefront.domain.policy import PolicyEngine
from storefront.ports.repo import ConfigRepoPort

logger = logging.getLogger(__name__)


class ConfigService:
    def __init__(self, repo: ConfigRepoPort, policy: PolicyEngine):
        self.repo = repo
        self.policy = policy

    def _store(self, config: SiteConfig) -> SiteConfig:
        self.repo.save(config.model_dump(by_alias=True, mode="json"))
        return config

    def get(self) -> SiteConfig:
        stored = self.repo.get()
        if stored is None:
            logger.info("No configuration stored; creating the default document")
            return self._store(get_default_config())
        return normalize_config(stored)

    def save(self, actor: User | None, updates: dict[str, Any]) -> SiteConfig:
        """
        Merge `updates` (wire names) into the stored document.

        Raises:
            LoginRequiredError / PermissionDeniedError: Without the settings capability.
            ValueError: If the merged document is invalid.
        """
        self.policy.require(actor, "settings")
        current = self.get().model_dump(by_alias=True, mode="json")
        merged = {**current, **{to_camel(k): v for k, v in updates.items()}}
        try:
            config = normalize_config(merged)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e.errors()[0]['msg']}") from e
        return self._store(config)

    def reset_layout(self) -> SiteConfig:
        """Restore the default home layout, keeping every other field."""
        config = self.get()
        config.home_layout = default_home_layout()
        logger.info("Home layout reset to defaults")
        return self._store(config)
