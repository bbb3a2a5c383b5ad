"""
StoreContext - the explicit application context.

Built once at start-up with StoreContext.create() and handed to every
consumer; close() tears it down. There is no module-level store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from storefront.adapters.clock import SystemClock
from storefront.adapters.http_store import HttpRemoteStore
from storefront.adapters.local_storage import JsonFileStorage
from storefront.adapters.render.css_context import CssVariableContext
from storefront.components.cart import CartEngine
from storefront.components.catalog import CatalogCache
from storefront.components.config import ConfigStore
from storefront.components.layout import LayoutEditor
from storefront.components.orders import OrderPlacement
from storefront.components.theme import ThemeApplier
from storefront.components.wishlist import WishlistSync
from storefront.domain.entities import Session, SiteConfig, User
from storefront.domain.policy import PolicyEngine
from storefront.ports.clock import ClockPort
from storefront.ports.remote_store import RemoteStorePort
from storefront.ports.render import RenderContextPort
from storefront.ports.storage import LocalStoragePort
from storefront.rules.models import StoreRules
from storefront.ui.state import AppState

logger = logging.getLogger(__name__)


@dataclass
class StoreContext:
    remote: RemoteStorePort
    storage: LocalStoragePort
    clock: ClockPort
    policy: PolicyEngine
    config_store: ConfigStore
    theme: ThemeApplier
    cart: CartEngine
    catalog: CatalogCache
    wishlist: WishlistSync
    orders: OrderPlacement
    rules: StoreRules
    state: AppState = field(default_factory=AppState)

    @classmethod
    def create(
        cls,
        rules: StoreRules,
        *,
        remote: RemoteStorePort | None = None,
        client: httpx.Client | None = None,
        base_url: str | None = None,
        storage: LocalStoragePort | None = None,
        render_context: RenderContextPort | None = None,
        clock: ClockPort | None = None,
    ) -> StoreContext:
        if remote is None:
            remote = HttpRemoteStore(
                base_url or rules.api.base_url,
                client=client,
                timeout=rules.api.timeout_seconds,
            )
        if storage is None:
            storage = JsonFileStorage(Path(rules.storage.data_dir) / rules.storage.wishlist_filename)
        clock = clock or SystemClock()
        policy = PolicyEngine(rules.access)

        theme = ThemeApplier(render_context or CssVariableContext(), rules.theme)
        config_store = ConfigStore(remote, listeners=[theme.apply])
        cart = CartEngine()
        catalog = CatalogCache(remote, policy)

        return cls(
            remote=remote,
            storage=storage,
            clock=clock,
            policy=policy,
            config_store=config_store,
            theme=theme,
            cart=cart,
            catalog=catalog,
            wishlist=WishlistSync(remote, storage, catalog),
            orders=OrderPlacement(remote, cart, clock, policy),
            rules=rules,
        )

    def start(self) -> SiteConfig:
        """
        Load the configuration and the catalog.

        Raises:
            ConfigLoadError: If the configuration cannot be loaded.
            RemoteStoreError: If the catalog cannot be loaded.
        """
        config = self.config_store.load()
        self.catalog.refresh()
        return config

    @property
    def current_user(self) -> User | None:
        return self.state.current_user

    def login(self, username: str, password: str) -> Session:
        session = self.remote.login(username, password)
        self.state.login(session)
        logger.info("Logged in as %s", session.user.username)
        return session

    def logout(self) -> None:
        self.state.logout()
        if isinstance(self.remote, HttpRemoteStore):
            self.remote.set_token(None)

    def can(self, capability: str) -> bool:
        return self.policy.check_permission(self.current_user, capability)

    def admin_actions(self) -> list[str]:
        return self.policy.visible_actions(self.current_user)

    def open_layout_editor(self) -> LayoutEditor:
        """Editing session over a copy of the current home layout (settings permission)."""
        self.policy.require(self.current_user, "settings")
        return LayoutEditor(self.config_store.config.home_layout, self.clock)

    def save_layout(self, editor: LayoutEditor) -> SiteConfig:
        self.policy.require(self.current_user, "settings")
        return self.config_store.save(editor.to_config_patch())

    def close(self) -> None:
        self.logout()
        self.cart.clear()
        if isinstance(self.remote, HttpRemoteStore):
            self.remote.close()
