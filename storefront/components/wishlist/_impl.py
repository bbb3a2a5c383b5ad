"""
WishlistSync - local wishlist membership plus the remote like counter.

toggle() flips membership first and persists it, then asks the store to
move the counter. The store's product replaces the cached one. A failed
counter update is logged and otherwise ignored; membership stays flipped.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from storefront.components.catalog import CatalogCache
from storefront.domain.errors import RemoteStoreError
from storefront.ports.remote_store import RemoteStorePort
from storefront.ports.storage import LocalStoragePort

logger = logging.getLogger(__name__)

WISHLIST_KEY = "wishlist"


class WishlistSync:
    def __init__(
        self,
        remote: RemoteStorePort,
        storage: LocalStoragePort,
        catalog: CatalogCache,
        key: str = WISHLIST_KEY,
    ) -> None:
        self._remote = remote
        self._storage = storage
        self._catalog = catalog
        self._key = key
        stored = storage.get(key, [])
        self._ids: list[str] = [str(i) for i in stored] if isinstance(stored, list) else []

    @property
    def ids(self) -> list[str]:
        return list(self._ids)

    def contains(self, product_id: str) -> bool:
        return product_id in self._ids

    def toggle(self, product_id: str) -> bool:
        """Flip membership of `product_id`. Returns the new membership."""
        liked = product_id not in self._ids
        if liked:
            self._ids.append(product_id)
        else:
            self._ids.remove(product_id)
        self._storage.set(self._key, list(self._ids))

        try:
            product = self._remote.like_product(product_id, increment=liked)
        except (RemoteStoreError, ValidationError) as e:
            logger.warning("Like counter sync failed for product %s: %s", product_id, e)
            return liked

        self._catalog.replace_product(product)
        return liked
