import logging

import httpx
import pytest
from fakes import FakeRemoteStore, make_product

from storefront.adapters.http_store import HttpRemoteStore
from storefront.adapters.local_storage import MemoryStorage
from storefront.components.catalog import CatalogCache
from storefront.components.wishlist import WISHLIST_KEY, WishlistSync


@pytest.fixture
def setup(remote: FakeRemoteStore, storage: MemoryStorage):
    remote.products["p1"] = make_product("p1", likes=4)
    catalog = CatalogCache(remote)
    catalog.refresh()
    return WishlistSync(remote, storage, catalog), catalog


def test_like_adds_membership_and_takes_server_counter(setup, remote: FakeRemoteStore) -> None:
    wishlist, catalog = setup
    assert wishlist.toggle("p1") is True
    assert wishlist.contains("p1")
    assert catalog.get_product("p1").likes == 5
    assert remote.calls[-1] == "like_product"


def test_unlike_decrements(setup) -> None:
    wishlist, catalog = setup
    wishlist.toggle("p1")
    assert wishlist.toggle("p1") is False
    assert not wishlist.contains("p1")
    assert catalog.get_product("p1").likes == 4


def test_server_value_wins(setup, remote: FakeRemoteStore) -> None:
    wishlist, catalog = setup
    remote.like_result = make_product("p1", likes=42)
    wishlist.toggle("p1")
    assert catalog.get_product("p1").likes == 42


def test_double_toggle_restores_membership(setup) -> None:
    wishlist, _ = setup
    before = wishlist.ids
    wishlist.toggle("p1")
    wishlist.toggle("p1")
    assert wishlist.ids == before


def test_membership_persisted(setup, storage: MemoryStorage) -> None:
    wishlist, _ = setup
    wishlist.toggle("p1")
    assert storage.get(WISHLIST_KEY) == ["p1"]


def test_membership_loaded_from_storage(remote: FakeRemoteStore) -> None:
    storage = MemoryStorage({WISHLIST_KEY: ["p9", "p1"]})
    wishlist = WishlistSync(remote, storage, CatalogCache(remote))
    assert wishlist.ids == ["p9", "p1"]


def test_corrupt_storage_reads_empty(remote: FakeRemoteStore) -> None:
    storage = MemoryStorage({WISHLIST_KEY: "oops"})
    assert WishlistSync(remote, storage, CatalogCache(remote)).ids == []


def test_remote_failure_logged_without_rollback(setup, remote: FakeRemoteStore, caplog) -> None:
    wishlist, catalog = setup
    remote.failing.add("like_product")
    with caplog.at_level(logging.WARNING):
        assert wishlist.toggle("p1") is True
    assert wishlist.contains("p1")
    assert catalog.get_product("p1").likes == 4
    assert "Like counter sync failed" in caplog.text


def test_uncached_product_still_toggles(remote: FakeRemoteStore, storage: MemoryStorage) -> None:
    remote.products["p2"] = make_product("p2")
    catalog = CatalogCache(remote)
    wishlist = WishlistSync(remote, storage, catalog)
    wishlist.toggle("p2")
    assert wishlist.contains("p2")
    assert catalog.products == []


@pytest.mark.parametrize("body", [b"oops", b'{"unexpected": true}'])
def test_malformed_like_response_logged(storage: MemoryStorage, caplog, body: bytes) -> None:
    client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, content=body)))
    remote = HttpRemoteStore("http://store.test/api", client=client)
    wishlist = WishlistSync(remote, storage, CatalogCache(remote))
    with caplog.at_level(logging.WARNING):
        assert wishlist.toggle("p1") is True
    assert wishlist.contains("p1")
    assert storage.get(WISHLIST_KEY) == ["p1"]
    assert "Like counter sync failed" in caplog.text
