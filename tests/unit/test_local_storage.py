import json
from datetime import UTC, datetime, timedelta, timezone

from storefront.adapters.clock import FixedClock, SystemClock
from storefront.adapters.local_storage import JsonFileStorage, MemoryStorage


class TestJsonFileStorage:
    def test_missing_file_reads_empty(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "state" / "wishlist.json")
        assert storage.get("wishlist") is None
        assert storage.get("wishlist", []) == []

    def test_set_survives_new_instance(self, tmp_path):
        path = tmp_path / "wishlist.json"
        JsonFileStorage(path).set("wishlist", ["p1", "p2"])
        assert JsonFileStorage(path).get("wishlist") == ["p1", "p2"]
        assert json.loads(path.read_text(encoding="utf-8")) == {"wishlist": ["p1", "p2"]}
        assert not path.with_suffix(".json.tmp").exists()

    def test_remove(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "s.json")
        storage.set("a", 1)
        storage.set("b", 2)
        storage.remove("a")
        storage.remove("missing")
        assert storage.get("a") is None
        assert storage.get("b") == 2

    def test_corrupt_file_reads_empty(self, tmp_path, caplog):
        path = tmp_path / "s.json"
        path.write_text("{not json", encoding="utf-8")
        storage = JsonFileStorage(path)
        assert storage.get("wishlist") is None
        assert "unreadable" in caplog.text
        storage.set("wishlist", ["p9"])
        assert storage.get("wishlist") == ["p9"]

    def test_non_object_file_reads_empty(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert JsonFileStorage(path).get("wishlist") is None


def test_memory_storage():
    storage = MemoryStorage({"wishlist": ["p1"]})
    assert storage.get("wishlist") == ["p1"]
    storage.remove("wishlist")
    assert storage.get("wishlist", "gone") == "gone"


class TestClocks:
    def test_fixed_clock(self):
        instant = datetime(2025, 3, 14, 9, 0, tzinfo=timezone(timedelta(hours=2)))
        clock = FixedClock(instant)
        assert clock.now() == instant
        assert clock.now_utc().hour == 7
        assert clock.now_utc().tzinfo == UTC

    def test_system_clock_is_aware_in_utc(self):
        assert SystemClock().now_utc().tzinfo == UTC
