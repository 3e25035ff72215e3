"""Behaviour every Store backend must share.

The same suite runs against the bare MemoryStore and against a
ConcurrentStore wrapping one.
"""

import pytest

from models import Range
from storage import ConcurrentStore, MemoryStore, Store


@pytest.fixture(params=["memory", "concurrent"])
def store(request) -> Store:
    if request.param == "memory":
        return MemoryStore()
    return ConcurrentStore()


@pytest.fixture
def filled(store: Store) -> Store:
    """Store holding keys a, b, ba, bb, c and a binary key."""
    for key in (b"a", b"b", b"ba", b"bb", b"c", b"\x00\xff"):
        store.set(key, key.upper())
    return store


class TestPointOperations:
    """Tests for get/set/delete."""

    def test_get_missing_returns_none(self, store: Store):
        assert store.get(b"missing") is None

    def test_set_and_get(self, store: Store):
        store.set(b"key", b"value")
        assert store.get(b"key") == b"value"

    def test_set_overwrites(self, store: Store):
        store.set(b"key", b"value1")
        store.set(b"key", b"value2")
        assert store.get(b"key") == b"value2"

    def test_empty_key_and_value(self, store: Store):
        store.set(b"", b"")
        assert store.get(b"") == b""

    def test_binary_data(self, store: Store):
        key = b"\x00\x01\x02\xff\xfe"
        value = b"\x00" * 100 + b"\xff" * 100
        store.set(key, value)
        assert store.get(key) == value

    def test_delete(self, store: Store):
        store.set(b"key", b"value")
        store.delete(b"key")
        assert store.get(b"key") is None

    def test_delete_missing_is_noop(self, store: Store):
        store.set(b"key", b"value")
        store.delete(b"other")
        assert store.get(b"key") == b"value"

    def test_delete_then_set_again(self, store: Store):
        store.set(b"key", b"value1")
        store.delete(b"key")
        store.set(b"key", b"value2")
        assert store.get(b"key") == b"value2"
        assert list(store.scan()) == [(b"key", b"value2")]

    def test_flush(self, store: Store):
        store.set(b"key", b"value")
        store.flush()
        assert store.get(b"key") == b"value"


class TestScan:
    """Tests for range scans."""

    def test_empty_store(self, store: Store):
        assert list(store.scan()) == []

    def test_scan_all_in_key_order(self, filled: Store):
        keys = [k for k, _ in filled.scan()]
        assert keys == [b"\x00\xff", b"a", b"b", b"ba", b"bb", b"c"]

    def test_scan_returns_values(self, filled: Store):
        assert dict(filled.scan())[b"ba"] == b"BA"

    def test_scan_all_range(self, filled: Store):
        assert list(filled.scan(Range.all())) == list(filled.scan())

    def test_half_open_range(self, filled: Store):
        keys = [k for k, _ in filled.scan(Range(start=b"a", end=b"bb"))]
        assert keys == [b"a", b"b", b"ba"]

    def test_inclusive_end(self, filled: Store):
        keys = [k for k, _ in filled.scan(Range(start=b"a", end=b"bb", end_inclusive=True))]
        assert keys == [b"a", b"b", b"ba", b"bb"]

    def test_exclusive_start(self, filled: Store):
        keys = [k for k, _ in filled.scan(Range(start=b"b", start_inclusive=False))]
        assert keys == [b"ba", b"bb", b"c"]

    def test_start_between_keys(self, filled: Store):
        keys = [k for k, _ in filled.scan(Range(start=b"bc"))]
        assert keys == [b"c"]

    def test_end_only(self, filled: Store):
        keys = [k for k, _ in filled.scan(Range(end=b"b"))]
        assert keys == [b"\x00\xff", b"a"]

    def test_prefix(self, filled: Store):
        keys = [k for k, _ in filled.scan(Range.prefix(b"b"))]
        assert keys == [b"b", b"ba", b"bb"]

    def test_empty_range(self, filled: Store):
        assert list(filled.scan(Range(start=b"b", end=b"b"))) == []

    def test_range_past_last_key(self, filled: Store):
        assert list(filled.scan(Range(start=b"d"))) == []

    def test_scan_skips_deleted(self, filled: Store):
        filled.delete(b"b")
        keys = [k for k, _ in filled.scan(Range.prefix(b"b"))]
        assert keys == [b"ba", b"bb"]


class TestMemoryStore:
    """MemoryStore specifics."""

    def test_len(self):
        store = MemoryStore()
        store.set(b"a", b"1")
        store.set(b"b", b"2")
        store.set(b"a", b"3")
        assert len(store) == 2
        store.delete(b"a")
        assert len(store) == 1

    def test_rejects_str_keys(self):
        store = MemoryStore()
        with pytest.raises(TypeError):
            store.set("key", b"value")
        assert len(store) == 0

    def test_scan_is_lazy(self):
        store = MemoryStore()
        store.set(b"a", b"1")
        scan = store.scan()
        store.set(b"b", b"2")
        assert list(scan) == [(b"a", b"1"), (b"b", b"2")]

    def test_str(self):
        assert str(MemoryStore()) == "memory"
