import pytest

from algosolve.lru import LRUCache


def test_int_keys_evict_oldest():
    cache = LRUCache(2)
    assert 1 not in cache
    assert cache.get(1) is None
    cache.put(1, "a")
    assert 1 in cache
    assert cache.get(1) == "a"
    cache.put(2, "a")
    cache.put(3, "a")
    assert 1 not in cache
    assert cache.get(1) is None


def test_get_refreshes_entry():
    cache = LRUCache(2)
    cache.put("aa", 1)
    cache.put("ab", {})
    cache.get("aa")
    cache.put("ac", 2)
    assert "aa" in cache
    assert cache.get("aa") == 1
    assert "ab" not in cache
    assert cache.get("ab", "missing") == "missing"
    assert cache.get("ac") == 2


def test_put_existing_updates_and_refreshes():
    cache = LRUCache(2)
    cache.put(1, "a")
    cache.put(2, "b")
    cache.put(1, "c")
    cache.put(3, "d")
    assert cache.get(1) == "c"
    assert 2 not in cache
    assert len(cache) == 2


def test_length_never_exceeds_capacity():
    cache = LRUCache(3)
    for i in range(10):
        cache.put(i, i)
        assert len(cache) == min(i + 1, 3)
    assert [k for k in range(10) if k in cache] == [7, 8, 9]


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        LRUCache(capacity)