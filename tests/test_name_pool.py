import pytest

from tinydatalog.engine.name_pool import NamePool


def test_interning_twice_returns_same_id():
    pool = NamePool()
    first = pool.intern("luke")
    assert pool.intern("luke") == first
    assert len(pool) == 1


def test_ids_are_dense_and_first_seen_ordered():
    pool = NamePool()
    ids = [pool.intern(n) for n in ["vader", "luke", "vader", "leia", "luke"]]
    assert ids == [0, 1, 0, 2, 1]
    assert list(pool) == ["vader", "luke", "leia"]


def test_resolve_round_trips_and_rejects_unknown_ids():
    pool = NamePool()
    pool.intern("a")
    pool.intern("b")
    assert pool.resolve(1) == "b"
    assert pool[0] == "a"
    with pytest.raises(IndexError):
        pool.resolve(2)
    with pytest.raises(IndexError):
        pool.resolve(-1)


def test_membership_and_lookup_without_interning():
    pool = NamePool()
    pool.intern("a")
    assert "a" in pool
    assert "b" not in pool
    assert pool.get_id("b") is None
    assert len(pool) == 1
