import pytest

from tinydatalog.engine.counter import Counter


def test_empty_length():
    counter = Counter(0, 100)
    assert counter.is_empty()
    assert list(counter) == []


def test_empty_max():
    counter = Counter(1, 0)
    assert counter.is_empty()
    assert list(counter) == []


def test_single_slot_two_values():
    counter = Counter(1, 2)
    result = list(counter)
    assert counter.is_empty()
    assert result == [(0,), (1,)]


def test_three_slots_four_values():
    counter = Counter(3, 4)
    result = list(counter)
    assert counter.is_empty()
    assert len(result) == 64
    assert len(set(result)) == 64
    assert all(0 <= x < 4 for t in result for x in t)
    assert (3, 3, 3) in result
    assert (0, 0, 4) not in result


def test_slot_zero_varies_fastest():
    assert list(Counter(2, 3))[:4] == [(0, 0), (1, 0), (2, 0), (0, 1)]


def test_len_counts_remaining():
    counter = Counter(2, 2)
    assert len(counter) == 4
    next(counter)
    assert len(counter) == 3


def test_negative_arguments_rejected():
    with pytest.raises(ValueError):
        Counter(-1, 2)
