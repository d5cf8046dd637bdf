from tinydatalog.engine.binding import Binding


def test_insert_creates_slot_only_on_first_sight():
    b = Binding()
    assert b.insert(7) == 0
    assert b.insert(3) == 1
    assert b.insert(7) == 0
    assert len(b) == 2
    assert list(b.items()) == [(0, 7), (1, 3)]


def test_get_reads_by_slot():
    b = Binding([4, 2, 9])
    assert b.get(0) == 4
    assert b[2] == 9
    assert b.values() == (4, 2, 9)


def test_equality_and_ordering_follow_values():
    assert Binding([0, 1]) == Binding([0, 1])
    assert Binding([0, 1]) != Binding([1, 0])
    assert sorted([Binding([1, 0]), Binding([0, 2]), Binding([0, 1])]) == [
        Binding([0, 1]), Binding([0, 2]), Binding([1, 0]),
    ]
