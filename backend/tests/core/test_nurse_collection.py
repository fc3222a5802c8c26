"""Client State — the four mutation points and derived stats."""

from nurse_registry.core.nurse_collection import NurseCollection
from nurse_registry.core.nurse_record import NurseRecord


def _nurse(id, age=30, name="N"):
    return NurseRecord(id, f"{name}{id}", f"RN-{id}", "1990-01-01", age)


def test_replace_all_sets_records():
    c = NurseCollection()
    c.replace_all([_nurse(3), _nurse(2)])
    assert [r.id for r in c.records] == [3, 2]


def test_prepend_puts_new_record_first():
    c = NurseCollection()
    c.replace_all([_nurse(2), _nurse(1)])
    c.prepend(_nurse(3))
    assert [r.id for r in c.records] == [3, 2, 1]


def test_replace_swaps_by_id_keeping_position():
    c = NurseCollection()
    c.replace_all([_nurse(2), _nurse(1)])
    assert c.replace(_nurse(1, age=99))
    assert [r.id for r in c.records] == [2, 1]
    assert c.find(1).age == 99


def test_replace_unknown_id_is_noop():
    c = NurseCollection()
    c.replace_all([_nurse(1)])
    assert not c.replace(_nurse(5))
    assert [r.id for r in c.records] == [1]


def test_remove_by_id():
    c = NurseCollection()
    c.replace_all([_nurse(2), _nurse(1)])
    assert c.remove(2)
    assert not c.remove(2)
    assert [r.id for r in c.records] == [1]


def test_records_snapshot_is_immutable():
    c = NurseCollection()
    c.replace_all([_nurse(1)])
    snapshot = c.records
    c.prepend(_nurse(2))
    assert len(snapshot) == 1
    assert isinstance(snapshot, tuple)


def test_stats_total_and_rounded_average():
    c = NurseCollection()
    assert c.stats() == {"total": 0, "average_age": 0}
    c.replace_all([_nurse(1, age=30), _nurse(2, age=31)])
    assert c.stats() == {"total": 2, "average_age": round(30.5)}
