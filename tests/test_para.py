import pytest

from pharmastock.database import Connection, DatabaseError, create_schema
from pharmastock.para import Para, ParaStore


@pytest.fixture
def store():
    with Connection(":memory:") as db:
        create_schema(db)
        yield ParaStore(db)


def test_default_para():
    assert Para() == Para(0, "", "")


def test_add_then_list(store):
    store.add(Para(10, "CR-1", "Creme"))
    view = store.list_all()
    assert view.headers == ("SERIAL", "Ref", "Type")
    assert view.rows == ((10, "CR-1", "Creme"),)


def test_duplicate_serial_raises(store):
    store.add(Para(10, "CR-1", "Creme"))
    with pytest.raises(DatabaseError):
        store.add(Para(10, "CR-2", "Gel"))
    assert len(store.list_all()) == 1


def test_exists_and_delete(store):
    store.add(Para(11, "SH-1", "Shampoing"))
    assert store.exists(11) is True
    assert store.delete(11) is True
    assert store.exists(11) is False
    assert store.delete(11) is False


def test_update(store):
    store.add(Para(12, "old", "Gel"))
    assert store.update(12, "new", "Lotion") is True
    assert store.find(12).rows == ((12, "new", "Lotion"),)


def test_update_missing(store):
    assert store.update(404, "r", "t") is False
    assert len(store.list_all()) == 0


def test_sorted_by_serial(store):
    for serial in (30, 10, 20):
        store.add(Para(serial, f"r{serial}", f"t{serial}"))
    view = store.sorted_by_serial()
    assert view.headers == ("Serial", "Ref ", "Type")
    assert [row[0] for row in view] == [10, 20, 30]


def test_find_uses_column_names(store):
    store.add(Para(1, "A", "B"))
    store.add(Para(2, "C", "D"))
    view = store.find(2)
    assert view.headers == ("SERIAL", "REF", "TYPE")
    assert view.rows == ((2, "C", "D"),)


def test_find_missing_is_empty(store):
    assert len(store.find(5)) == 0