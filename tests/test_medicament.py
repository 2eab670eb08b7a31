import pytest

from pharmastock.database import Connection, DatabaseError, create_schema
from pharmastock.medicament import Medicament, MedicamentStore


@pytest.fixture
def store():
    with Connection(":memory:") as db:
        create_schema(db)
        yield MedicamentStore(db)


def test_default_medicament():
    assert Medicament() == Medicament(0, "", "")


def test_add_then_list(store):
    store.add(Medicament(1, "Doliprane", "D-500"))
    view = store.list_all()
    assert view.headers == ("ID", "Nom ", "Reference")
    assert view.rows == ((1, "Doliprane", "D-500"),)


def test_duplicate_id_raises(store):
    store.add(Medicament(1, "Doliprane", "D-500"))
    with pytest.raises(DatabaseError):
        store.add(Medicament(1, "Other", "O-1"))
    assert len(store.list_all()) == 1


def test_exists(store):
    store.add(Medicament(7, "Aspirine", "A-1"))
    assert store.exists(7) is True
    assert store.exists(8) is False


def test_delete(store):
    store.add(Medicament(3, "Aspirine", "A-1"))
    assert store.delete(3) is True
    assert store.exists(3) is False
    assert store.delete(3) is False


def test_update(store):
    store.add(Medicament(2, "Old", "R-old"))
    assert store.update(2, "New", "R-new") is True
    assert store.find(2).rows == ((2, "New", "R-new"),)


def test_update_missing(store):
    assert store.update(99, "x", "y") is False
    assert len(store.list_all()) == 0


def test_sorted_by_id(store):
    for ident in (5, 1, 3):
        store.add(Medicament(ident, f"m{ident}", f"r{ident}"))
    view = store.sorted_by_id()
    assert view.headers == ("ID", "Nom ", "Reference")
    assert [row[0] for row in view] == [1, 3, 5]


def test_find_uses_column_names(store):
    store.add(Medicament(4, "Smecta", "S-3"))
    store.add(Medicament(6, "Spasfon", "S-8"))
    view = store.find(4)
    assert view.headers == ("ID", "NOM", "REFERENCE")
    assert view.rows == ((4, "Smecta", "S-3"),)


def test_find_missing_is_empty(store):
    view = store.find(42)
    assert len(view) == 0
    assert view.headers == ("ID", "NOM", "REFERENCE")