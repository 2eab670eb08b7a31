"""Medicament records and their storage."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Any

from pharmastock.database import DatabaseError, TableView

_HEADERS = ("ID", "Nom ", "Reference")


@dataclass(frozen=True)
class Medicament:
    """A medicament identified by its numeric id."""

    id: int = 0
    nom: str = ""
    reference: str = ""


class MedicamentStore:
    """Reads and writes medicaments in the ``medicament`` table."""

    def __init__(self, db: sqlite3.Connection) -> None:
        self.db = db

    def _write(self, sql: str, params: tuple[Any, ...]) -> int:
        try:
            with self.db:
                return self.db.execute(sql, params).rowcount
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def _view(
        self, sql: str, params: tuple[Any, ...] = (), headers: tuple[str, ...] | None = None
    ) -> TableView:
        try:
            cursor = self.db.execute(sql, params)
            rows = tuple(cursor.fetchall())
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        names = headers or tuple(column[0] for column in cursor.description)
        return TableView(names, rows)

    def add(self, medicament: Medicament) -> None:
        """Insert a medicament; raise DatabaseError if it cannot be stored."""
        self._write(
            "INSERT INTO medicament (ID, NOM, REFERENCE) VALUES (?, ?, ?)",
            (medicament.id, medicament.nom, medicament.reference),
        )

    def list_all(self) -> TableView:
        """Every medicament, in storage order."""
        return self._view("SELECT * FROM medicament", headers=_HEADERS)

    def update(self, id: int, nom: str, reference: str) -> bool:
        """Change name and reference of a medicament; True if a row changed."""
        changed = self._write(
            "UPDATE medicament SET NOM = ?, REFERENCE = ? WHERE ID = ?",
            (nom, reference, id),
        )
        return changed > 0

    def exists(self, id: int) -> bool:
        """Whether a medicament with this id is stored."""
        view = self._view("SELECT 1 FROM medicament WHERE ID = ? LIMIT 1", (id,))
        return len(view) > 0

    def delete(self, id: int) -> bool:
        """Remove a medicament; True if one was removed."""
        return self._write("DELETE FROM medicament WHERE ID = ?", (id,)) > 0

    def sorted_by_id(self) -> TableView:
        """Every medicament, ordered by id."""
        return self._view("SELECT * FROM medicament ORDER BY ID", headers=_HEADERS)

    def find(self, id: int) -> TableView:
        """The medicaments whose id matches, with the table's column names."""
        return self._view("SELECT * FROM medicament WHERE ID = ?", (id,))