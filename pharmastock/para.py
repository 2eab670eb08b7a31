"""Parapharmacy products and their storage."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Any

from pharmastock.database import DatabaseError, TableView

_LIST_HEADERS = ("SERIAL", "Ref", "Type")
_SORTED_HEADERS = ("Serial", "Ref ", "Type")


@dataclass(frozen=True)
class Para:
    """A parapharmacy product identified by its serial number."""

    serial: int = 0
    ref: str = ""
    type: str = ""


class ParaStore:
    """Reads and writes products in the ``para`` table."""

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

    def add(self, para: Para) -> None:
        """Insert a product; raise DatabaseError if it cannot be stored."""
        self._write(
            "INSERT INTO para (SERIAL, REF, TYPE) VALUES (?, ?, ?)",
            (para.serial, para.ref, para.type),
        )

    def list_all(self) -> TableView:
        """Every product, in storage order."""
        return self._view("SELECT * FROM para", headers=_LIST_HEADERS)

    def update(self, serial: int, ref: str, type: str) -> bool:
        """Change reference and type of a product; True if a row changed."""
        changed = self._write(
            "UPDATE para SET TYPE = ?, REF = ? WHERE SERIAL = ?",
            (type, ref, serial),
        )
        return changed > 0

    def exists(self, serial: int) -> bool:
        """Whether a product with this serial is stored."""
        view = self._view("SELECT 1 FROM para WHERE SERIAL = ? LIMIT 1", (serial,))
        return len(view) > 0

    def delete(self, serial: int) -> bool:
        """Remove a product; True if one was removed."""
        return self._write("DELETE FROM para WHERE SERIAL = ?", (serial,)) > 0

    def sorted_by_serial(self) -> TableView:
        """Every product, ordered by serial."""
        return self._view("SELECT * FROM para ORDER BY SERIAL", headers=_SORTED_HEADERS)

    def find(self, serial: int) -> TableView:
        """The products whose serial matches, with the table's column names."""
        return self._view("SELECT * FROM para WHERE SERIAL = ?", (serial,))