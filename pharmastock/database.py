"""SQLite connection handling, schema creation and tabular query results."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Union

PathLike = Union[str, "os.PathLike[str]"]

_SCHEMA = """
CREATE TABLE IF NOT EXISTS medicament (
    ID INTEGER NOT NULL PRIMARY KEY,
    NOM TEXT NOT NULL DEFAULT '',
    REFERENCE TEXT NOT NULL DEFAULT ''
);
CREATE TABLE IF NOT EXISTS para (
    SERIAL INTEGER NOT NULL PRIMARY KEY,
    REF TEXT NOT NULL DEFAULT '',
    TYPE TEXT NOT NULL DEFAULT ''
);
"""


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


class Connection:
    """Owns a single SQLite connection to the stock database."""

    def __init__(self, path: PathLike) -> None:
        self.path = path
        self.db: sqlite3.Connection | None = None

    def connect(self) -> sqlite3.Connection:
        """Open the database (once) and return the live connection."""
        if self.db is None:
            try:
                self.db = sqlite3.connect(self.path)
            except sqlite3.Error as exc:
                raise DatabaseError(f"Erreur Paramétres {exc}") from exc
        return self.db

    def close(self) -> None:
        """Close the connection if it is open."""
        if self.db is not None:
            self.db.close()
            self.db = None

    def __enter__(self) -> sqlite3.Connection:
        return self.connect()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def create_schema(db: sqlite3.Connection) -> None:
    """Create the medicament and para tables when they are missing."""
    try:
        db.executescript(_SCHEMA)
        db.commit()
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc


@dataclass(frozen=True)
class TableView:
    """The header labels and rows produced by a query."""

    headers: tuple[str, ...]
    rows: tuple[tuple[Any, ...], ...] = ()

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)