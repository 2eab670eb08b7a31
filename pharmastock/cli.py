"""Command-line front end for managing medicaments and parapharmacy products."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial
from typing import Any

from pharmastock.database import Connection, DatabaseError, TableView, create_schema
from pharmastock.medicament import Medicament, MedicamentStore
from pharmastock.para import Para, ParaStore

DEFAULT_DATABASE = "pharmastock.db"


@dataclass(frozen=True)
class _Entity:
    name: str
    label: str
    fields: tuple[str, str, str]
    make_store: Callable[[sqlite3.Connection], Any]
    make_record: Callable[[int, str, str], Any]
    sort: Callable[[Any], TableView]


_ENTITIES = (
    _Entity(
        "medicament",
        "Medicament",
        ("id", "nom", "reference"),
        MedicamentStore,
        Medicament,
        lambda store: store.sorted_by_id(),
    ),
    _Entity(
        "para",
        "Para",
        ("serial", "ref", "type"),
        ParaStore,
        Para,
        lambda store: store.sorted_by_serial(),
    ),
)


def _render(view: TableView) -> None:
    lines = [" | ".join(header.strip() for header in view.headers)]
    lines.extend(" | ".join(str(value) for value in row) for row in view)
    print("\n".join(lines))


def _not_found(entity: _Entity) -> int:
    print(f"{entity.label} introuvable.", file=sys.stderr)
    return 1


def _add(entity: _Entity, store: Any, args: argparse.Namespace) -> int:
    try:
        store.add(entity.make_record(args.key, args.first, args.second))
    except DatabaseError:
        print("Erreur !", file=sys.stderr)
        return 1
    _render(store.list_all())
    print(f"{entity.label} ajouté.")
    return 0


def _update(entity: _Entity, store: Any, args: argparse.Namespace) -> int:
    if not store.exists(args.key):
        return _not_found(entity)
    if store.update(args.key, args.first, args.second):
        _render(store.list_all())
        print(f"{entity.label} modifier")
    return 0


def _delete(entity: _Entity, store: Any, args: argparse.Namespace) -> int:
    if not store.exists(args.key):
        return _not_found(entity)
    if store.delete(args.key):
        _render(store.list_all())
        print(f"{entity.label} supprimé")
    return 0


def _list(entity: _Entity, store: Any, args: argparse.Namespace) -> int:
    _render(entity.sort(store) if args.sorted else store.list_all())
    return 0


def _find(entity: _Entity, store: Any, args: argparse.Namespace) -> int:
    _render(store.find(args.key))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pharmastock", description="Manage medicaments and parapharmacy products."
    )
    parser.add_argument(
        "--database", default=DEFAULT_DATABASE, help="path of the SQLite database file"
    )
    entities = parser.add_subparsers(dest="entity", required=True)
    for entity in _ENTITIES:
        key, first, second = entity.fields
        entity_parser = entities.add_parser(entity.name, help=f"manage {entity.name} records")
        actions = entity_parser.add_subparsers(dest="action", required=True)

        for action, handler in (("add", _add), ("update", _update)):
            sub = actions.add_parser(action)
            sub.add_argument("key", type=int, metavar=key)
            sub.add_argument("first", metavar=first)
            sub.add_argument("second", metavar=second)
            sub.set_defaults(entity_spec=entity, handler=handler)

        for action, handler in (("delete", _delete), ("find", _find)):
            sub = actions.add_parser(action)
            sub.add_argument("key", type=int, metavar=key)
            sub.set_defaults(entity_spec=entity, handler=handler)

        sub = actions.add_parser("list")
        sub.add_argument("--sorted", action="store_true", help=f"order by {key}")
        sub.set_defaults(entity_spec=entity, handler=_list)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command against the stock database and return the exit status."""
    args = _build_parser().parse_args(argv)
    entity: _Entity = args.entity_spec
    try:
        with Connection(args.database) as db:
            create_schema(db)
            return partial(args.handler, entity, entity.make_store(db))(args)
    except DatabaseError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())