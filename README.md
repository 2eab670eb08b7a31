# pharmastock

Keep track of a pharmacy's stock of medicines and parapharmacy products in a
local SQLite database. You can use it from the command line or from Python.

It keeps two kinds of record:

- **Medicaments**, each with an id, a name (`nom`) and a reference.
- **Para** products, each with a serial number, a reference (`ref`) and a type.

## Installation

```
pip install .
```

The package needs nothing beyond the Python standard library. To run the
tests, install the `test` extra (`pip install .[test]`) and run `pytest`.

## Command line

Installing the package gives you the `pharmastock` command:

```
pharmastock [--database PATH] {medicament,para} ACTION ...
```

`--database` names the SQLite file to use. It defaults to `pharmastock.db` in
the current directory. The file and its `medicament` and `para` tables are
created if they do not exist yet.

Actions for medicaments:

```
pharmastock medicament add ID NOM REFERENCE
pharmastock medicament update ID NOM REFERENCE
pharmastock medicament delete ID
pharmastock medicament find ID
pharmastock medicament list [--sorted]
```

Actions for para products:

```
pharmastock para add SERIAL REF TYPE
pharmastock para update SERIAL REF TYPE
pharmastock para delete SERIAL
pharmastock para find SERIAL
pharmastock para list [--sorted]
```

Results are printed as a header line followed by one line per row, with the
columns separated by `|`.

- `add` stores the record, prints the full table, then prints a confirmation.
  If the record cannot be stored, for example because the id or serial is
  already taken, it prints `Erreur !` and exits with status 1.
- `update` and `delete` first check that the record exists. If it does not,
  they report `... introuvable.` and exit with status 1. If it does, they
  print the full table and a confirmation.
- `find` prints the rows whose id or serial matches. It uses the table's own
  column names as headers.
- `list` prints every record in storage order. With `--sorted`, the records
  are ordered by id or by serial.

Run `pharmastock --help` to see the full usage.

## Python usage

```python
from pharmastock.database import Connection, create_schema
from pharmastock.medicament import Medicament, MedicamentStore
from pharmastock.para import Para, ParaStore

with Connection("stock.db") as db:
    create_schema(db)

    medicaments = MedicamentStore(db)
    medicaments.add(Medicament(1, "Doliprane", "DOL-500"))
    medicaments.update(1, "Doliprane", "DOL-1000")   # True if a row changed
    print(medicaments.exists(1))                     # True
    for row in medicaments.sorted_by_id():
        print(row)
    print(medicaments.find(1).headers)               # ('ID', 'NOM', 'REFERENCE')
    medicaments.delete(1)                            # True if a row was removed

    paras = ParaStore(db)
    paras.add(Para(10, "CRM-01", "cream"))
    print(len(paras.list_all()))
```

`Connection` opens the SQLite file. Used as a context manager, it yields the
underlying `sqlite3.Connection` and closes it on exit. `create_schema` creates
the two tables if they are missing.

`MedicamentStore` and `ParaStore` offer these methods:

- `add`
- `update`
- `exists`
- `delete`
- `list_all`
- `find`
- `sorted_by_id` on `MedicamentStore`, and `sorted_by_serial` on `ParaStore`

The listing and search methods return a `TableView`. It is a frozen dataclass
with `headers` and `rows`, and it supports iteration over its rows and `len()`.

A `DatabaseError` is raised in these cases:

- the database cannot be opened;
- the schema cannot be created;
- a statement fails, for instance when you add a record whose id or serial
  already exists.

## What it does not do

`pharmastock` has no graphical window. It is used only through the
`pharmastock` command and the Python classes described above. All data lives
in a local SQLite file, and it does not connect to a remote database server.