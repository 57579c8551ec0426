"""SQLite-backed model database with a stack of materialised query results."""

from __future__ import annotations

import os
import re
import sqlite3
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Union

NULL_TEXT = '"(null)"'
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class DatabaseError(Exception):
    """Raised when a query cannot be prepared or executed."""


@dataclass
class _ResultSet:
    columns: List[str]
    rows: List[Tuple[Any, ...]] = field(default_factory=list)


def _as_text(value: Any) -> str:
    if value is None:
        return NULL_TEXT
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _coerce(value: Any) -> Any:
    """Turn numeric-looking text into numbers, the way result rows are typed."""
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return value
    return value


class Database:
    """A connection plus a stack of query results read by field and row."""

    def __init__(self, path: Union[str, Path] = ":memory:") -> None:
        self.path = str(path)
        self.is_new = self.path == ":memory:" or not os.path.exists(self.path)
        try:
            self._conn = sqlite3.connect(self.path, isolation_level=None)
            self._conn.create_function("asset", 1, self._sql_asset)
        except sqlite3.Error as exc:
            raise DatabaseError(f"failed to open database {self.path!r}: {exc}") from exc
        self._stack: List[_ResultSet] = []

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _sql_asset(self, name: Optional[str]) -> Optional[int]:
        if name is None:
            return None
        row = self._conn.execute(
            "SELECT id FROM assets WHERE name = ?", (name,)
        ).fetchone()
        if row is None or row[0] is None:
            return 0
        value = _coerce(row[0])
        return int(value) if isinstance(value, (int, float)) else 0

    def _run(self, query: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        try:
            return self._conn.execute(query, params)
        except (sqlite3.Error, sqlite3.Warning) as exc:
            raise DatabaseError(f"failed to prepare query: {exc}") from exc

    def close(self) -> None:
        self._stack.clear()
        self._conn.close()

    def exec(self, query: str) -> None:
        """Execute one or more statements."""
        try:
            self._conn.executescript(query)
        except (sqlite3.Error, sqlite3.Warning) as exc:
            raise DatabaseError(f"failed to execute query: {exc}") from exc

    def exec_file(self, path: Union[str, Path]) -> None:
        """Execute the statements stored in a file."""
        try:
            script = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise DatabaseError(f"cannot read {path}: {exc}") from exc
        self.exec(script)

    def get(self, query: str, header: bool = False) -> str:
        """Run a query and return its rows as comma-separated lines.

        The header line is only written when at least one row exists.
        """
        cursor = self._run(query)
        columns = [desc[0] for desc in cursor.description or ()]
        lines: List[str] = []
        for index, row in enumerate(cursor):
            if header and index == 0:
                lines.append(",".join(columns))
            lines.append(",".join(_as_text(value) for value in row))
        return "".join(line + "\n" for line in lines)

    def _kind_of(self, name: str) -> int:
        row = self._run("SELECT id FROM assets WHERE name = ?", (name,)).fetchone()
        if row is None:
            return 0
        value = _coerce(row[0])
        return int(value) if isinstance(value, (int, float)) else 0

    @staticmethod
    def _check_table(table: str) -> None:
        if not _IDENTIFIER.match(table):
            raise DatabaseError(f"invalid table name {table!r}")

    def row(self, table: str, name: str) -> str:
        """Return the rows of ``table`` whose kind is the asset called ``name``."""
        self._check_table(table)
        kind = self._kind_of(name)
        cursor = self._run(f"SELECT * FROM {table} WHERE kind = ?", (kind,))
        columns = [desc[0] for desc in cursor.description or ()]
        lines: List[str] = []
        for index, values in enumerate(cursor):
            if index == 0:
                lines.append(",".join(columns))
            lines.append(",".join(_as_text(value) for value in values))
        return "".join(line + "\n" for line in lines)

    def _push_cursor(self, cursor: sqlite3.Cursor) -> None:
        columns = [desc[0] for desc in cursor.description or ()]
        rows = [tuple(_coerce(value) for value in values) for values in cursor]
        self._stack.append(_ResultSet(columns, rows))

    def push(self, query: str) -> None:
        """Run a query and make its result the current one."""
        self._push_cursor(self._run(query))

    def row_push(self, table: str, name: str) -> None:
        """Push the rows of ``table`` whose kind is the asset called ``name``."""
        self._check_table(table)
        kind = self._kind_of(name)
        self._push_cursor(self._run(f"SELECT * FROM {table} WHERE kind = ?", (kind,)))

    def _top(self) -> _ResultSet:
        if not self._stack:
            raise DatabaseError("no query result has been pushed")
        return self._stack[-1]

    def pop(self) -> None:
        if not self._stack:
            raise DatabaseError("no query result has been pushed")
        self._stack.pop()

    def rows(self) -> int:
        return len(self._top().rows)

    def field(self, name: str, row: int) -> Any:
        """Return the value of column ``name`` in ``row`` of the current result."""
        top = self._top()
        try:
            column = top.columns.index(name)
        except ValueError:
            raise KeyError(f"field {name!r} not found") from None
        if not 0 <= row < len(top.rows):
            raise IndexError(f"row {row} out of range")
        return top.rows[row][column]

    def get_int(self, name: str, row: int) -> int:
        """Integer value of a field; text and null read as 0."""
        value = self.field(name, row)
        if isinstance(value, (int, float)):
            return int(value)
        return 0

    def get_float(self, name: str, row: int) -> float:
        """Float value of a field; text and null read as 0.0."""
        value = self.field(name, row)
        if isinstance(value, (int, float)):
            return float(value)
        return 0.0

    def get_str(self, name: str, row: int) -> str:
        return _as_text(self.field(name, row)).strip('"') if self.field(name, row) is None else _as_text(self.field(name, row))