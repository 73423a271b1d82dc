"""SQLite storage of solve times and their scrambles."""

from __future__ import annotations

import sqlite3
from types import TracebackType
from typing import Iterable

from cubetimer.scramble import Move, scramble_to_string

DEFAULT_DB_PATH = "cubing.db"


class StoreError(Exception):
    """Raised when the solve store cannot complete an operation."""


class SolveStore:
    """A connection to the solves database."""

    def __init__(self, path: str = DEFAULT_DB_PATH) -> None:
        try:
            self._conn = sqlite3.connect(path, isolation_level=None)
        except sqlite3.Error as exc:
            raise StoreError(f"cannot open database {path!r}: {exc}") from exc

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        try:
            return self._conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc

    def init_tables(self) -> None:
        """Create the solves table if it does not exist."""
        self._execute(
            "CREATE TABLE IF NOT EXISTS solves ("
            "id INTEGER PRIMARY KEY,"
            "scramble TEXT NOT NULL,"
            "time REAL NOT NULL,"
            "created_at DATETIME DEFAULT CURRENT_TIMESTAMP"
            ");"
        )

    def insert_solve(self, time: float, moves: Iterable[Move]) -> None:
        """Record a solve time together with its scramble."""
        self._execute(
            "INSERT INTO solves (scramble, time) VALUES (?, ?)",
            (scramble_to_string(moves), float(time)),
        )

    def average_all_time(self) -> tuple[float, int]:
        """Return the mean time (0.0 when empty) and the number of solves."""
        avg, count = self._execute("SELECT AVG(time), COUNT(*) FROM solves").fetchone()
        return (0.0 if avg is None else float(avg)), int(count)

    def personal_best(self) -> tuple[float, str]:
        """Return the fastest time and its scramble."""
        row = self._execute(
            "SELECT time, scramble FROM solves ORDER BY time LIMIT 1"
        ).fetchone()
        if row is None:
            raise StoreError("no solves recorded")
        return float(row[0]), row[1]

    def last_five(self) -> list[tuple[float, str]]:
        """Return up to five most recent solves as (time, scramble), newest first."""
        rows = self._execute(
            "SELECT time, scramble FROM solves ORDER BY created_at DESC LIMIT 5"
        ).fetchall()
        return [(float(time), scramble) for time, scramble in rows]

    def delete_last_solve(self) -> None:
        """Delete the most recently recorded solve."""
        self._execute(
            "DELETE FROM solves WHERE id = (SELECT id FROM solves "
            "ORDER BY created_at DESC LIMIT 1)"
        )

    def add_two_last(self) -> None:
        """Add a two-second penalty to the most recent solve."""
        self._execute(
            "UPDATE solves SET time = time + 2.0 WHERE id = ("
            " SELECT id FROM solves ORDER BY created_at DESC LIMIT 1)"
        )

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> "SolveStore":
        return self

    def __exit__(
        self,
        *args: tuple[type[BaseException] | None, BaseException | None, TracebackType | None],
    ) -> None:
        self.close()