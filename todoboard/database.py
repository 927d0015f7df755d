"""SQLite storage for tasks."""

from __future__ import annotations

import os
import sqlite3
from dataclasses import dataclass
from datetime import date
from typing import Union

DEFAULT_PATH = "tasks.db"

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS tasks ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "name TEXT,"
    "tags TEXT,"
    "deadline TEXT,"
    "category TEXT,"
    "completed INTEGER)"
)


class DatabaseError(Exception):
    """Raised when the task database cannot be opened or queried."""


@dataclass
class Task:
    """A single to-do entry."""

    name: str = ""
    tags: str = ""
    category: str = ""
    deadline: date | None = None
    completed: bool = False
    id: int | None = None


def _encode_date(value: date | None) -> str:
    return value.isoformat() if value is not None else ""


def _decode_date(text: object) -> date | None:
    if not isinstance(text, str):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


class TaskDatabase:
    """Tasks kept in one SQLite file."""

    def __init__(self, path: Union[str, "os.PathLike[str]"] = DEFAULT_PATH) -> None:
        self.path = path
        self._conn: sqlite3.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        """Open the database and create the table if needed; a no-op when open."""
        if self._conn is not None:
            return
        try:
            conn = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot open database {self.path!r}: {exc}") from exc
        try:
            conn.execute(_SCHEMA)
            conn.commit()
        except sqlite3.Error as exc:
            conn.close()
            raise DatabaseError(f"cannot open database {self.path!r}: {exc}") from exc
        self._conn = conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> TaskDatabase:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        if self._conn is None:
            raise DatabaseError("database is not open")
        try:
            cursor = self._conn.execute(sql, params)
            self._conn.commit()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return cursor

    def add_task(self, task: Task) -> int:
        """Insert a task and return the id it was given."""
        cursor = self._execute(
            "INSERT INTO tasks (name, tags, deadline, category, completed) "
            "VALUES (?, ?, ?, ?, ?)",
            (
                task.name,
                task.tags,
                _encode_date(task.deadline),
                task.category,
                1 if task.completed else 0,
            ),
        )
        return int(cursor.lastrowid)

    def load_tasks(self) -> list[Task]:
        cursor = self._execute(
            "SELECT id, name, tags, deadline, category, completed FROM tasks ORDER BY id"
        )
        return [
            Task(
                id=row[0],
                name=row[1] or "",
                tags=row[2] or "",
                deadline=_decode_date(row[3]),
                category=row[4] or "",
                completed=row[5] == 1,
            )
            for row in cursor.fetchall()
        ]

    def update_task(self, task: Task) -> bool:
        """Store the task under its id; return whether a row was changed."""
        if task.id is None:
            raise ValueError("task has no id")
        cursor = self._execute(
            "UPDATE tasks SET name=?, tags=?, deadline=?, category=?, completed=? WHERE id=?",
            (
                task.name,
                task.tags,
                _encode_date(task.deadline),
                task.category,
                1 if task.completed else 0,
                task.id,
            ),
        )
        return cursor.rowcount > 0

    def delete_task(self, task_id: int) -> bool:
        """Delete the task with this id; return whether a row was removed."""
        cursor = self._execute("DELETE FROM tasks WHERE id=?", (task_id,))
        return cursor.rowcount > 0