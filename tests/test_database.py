import sqlite3
from datetime import date

import pytest

from todoboard.database import DatabaseError, Task, TaskDatabase


@pytest.fixture
def db(tmp_path):
    database = TaskDatabase(tmp_path / "tasks.db")
    database.open()
    yield database
    database.close()


def _task(**kwargs):
    fields = dict(
        name="Write report",
        tags="work",
        category="Сегодня",
        deadline=date(2024, 5, 1),
        completed=False,
    )
    fields.update(kwargs)
    return Task(**fields)


def test_add_and_load_round_trip(db):
    task = _task()
    task_id = db.add_task(task)
    loaded = db.load_tasks()
    assert len(loaded) == 1
    stored = loaded[0]
    assert stored.id == task_id
    assert (stored.name, stored.tags, stored.category, stored.deadline, stored.completed) == (
        task.name,
        task.tags,
        task.category,
        task.deadline,
        task.completed,
    )


def test_ids_are_distinct_and_in_load_order(db):
    first = db.add_task(_task(name="a"))
    second = db.add_task(_task(name="b"))
    assert first != second
    assert [t.id for t in db.load_tasks()] == [first, second]


def test_missing_deadline_round_trips(db):
    db.add_task(_task(deadline=None))
    assert db.load_tasks()[0].deadline is None


def test_update_changes_row(db):
    task_id = db.add_task(_task())
    changed = _task(id=task_id, name="Renamed", category="Потом", completed=True)
    assert db.update_task(changed) is True
    assert db.load_tasks() == [changed]


def test_update_unknown_id_reports_false(db):
    assert db.update_task(_task(id=999)) is False


def test_update_without_id_raises(db):
    with pytest.raises(ValueError):
        db.update_task(_task())


def test_delete_removes_row(db):
    keep = db.add_task(_task(name="keep"))
    drop = db.add_task(_task(name="drop"))
    assert db.delete_task(drop) is True
    assert [t.id for t in db.load_tasks()] == [keep]
    assert db.delete_task(drop) is False


def test_storage_format(db, tmp_path):
    task_id = db.add_task(_task(completed=True))
    with sqlite3.connect(tmp_path / "tasks.db") as raw:
        row = raw.execute("SELECT id, deadline, completed FROM tasks").fetchone()
    assert row == (task_id, "2024-05-01", 1)


def test_data_persists_across_reopen(tmp_path):
    path = tmp_path / "tasks.db"
    with TaskDatabase(path) as first:
        first.add_task(_task(name="persisted"))
    with TaskDatabase(path) as second:
        assert [t.name for t in second.load_tasks()] == ["persisted"]


def test_context_manager_closes(tmp_path):
    with TaskDatabase(tmp_path / "x.db") as database:
        assert database.is_open is True
    assert database.is_open is False


def test_query_on_closed_database_raises(tmp_path):
    database = TaskDatabase(tmp_path / "x.db")
    with pytest.raises(DatabaseError):
        database.load_tasks()


def test_open_on_directory_raises(tmp_path):
    with pytest.raises(DatabaseError):
        TaskDatabase(tmp_path).open()