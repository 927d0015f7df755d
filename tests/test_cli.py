import pytest

from todoboard.cli import main


@pytest.fixture
def run(tmp_path, capsys):
    db_path = str(tmp_path / "tasks.db")

    def invoke(*args):
        code = main(["--db", db_path, *args])
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return invoke


def _added_id(out):
    return int(out.split()[-1])


def test_add_then_list(run):
    code, out, _ = run("add", "Buy milk", "--tags", "home", "--deadline", "2024-05-01")
    assert code == 0
    task_id = _added_id(out)
    code, out, _ = run("list", "Сегодня")
    assert code == 0
    assert f"[ ] {task_id}: Buy milk  | 🏷 home | ⏳ 2024-05-01" in out


def test_done_marks_task(run):
    task_id = _added_id(run("add", "finish", "--category", "Завтра")[1])
    assert run("done", str(task_id))[0] == 0
    out = run("list", "Завтра")[1]
    assert f"[x] {task_id}: finish" in out


def test_remove_task(run):
    task_id = _added_id(run("add", "temporary")[1])
    assert run("remove", str(task_id))[0] == 0
    assert "temporary" not in run("list")[1]


def test_unknown_id_reports_error(run):
    code, _, err = run("remove", "77")
    assert code == 1
    assert "77" in err


def test_blank_name_is_rejected(run):
    code, _, err = run("add", "   ")
    assert code == 1
    assert "empty" in err


def test_bad_deadline_exits_with_usage_error(run):
    with pytest.raises(SystemExit) as info:
        run("add", "x", "--deadline", "tomorrow")
    assert info.value.code == 2


def test_purge_removes_only_completed(run):
    done_id = _added_id(run("add", "old")[1])
    _added_id(run("add", "open")[1])
    run("done", str(done_id))
    code, out, _ = run("purge", "Сегодня")
    assert code == 0
    assert out.strip() == "removed 1 tasks"
    listing = run("list", "Сегодня")[1]
    assert "open" in listing and "old" not in listing


def test_clear_category(run):
    run("add", "a", "--category", "Потом")
    run("add", "b", "--category", "Потом")
    assert run("clear", "Потом")[1].strip() == "removed 2 tasks"
    assert run("list", "Потом")[1].strip() == "Потом"