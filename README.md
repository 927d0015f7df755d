# todoboard

A small to-do board. A task has a name, tags, a deadline and a completion
flag, and sits in one of four categories: "Сегодня" (today), "Завтра"
(tomorrow), "След. неделя" (next week) and "Потом" (later). Everything is
kept in an SQLite file, `tasks.db` in the current directory by default.

## Installing

```
pip install .
```

## Command line

The package installs a `todoboard` command. `--db PATH` picks the database
file; it must come before the subcommand.

```
todoboard list [CATEGORY]
todoboard add NAME [--tags TAGS] [--deadline YYYY-MM-DD] [--category CATEGORY]
todoboard done ID
todoboard undone ID
todoboard edit ID [--name NAME] [--tags TAGS] [--deadline YYYY-MM-DD] [--category CATEGORY]
todoboard remove ID
todoboard clear CATEGORY
todoboard purge CATEGORY
```

- `list` prints every category, or just the one given, with each task as
  `[x] ID: text` (`[ ]` when not completed).
- `add` stores a new task. The deadline defaults to today and the category
  to "Сегодня". A blank name is refused.
- `done` and `undone` set the completion flag.
- `edit` changes only the fields given; the others keep their values. A
  blank name is refused.
- `remove` deletes one task; `clear` deletes every task in a category;
  `purge` deletes the completed tasks of a category. `clear` and `purge`
  print how many tasks were removed.

An unknown id or a database failure is reported on standard error and the
command exits with status 1.

Each task is shown as one line of text:

```
Buy milk  | 🏷 home | ⏳ 2024-05-01
```

## Using it from Python

```python
from datetime import date

from todoboard.database import TaskDatabase
from todoboard.handler import TaskHandler
from todoboard.board import TaskBoard, parse_item

with TaskDatabase("tasks.db") as db:
    board = TaskBoard(TaskHandler(db))
    task_id = board.add_task("Buy milk", "home", date.today(), "Сегодня")
    board.set_completed(task_id, True)
    for item in board.items("Сегодня"):
        print(item.task_id, item.checked, item.text)
        print(parse_item(item.text).name)
    board.remove_completed("Сегодня")
```

- `todoboard.database.TaskDatabase(path)` opens the file (as a context
  manager, or with `open()` and `close()`), creates the `tasks` table if it
  is missing, and offers `add_task`, `load_tasks`, `update_task` and
  `delete_task` on `Task` records. `add_task` returns the new id;
  `update_task` and `delete_task` return whether a row was touched. SQLite
  failures, and use of a closed database, raise `DatabaseError`.
- `todoboard.handler.TaskHandler(database)` opens the database, keeps the
  tasks grouped by category and reloads them after every update or delete.
  `tasks_by_category(category)` returns copies of one group, empty for an
  unknown category.
- `todoboard.board.TaskBoard(handler)` holds the four category lists of
  `BoardItem` entries (`task_id`, `text`, `checked`) and the board's
  actions: `add_task`, `edit_task`, `set_completed`, `remove_task`,
  `clear_category`, `remove_completed`, `category_of`, `items` and
  `reload`. A category outside the four raises `ValueError`; an unknown
  task id raises `KeyError`, except in `category_of`, which returns an
  empty string.
- `format_item(task)` gives a task's display line, and `parse_item(text)`
  reads the name, tags and deadline back from such a line. A line rewritten
  by `edit_task` has one space before the first `|` instead of two.

## What it does not do

There is no graphical window: the board is driven from the command line
or from Python. Categories are fixed to the four above, and there are no
reminders or notifications for deadlines.