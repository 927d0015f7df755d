"""Command line for the task board."""

from __future__ import annotations

import argparse
import sys
from datetime import date

from .board import CATEGORIES, BoardItem, TaskBoard, parse_item
from .database import DEFAULT_PATH, DatabaseError, TaskDatabase
from .handler import TaskHandler

DEFAULT_CATEGORY = "Сегодня"


def _date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a yyyy-MM-dd date: {text!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todoboard", description="Keep to-do tasks sorted into day categories."
    )
    parser.add_argument("--db", default=DEFAULT_PATH, help="database file")
    sub = parser.add_subparsers(dest="command", required=True)

    listing = sub.add_parser("list", help="show tasks")
    listing.add_argument("category", nargs="?", choices=CATEGORIES)

    add = sub.add_parser("add", help="add a task")
    add.add_argument("name")
    add.add_argument("--tags", default="")
    add.add_argument("--deadline", type=_date, default=None, help="defaults to today")
    add.add_argument("--category", choices=CATEGORIES, default=DEFAULT_CATEGORY)

    for command, text in (("done", "mark a task completed"), ("undone", "mark a task open")):
        toggle = sub.add_parser(command, help=text)
        toggle.add_argument("id", type=int)

    edit = sub.add_parser("edit", help="change a task")
    edit.add_argument("id", type=int)
    edit.add_argument("--name")
    edit.add_argument("--tags")
    edit.add_argument("--deadline", type=_date)
    edit.add_argument("--category", choices=CATEGORIES)

    remove = sub.add_parser("remove", help="delete a task")
    remove.add_argument("id", type=int)

    clear = sub.add_parser("clear", help="delete every task in a category")
    clear.add_argument("category", choices=CATEGORIES)

    purge = sub.add_parser("purge", help="delete the completed tasks of a category")
    purge.add_argument("category", choices=CATEGORIES)
    return parser


def _print_category(board: TaskBoard, category: str) -> None:
    print(category)
    for item in board.items(category):
        mark = "x" if item.checked else " "
        print(f"  [{mark}] {item.task_id}: {item.text}")


def _find_item(board: TaskBoard, task_id: int) -> BoardItem:
    category = board.category_of(task_id)
    if not category:
        raise KeyError(task_id)
    return next(item for item in board.items(category) if item.task_id == task_id)


def _run(board: TaskBoard, args: argparse.Namespace) -> int:
    command = args.command
    if command == "list":
        for category in [args.category] if args.category else CATEGORIES:
            _print_category(board, category)
    elif command == "add":
        deadline = args.deadline if args.deadline is not None else date.today()
        task_id = board.add_task(args.name, args.tags, deadline, args.category)
        if task_id is None:
            print("task name is empty", file=sys.stderr)
            return 1
        print(f"added task {task_id}")
    elif command in ("done", "undone"):
        board.set_completed(args.id, command == "done")
    elif command == "edit":
        current = parse_item(_find_item(board, args.id).text)
        changed = board.edit_task(
            args.id,
            args.name if args.name is not None else current.name,
            args.tags if args.tags is not None else current.tags,
            args.deadline if args.deadline is not None else current.deadline,
            args.category if args.category is not None else board.category_of(args.id),
        )
        if not changed:
            print("task name is empty", file=sys.stderr)
            return 1
    elif command == "remove":
        board.remove_task(args.id)
    elif command == "clear":
        print(f"removed {board.clear_category(args.category)} tasks")
    elif command == "purge":
        print(f"removed {board.remove_completed(args.category)} tasks")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        with TaskDatabase(args.db) as database:
            board = TaskBoard(TaskHandler(database))
            try:
                return _run(board, args)
            except KeyError:
                print(f"no task with id {args.id}", file=sys.stderr)
                return 1
    except DatabaseError as exc:
        print(f"database error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())