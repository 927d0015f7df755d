"""Task lists per category, as shown to the user."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import date
from typing import NamedTuple

from .database import Task
from .handler import TaskHandler

CATEGORIES: tuple[str, ...] = tuple(sorted(("Сегодня", "Завтра", "След. неделя", "Потом")))

_TAG_MARK = "🏷"
_DEADLINE_MARK = "⏳"
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class ItemText(NamedTuple):
    name: str
    tags: str
    deadline: date | None


@dataclass(frozen=True)
class BoardItem:
    """One line of a category list."""

    task_id: int
    text: str
    checked: bool


def _display(name: str, tags: str, deadline: date | None, gap: str) -> str:
    when = deadline.isoformat() if deadline is not None else ""
    return f"{name}{gap}| {_TAG_MARK} {tags} | {_DEADLINE_MARK} {when}"


def format_item(task: Task) -> str:
    """The list text for a task."""
    return _display(task.name, task.tags, task.deadline, "  ")


def _section(text: str, index: int) -> str:
    parts = text.split("|")
    return parts[index] if index < len(parts) else ""


def _parse_date(text: str) -> date | None:
    if not _DATE_RE.fullmatch(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def parse_item(text: str) -> ItemText:
    """Read name, tags and deadline back out of a list text."""
    return ItemText(
        name=_section(text, 0).strip(),
        tags=_section(text, 1).replace(_TAG_MARK, "").strip(),
        deadline=_parse_date(_section(text, 2).replace(_DEADLINE_MARK, "").strip()),
    )


class TaskBoard:
    """The category lists and the operations a user performs on them."""

    def __init__(self, handler: TaskHandler) -> None:
        self.handler = handler
        self._lists: dict[str, list[BoardItem]] = {category: [] for category in CATEGORIES}
        self.reload()

    def _list(self, category: str) -> list[BoardItem]:
        try:
            return self._lists[category]
        except KeyError:
            raise ValueError(f"unknown category: {category!r}") from None

    def _locate(self, task_id: int) -> tuple[str, int]:
        for category, items in self._lists.items():
            for index, item in enumerate(items):
                if item.task_id == task_id:
                    return category, index
        raise KeyError(task_id)

    def reload(self) -> None:
        for category, items in self._lists.items():
            items[:] = [
                BoardItem(task.id, format_item(task), task.completed)
                for task in self.handler.tasks_by_category(category)
            ]

    def items(self, category: str) -> list[BoardItem]:
        return list(self._list(category))

    def add_task(self, name: str, tags: str, deadline: date | None, category: str) -> int | None:
        """Add a task; return its id, or None when the name is blank."""
        name = name.strip()
        if not name:
            return None
        items = self._list(category)
        task = Task(name=name, tags=tags.strip(), deadline=deadline, category=category)
        task_id = self.handler.add_task(task)
        items.append(BoardItem(task_id, format_item(task), False))
        return task_id

    def remove_task(self, task_id: int) -> None:
        category, index = self._locate(task_id)
        self.handler.delete_task(task_id)
        del self._lists[category][index]

    def clear_category(self, category: str) -> int:
        """Delete every task in a category; return how many were removed."""
        items = self._list(category)
        for item in reversed(items):
            self.handler.delete_task(item.task_id)
        count = len(items)
        items.clear()
        return count

    def remove_completed(self, category: str) -> int:
        """Delete the checked tasks of a category; return how many were removed."""
        items = self._list(category)
        kept: list[BoardItem] = []
        removed = 0
        for item in reversed(items):
            if item.checked:
                self.handler.delete_task(item.task_id)
                removed += 1
            else:
                kept.append(item)
        items[:] = reversed(kept)
        return removed

    def edit_task(
        self, task_id: int, name: str, tags: str, deadline: date | None, category: str
    ) -> bool:
        """Change a task; return False, changing nothing, when the name is blank."""
        old_category, index = self._locate(task_id)
        new_name = name.strip()
        if not new_name:
            return False
        new_list = self._list(category)
        new_tags = tags.strip()
        old_list = self._lists[old_category]
        item = old_list[index]
        updated = BoardItem(task_id, _display(new_name, new_tags, deadline, " "), item.checked)
        if category != old_category:
            del old_list[index]
            new_list.append(updated)
        else:
            old_list[index] = updated
        self.handler.update_task(
            Task(
                id=task_id,
                name=new_name,
                tags=new_tags,
                deadline=deadline,
                category=category,
                completed=item.checked,
            )
        )
        return True

    def set_completed(self, task_id: int, completed: bool) -> None:
        category, index = self._locate(task_id)
        item = replace(self._lists[category][index], checked=completed)
        self._lists[category][index] = item
        fields = parse_item(item.text)
        self.handler.update_task(
            Task(
                id=task_id,
                name=fields.name,
                tags=fields.tags,
                deadline=fields.deadline,
                category=category,
                completed=completed,
            )
        )

    def category_of(self, task_id: int) -> str:
        """The category holding the task, or an empty string."""
        try:
            return self._locate(task_id)[0]
        except KeyError:
            return ""