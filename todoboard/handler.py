"""In-memory view of stored tasks, grouped by category."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import replace

from .database import Task, TaskDatabase


class TaskHandler:
    """Keeps tasks grouped by category in step with the database."""

    def __init__(self, database: TaskDatabase) -> None:
        self.database = database
        self._by_category: dict[str, list[Task]] = {}
        database.open()
        self.load_tasks()

    def load_tasks(self) -> None:
        grouped: dict[str, list[Task]] = defaultdict(list)
        for task in self.database.load_tasks():
            grouped[task.category].append(task)
        self._by_category = dict(grouped)

    def add_task(self, task: Task) -> int:
        task_id = self.database.add_task(task)
        self._by_category.setdefault(task.category, []).append(replace(task, id=task_id))
        return task_id

    def update_task(self, task: Task) -> bool:
        changed = self.database.update_task(task)
        self.load_tasks()
        return changed

    def delete_task(self, task_id: int) -> bool:
        removed = self.database.delete_task(task_id)
        self.load_tasks()
        return removed

    def tasks_by_category(self, category: str) -> list[Task]:
        """Copies of the tasks in a category; empty for an unknown one."""
        return [replace(task) for task in self._by_category.get(category, [])]