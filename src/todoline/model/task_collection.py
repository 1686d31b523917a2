# SPDX-License-Identifier: MIT

from typing import Callable, Iterator, Optional

from todoline.model.sort import SortSpec
from todoline.model.task import Task
from todoline.query.filter import filter_tasks
from todoline.query.sort import sort_tasks


class TaskCollection:
    """Tasks in file order, filtered and sorted in place by the list pipeline."""

    def __init__(self, tasks: Optional[list[Task]] = None) -> None:
        self.tasks: list[Task] = list(tasks) if tasks is not None else []

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __getitem__(self, index: int) -> Task:
        return self.tasks[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskCollection):
            return NotImplemented
        return self.tasks == other.tasks

    def append(self, task: Task) -> None:
        self.tasks.append(task)

    def replace(self, index: int, task: Task) -> None:
        self.tasks[index] = task

    def index_of(self, id: int) -> int:
        """
        Raises:
            KeyError: If no task has the given id
        """
        for index, task in enumerate(self.tasks):
            if task["id"] == id:
                return index
        raise KeyError(id)

    def retain(self, predicate: Callable[[Task], bool]) -> None:
        self.tasks = [task for task in self.tasks if predicate(task)]

    def filter_by_terms(self, terms: list[str]) -> None:
        self.tasks = filter_tasks(self.tasks, terms)

    def sort(self, sort_spec: SortSpec) -> None:
        self.tasks = sort_tasks(self.tasks, sort_spec)

    def concat(self, other: "TaskCollection") -> None:
        self.tasks.extend(other.tasks)
