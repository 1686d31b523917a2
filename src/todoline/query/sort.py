# SPDX-License-Identifier: MIT

from typing import Any, Callable

from todoline.model.sort import SortField, SortKey, SortSpec
from todoline.model.task import Task


def _optional(value: Any) -> tuple[bool, Any]:
    # missing values order before present ones
    return (value is not None, value)


def _first(values: list[str]) -> tuple[bool, str]:
    return (len(values) > 0, values[0] if values else "")


SORT_KEYS: dict[SortField, Callable[[Task], Any]] = {
    SortField.ID: lambda task: task["id"],
    # no priority is the lowest urgency, after Z
    SortField.PRIORITY: lambda task: (task["priority"] is None, task["priority"] or ""),
    SortField.COMPLETED: lambda task: task["completed"],
    SortField.COMPLETION_DATE: lambda task: _optional(task["completion_date"]),
    SortField.CREATION_DATE: lambda task: _optional(task["creation_date"]),
    SortField.DUE_DATE: lambda task: _optional(task["due_date"]),
    SortField.THRESHOLD_DATE: lambda task: _optional(task["threshold_date"]),
    SortField.PROJECT: lambda task: _first(task["projects"]),
    SortField.CONTEXT: lambda task: _first(task["contexts"]),
    SortField.SUBJECT: lambda task: task["subject"],
    SortField.RAW: lambda task: task["raw"],
}


def sort_tasks(tasks: list[Task], sort_spec: SortSpec) -> list[Task]:
    """
    Order tasks by a chain of sort keys, the first key being most significant.

    Sorting runs one stable pass per key from the least significant key to the
    most significant one, so tasks that tie on every key keep their prior
    relative order.
    """
    sorted_tasks = list(tasks)

    for sort_key in reversed(sort_spec):
        sorted_tasks.sort(key=SORT_KEYS[sort_key["field"]], reverse=sort_key["reverse"])

    return sorted_tasks


def sort_key(field: SortField, reverse: bool = False) -> SortKey:
    return {"field": field, "reverse": reverse}
