# SPDX-License-Identifier: MIT

import re

from todoline.model.task import Task
from todoline.query.parse import parse_line


def is_blank(task: Task) -> bool:
    """A task whose line is empty or only whitespace."""
    return task["raw"].strip() == ""


def clear_task(task: Task) -> Task:
    """Return a blank placeholder that keeps the task's line number."""
    return parse_line("", task["id"])


def normalize_whitespace(task: Task) -> Task:
    return parse_line(" ".join(task["raw"].split()), task["id"])


def append_text(task: Task, text: str) -> Task:
    return parse_line(f"{task['raw']} {text}", task["id"])


def remove_term(task: Task, pattern: re.Pattern[str]) -> Task:
    """Remove every match of pattern from the task and collapse leftover gaps."""
    return normalize_whitespace(parse_line(pattern.sub("", task["raw"]), task["id"]))

