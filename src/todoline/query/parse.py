# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum

from todoline.model.task import Task
from todoline.query.tokenize import Token, tokenize
from todoline.template.task import get_task_template
from todoline.time import date_from_str_optional

COMPLETED_PATTERN = re.compile(r"^x\s")
PRIORITY_PATTERN = re.compile(r"^\(([A-Z])\)$")
TAG_PATTERN = re.compile(r"^([^:\s]+):(\S+)$")

# tag key -> task field
DATE_TAGS = {
    "due": "due_date",
    "t": "threshold_date",
}


def parse_line(line: str, id: int = 0) -> Task:
    """
    Build a task from one line of a todo.txt file.

    Never fails: fragments that do not parse (such as an impossible date)
    are left in the subject and the field stays empty.

    Args:
        line: The line without its trailing newline, kept verbatim as `raw`
        id: Line number in the source file (0 for done-file tasks)

    Returns:
        The parsed task
    """
    task = get_task_template(id, line)
    tokens = tokenize(line)
    position = 0

    if COMPLETED_PATTERN.match(line):
        task["completed"] = True
        position += 1
        first_date = __date_at(tokens, position)
        if first_date is not None:
            position += 1
            second_date = __date_at(tokens, position)
            if second_date is not None:
                position += 1
                task["completion_date"] = first_date
                task["creation_date"] = second_date
            else:
                task["creation_date"] = first_date

    if position < len(tokens):
        priority_match = PRIORITY_PATTERN.match(tokens[position].text)
        if priority_match:
            task["priority"] = priority_match.group(1)
            position += 1

    if task["creation_date"] is None:
        creation_date = __date_at(tokens, position)
        if creation_date is not None:
            task["creation_date"] = creation_date
            position += 1

    if position < len(tokens):
        task["subject"] = line[tokens[position].start :].rstrip()

    for token in tokens[position:]:
        __parse_subject_token(task, token)

    return task


def __date_at(tokens: list[Token], position: int) -> Optional[pendulum.Date]:
    if position >= len(tokens):
        return None
    return date_from_str_optional(tokens[position].text)


def __parse_subject_token(task: Task, token: Token) -> None:
    text = token.text
    if len(text) > 1 and text[0] == "+":
        task["projects"].append(text[1:])
    elif len(text) > 1 and text[0] == "@":
        task["contexts"].append(text[1:])
    else:
        tag_match = TAG_PATTERN.match(text)
        if tag_match is None or tag_match.group(1) not in DATE_TAGS:
            return
        field = DATE_TAGS[tag_match.group(1)]
        if task[field] is None:  # type: ignore[literal-required]
            task[field] = date_from_str_optional(tag_match.group(2))  # type: ignore[literal-required]
