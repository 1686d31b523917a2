# SPDX-License-Identifier: MIT

import logging
import re
from typing import Annotated, Optional

import typer

from todoline import state as app_state
from todoline.errors import MalformedFilterExpression, TodoError
from todoline.model.task import Task
from todoline.repository.configuration import CONFIGURATION_REPO
from todoline.repository.task import TASK_REPO
from todoline.service.list import list_view
from todoline.service.task import append_text, is_blank, remove_term
from todoline.terminal.error import exit_with_error
from todoline.terminal.parse import parse_priority_range, parse_sort_spec
from todoline.time import today_str
from todoline.view import state as view_state
from todoline.view.style import StyleResolver

log = logging.getLogger(__name__)

LEADING_PRIORITY_PATTERN = re.compile(r"^(\([A-Z]\)\s+)")

SORT_HELP = (
    "sort key, repeatable: FIELD or 'desc FIELD' "
    "(id, priority, completed, completion_date, creation_date, due_date, "
    "threshold_date, project, context, subject, raw)"
)
TERMS_HELP = (
    "only show tasks matching every TERM; '-TERM' excludes, 'A|B' matches either"
)
PASS_FILTER_TERMS = {"ignore_unknown_options": True}


def add(
    task: Annotated[
        Optional[str],
        typer.Argument(help="THING I NEED TO DO +project @context"),
    ] = None,
) -> None:
    """
    Add a line to your todo.txt file.
    """
    if not task:
        task = typer.prompt("Add")
    try:
        __add_task(task)
        TASK_REPO.flush(__preserve_line_numbers())
    except TodoError as e:
        exit_with_error(str(e))


def addm(
    tasks: Annotated[
        str,
        typer.Argument(help="Todo items, one per line (quotes required)"),
    ],
) -> None:
    """
    Add multiple lines to your todo.txt file.
    """
    try:
        for line in tasks.splitlines():
            if line.strip():
                __add_task(line)
        TASK_REPO.flush(__preserve_line_numbers())
    except TodoError as e:
        exit_with_error(str(e))


def append(
    item: Annotated[int, typer.Argument(help="Line number of the task")],
    text: Annotated[str, typer.Argument(help="Text to add to the end of the task")],
) -> None:
    """
    Add text to the end of the task on line ITEM.
    """
    try:
        task = __get_task_or_exit(item)
        new_task = append_text(task, " ".join(text.split()))
        TASK_REPO.replace_task(new_task)
        TASK_REPO.flush(__preserve_line_numbers())
    except TodoError as e:
        exit_with_error(str(e))
    typer.echo(f"{new_task['id']} {new_task['raw']}")


def delete(
    item: Annotated[int, typer.Argument(help="Line number of the task to delete")],
    term: Annotated[
        Optional[str],
        typer.Argument(help="Only remove TERM (a regular expression) from the task"),
    ] = None,
) -> None:
    """
    Delete the task on line ITEM, or only TERM from it.
    """
    try:
        task = __get_task_or_exit(item)
        if term is not None:
            __delete_term(task, term)
        else:
            __delete_task(task)
    except TodoError as e:
        exit_with_error(str(e))


def list_tasks(
    terms: Annotated[Optional[list[str]], typer.Argument(help=TERMS_HELP)] = None,
    sort: Annotated[Optional[list[str]], typer.Option("--sort", help=SORT_HELP)] = None,
) -> None:
    """
    Display tasks, optionally filtered by TERMS.
    """
    sort_spec = parse_sort_spec(sort)
    try:
        output = list_view(
            TASK_REPO.get_all_tasks(),
            terms or [],
            sort_spec,
            __style_resolver(),
            plain=view_state.get_plain(),
        )
    except TodoError as e:
        exit_with_error(str(e))
    typer.echo(output, nl=False)


def list_all(
    terms: Annotated[Optional[list[str]], typer.Argument(help=TERMS_HELP)] = None,
    sort: Annotated[Optional[list[str]], typer.Option("--sort", help=SORT_HELP)] = None,
) -> None:
    """
    Display tasks from both todo.txt and done.txt, optionally filtered by TERMS.
    """
    sort_spec = parse_sort_spec(sort)
    try:
        output = list_view(
            TASK_REPO.get_all_tasks(),
            terms or [],
            sort_spec,
            __style_resolver(),
            plain=view_state.get_plain(),
            done=TASK_REPO.get_done_tasks(),
        )
    except TodoError as e:
        exit_with_error(str(e))
    typer.echo(output, nl=False)


def list_priority(
    args: Annotated[
        Optional[list[str]],
        typer.Argument(
            metavar="[PRIORITIES] [TERMS]...",
            help="priority letter or range such as A or A-C, then filter terms",
        ),
    ] = None,
    sort: Annotated[Optional[list[str]], typer.Option("--sort", help=SORT_HELP)] = None,
) -> None:
    """
    Display tasks that have a priority, optionally limited to PRIORITIES.
    """
    terms = list(args or [])
    priorities: set[str] = set()
    if terms:
        parsed_priorities = parse_priority_range(terms[0])
        if parsed_priorities is not None:
            priorities = parsed_priorities
            terms = terms[1:]
    sort_spec = parse_sort_spec(sort)
    try:
        output = list_view(
            TASK_REPO.get_all_tasks(),
            terms,
            sort_spec,
            __style_resolver(),
            plain=view_state.get_plain(),
            priorities=priorities,
        )
    except TodoError as e:
        exit_with_error(str(e))
    typer.echo(output, nl=False)


def __add_task(text: str) -> Task:
    text = " ".join(text.split())
    if __date_on_add():
        # the creation date goes after a leading priority
        priority_match = LEADING_PRIORITY_PATTERN.match(text)
        prefix = priority_match.group(1) if priority_match else ""
        text = f"{prefix}{today_str()} {text[len(prefix) :]}"
    new_task = TASK_REPO.add_task(text)
    log.info("Added task %d: %s", new_task["id"], new_task["raw"])
    typer.echo(f"{new_task['id']} {new_task['raw']}")
    typer.echo(f"TODO: {new_task['id']} added.")
    return new_task


def __delete_term(task: Task, term: str) -> None:
    try:
        pattern = re.compile(term)
    except re.error as e:
        raise MalformedFilterExpression(term, str(e))

    typer.echo(f"{task['id']} {task['raw']}")
    if pattern.search(task["raw"]) is None:
        typer.echo(f"TODO: '{term}' not found; no removal done.")
        raise typer.Exit(1)

    new_task = remove_term(task, pattern)
    TASK_REPO.replace_task(new_task)
    TASK_REPO.flush(__preserve_line_numbers())
    log.info("Task after editing: %s", new_task["raw"])
    typer.echo(f"TODO: Removed '{term}' from task.")
    typer.echo(f"{new_task['id']} {new_task['raw']}")


def __delete_task(task: Task) -> None:
    if not app_state.get_force():
        if not typer.confirm(f"Delete '{task['raw']}'?"):
            typer.echo("TODO: No tasks were deleted.")
            return

    TASK_REPO.remove_task(task["id"], __preserve_line_numbers())
    TASK_REPO.flush(__preserve_line_numbers())
    log.info("Deleted task %d: %s", task["id"], task["raw"])
    typer.echo(f"{task['id']} {task['raw']}")
    typer.echo(f"TODO: {task['id']} deleted.")


def __get_task_or_exit(item: int) -> Task:
    try:
        task = TASK_REPO.get_task(item)
    except KeyError:
        task = None
    if task is None or is_blank(task):
        typer.echo(f"TODO: No task {item}.")
        raise typer.Exit(1)
    return task


def __preserve_line_numbers() -> bool:
    preserve = app_state.get_preserve_line_numbers()
    if preserve is None:
        return CONFIGURATION_REPO.get_settings()["preserve_line_numbers"]
    return preserve


def __date_on_add() -> bool:
    date_on_add = app_state.get_date_on_add()
    if date_on_add is None:
        return CONFIGURATION_REPO.get_settings()["date_on_add"]
    return date_on_add


def __style_resolver() -> StyleResolver:
    return StyleResolver(CONFIGURATION_REPO.get_styles())
