# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from todoline.model.sort import SortField, SortSpec
from todoline.model.task_collection import TaskCollection
from todoline.query.filter import Priority
from todoline.query.sort import sort_key
from todoline.service.task import is_blank
from todoline.view.style import StyleResolver
from todoline.view.views.task import footer_view, tasks_view
from todoline.view.writer import StyleWriter

log = logging.getLogger(__name__)


def list_view(
    todo: TaskCollection,
    terms: list[str],
    sort_spec: SortSpec,
    resolver: StyleResolver,
    plain: bool = False,
    done: Optional[TaskCollection] = None,
    priorities: Optional[set[str]] = None,
) -> str:
    """
    Run the list pipeline and return the rendered output.

    Blank lines are dropped, the remaining tasks are filtered and then sorted
    with the line number as the final tie-break. Done tasks, when given, go
    through the same steps and follow the todo tasks. Filtering happens before
    anything is rendered, so a bad filter term produces no output.

    Raises:
        MalformedFilterExpression: If a filter term is not a valid expression
    """
    # ids are padded to the width of the largest line number
    total_count = len(todo)
    full_sort_spec = sort_spec + [sort_key(SortField.ID)]

    todo_total = _prepare(todo, terms, full_sort_spec, priorities)
    done_total = 0
    if done is not None:
        done_total = _prepare(done, terms, full_sort_spec, priorities)

    shown = TaskCollection()
    shown.concat(todo)
    if done is not None:
        shown.concat(done)

    writer = StyleWriter(plain=plain)
    tasks_view(shown, total_count, resolver, writer)
    writer.write("--\n")
    footer_view(writer, len(todo), todo_total)
    if done is not None:
        footer_view(writer, len(done), done_total, "DONE")
    return writer.getvalue()


def _prepare(
    tasks: TaskCollection,
    terms: list[str],
    sort_spec: SortSpec,
    priorities: Optional[set[str]],
) -> int:
    tasks.retain(lambda task: not is_blank(task))
    prefilter_count = len(tasks)
    if priorities is not None:
        tasks.retain(Priority(priorities).matches)
    if terms:
        log.info("Listing with terms: %s", terms)
        tasks.filter_by_terms(terms)
    else:
        log.info("Listing without filter")
    tasks.sort(sort_spec)
    return prefilter_count
