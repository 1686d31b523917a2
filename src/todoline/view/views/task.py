# SPDX-License-Identifier: MIT

from typing import Iterable

from todoline.model.task import Task
from todoline.query.tokenize import tokenize
from todoline.template.style import get_style_template
from todoline.view.state import get_hide_context, get_hide_priority, get_hide_project
from todoline.view.style import StyleResolver, priority_style_name
from todoline.view.writer import StyleWriter


def tasks_view(
    tasks: Iterable[Task],
    total_count: int,
    resolver: StyleResolver,
    writer: StyleWriter,
) -> None:
    """
    Write one styled line per task.

    Ids are zero padded to the digit count of `total_count`. Tokens of the raw
    line are joined by single spaces; projects and contexts get their own
    style and the line style is restored after each of them.
    """
    width = len(str(total_count))
    hide_project = get_hide_project()
    hide_context = get_hide_context()
    hide_priority = get_hide_priority()

    for task in tasks:
        line_style = get_style_template()
        if task["completed"]:
            line_style = resolver.resolve("done")
        elif task["priority"] is not None:
            line_style = resolver.resolve(priority_style_name(task["priority"]) or "")

        writer.set_style(line_style)
        writer.write(f"{task['id']:0{width}d} ")

        priority_token = f"({task['priority']})" if task["priority"] else None
        words = []
        for token in tokenize(task["raw"]):
            word = token.text
            if hide_priority and word == priority_token:
                priority_token = None
                continue
            if word.startswith("+") and hide_project:
                continue
            if word.startswith("@") and hide_context:
                continue
            words.append(word)

        for index, word in enumerate(words):
            if index > 0:
                writer.write(" ")
            if word.startswith("+"):
                writer.set_style(resolver.resolve("project"))
                writer.write(word)
                writer.set_style(line_style)
            elif word.startswith("@"):
                writer.set_style(resolver.resolve("context"))
                writer.write(word)
                writer.set_style(line_style)
            else:
                writer.write(word)

        writer.reset()
        writer.write("\n")


def footer_view(writer: StyleWriter, shown: int, total: int, label: str = "TODO") -> None:
    writer.write(f"{label}: {shown} of {total} tasks shown\n")
