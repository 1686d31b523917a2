# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from todoline import configuration
from todoline import state as app_state
from todoline.errors import TodoError
from todoline.logger import init_logging
from todoline.repository.configuration import CONFIGURATION_REPO
from todoline.repository.task import TASK_REPO
from todoline.terminal import task
from todoline.terminal.custom_typer import AliasedTyperGroup
from todoline.terminal.error import exit_with_error
from todoline.view import state as view_state

log = logging.getLogger(__name__)

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="todoline - view and edit a file in todo.txt format",
    no_args_is_help=False,
)
app.command(name="add, a")(task.add)
app.command(name="addm")(task.addm)
app.command(name="append, app")(task.append)
app.command(name="del, rm")(task.delete)
app.command(name="list, ls", context_settings=task.PASS_FILTER_TERMS)(task.list_tasks)
app.command(name="listall, lsa", context_settings=task.PASS_FILTER_TERMS)(
    task.list_all
)
app.command(name="listpri, lsp", context_settings=task.PASS_FILTER_TERMS)(
    task.list_priority
)

LIST_ACTIONS = ("list", "ls")


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    hide_context: Annotated[
        int,
        typer.Option(
            "--hide-context",
            "-@",
            count=True,
            help="Hide contexts in list output; use twice to show them again",
        ),
    ] = 0,
    hide_project: Annotated[
        int,
        typer.Option(
            "--hide-project",
            "-+",
            count=True,
            help="Hide projects in list output; use twice to show them again",
        ),
    ] = 0,
    hide_priority: Annotated[
        int,
        typer.Option(
            "--hide-priority",
            "-P",
            count=True,
            help="Hide priorities in list output; use twice to show them again",
        ),
    ] = 0,
    plain: Annotated[
        bool,
        typer.Option("--plain", "-p", help="Turn off colors"),
    ] = False,
    verbosity: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase log verbosity (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Silence log output; overrides -v"),
    ] = False,
    date_on_add: Annotated[
        Optional[bool],
        typer.Option(
            "--date-on-add/--no-date-on-add",
            "-t/-T",
            help="Prepend the current date to new tasks",
            show_default=False,
        ),
    ] = None,
    preserve_line_numbers: Annotated[
        Optional[bool],
        typer.Option(
            "--preserve-line-numbers/--remove-blank-lines",
            "-N/-n",
            help="Keep deleted tasks as blank lines so task ids stay stable",
            show_default=False,
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Delete without asking for confirmation"),
    ] = False,
    config_file: Annotated[
        Optional[Path],
        typer.Option(
            "--config-file",
            "-d",
            envvar=configuration.CONFIG_ENV_VAR,
            show_envvar=False,
            help="Location of the YAML config file",
        ),
    ] = None,
) -> None:
    """
    todoline - view and edit a file in todo.txt format

    Global options that apply to all commands.
    """
    init_logging(verbosity, quiet)

    view_state.set_hide_context(hide_context % 2 == 1)
    view_state.set_hide_project(hide_project % 2 == 1)
    view_state.set_hide_priority(hide_priority % 2 == 1)
    view_state.set_plain(plain)
    app_state.set_force(force)
    app_state.set_date_on_add(date_on_add)
    app_state.set_preserve_line_numbers(preserve_line_numbers)

    try:
        CONFIGURATION_REPO.load_path(config_file)
        settings = CONFIGURATION_REPO.get_settings()
    except TodoError as e:
        exit_with_error(str(e))

    todo_path = configuration.expand_path(settings["todo_file"])
    done_path = configuration.expand_path(settings["done_file"])
    log.debug("Todo file: %s", todo_path)
    log.debug("Done file: %s", done_path)
    TASK_REPO.load_paths(todo_path, done_path)

    if ctx.invoked_subcommand is None:
        default_action = settings["default_action"]
        if default_action is not None and default_action not in LIST_ACTIONS:
            exit_with_error(f"unknown default action '{default_action}'")
        log.info("No command supplied; defaulting to list")
        task.list_tasks(terms=None, sort=None)


def run() -> None:
    app()
