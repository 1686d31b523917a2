# SPDX-License-Identifier: MIT

"""View options set from the command line, held in context variables."""

import os
from contextvars import ContextVar

_hide_project_var: ContextVar[bool] = ContextVar("hide_project", default=False)
_hide_context_var: ContextVar[bool] = ContextVar("hide_context", default=False)
_hide_priority_var: ContextVar[bool] = ContextVar("hide_priority", default=False)
_plain_var: ContextVar[bool] = ContextVar("plain", default=False)


def set_hide_project(value: bool) -> None:
    _hide_project_var.set(value)


def get_hide_project() -> bool:
    return _hide_project_var.get()


def set_hide_context(value: bool) -> None:
    _hide_context_var.set(value)


def get_hide_context() -> bool:
    return _hide_context_var.get()


def set_hide_priority(value: bool) -> None:
    _hide_priority_var.set(value)


def get_hide_priority() -> bool:
    return _hide_priority_var.get()


def set_plain(value: bool) -> None:
    """Set whether output is written without escape sequences.

    Args:
        value: True to turn colors off
    """
    _plain_var.set(value)


def get_plain() -> bool:
    """Get whether output should be plain.

    A dumb terminal is always plain.

    Returns:
        True if no escape sequences should be written
    """
    return _plain_var.get() or os.environ.get("TERM") == "dumb"
