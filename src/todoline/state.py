# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

_force: ContextVar[bool] = ContextVar("force", default=False)
_date_on_add: ContextVar[Optional[bool]] = ContextVar("date_on_add", default=None)
_preserve_line_numbers: ContextVar[Optional[bool]] = ContextVar(
    "preserve_line_numbers", default=None
)


def set_force(value: bool) -> None:
    _force.set(value)


def get_force() -> bool:
    return _force.get()


def set_date_on_add(value: Optional[bool]) -> None:
    _date_on_add.set(value)


def get_date_on_add() -> Optional[bool]:
    return _date_on_add.get()


def set_preserve_line_numbers(value: Optional[bool]) -> None:
    _preserve_line_numbers.set(value)


def get_preserve_line_numbers() -> Optional[bool]:
    return _preserve_line_numbers.get()
