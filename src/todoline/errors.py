# SPDX-License-Identifier: MIT

from pathlib import Path


class TodoError(Exception):
    """Base class for errors that abort the current command."""


class MalformedFilterExpression(TodoError):
    def __init__(self, term: str, reason: str) -> None:
        super().__init__(f"invalid filter term '{term}': {reason}")
        self.term = term
        self.reason = reason


class FileAccessError(TodoError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"file {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigurationError(TodoError):
    pass
