# SPDX-License-Identifier: MIT

import logging
import re
from abc import ABC, abstractmethod
from typing import Optional

from todoline.errors import MalformedFilterExpression
from todoline.model.task import Task

log = logging.getLogger(__name__)

# Terms follow grep basic regex syntax, where these are plain characters.
_LITERAL_CHARS = set("+?(){}")


def generate_filter(terms: list[str]) -> "Predicate":
    """
    Build a predicate that keeps tasks matching every term.

    A term starting with `-` keeps tasks that do not match the rest of the
    term, and `|` inside a term separates alternatives. Matching is case
    insensitive and runs against the raw line.

    Raises:
        MalformedFilterExpression: If a term is not a valid expression
    """
    filter_obj = And()
    for term in terms:
        if len(term) > 1 and term.startswith("-"):
            negated = Not()
            negated.set_predicate(Term(term[1:]))
            filter_obj.add_predicate(negated)
        else:
            filter_obj.add_predicate(Term(term))
    return filter_obj


def compile_term(term: str) -> re.Pattern[str]:
    pattern = "|".join(
        _translate_alternative(alternative) for alternative in term.split("|")
    )
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise MalformedFilterExpression(term, str(e))


def _translate_alternative(alternative: str) -> str:
    translated = []
    escaped = False
    for char in alternative:
        if escaped:
            translated.append(char)
            escaped = False
        elif char == "\\":
            translated.append(char)
            escaped = True
        elif char in _LITERAL_CHARS:
            translated.append(re.escape(char))
        else:
            translated.append(char)
    if escaped:
        # trailing backslash matches itself
        translated.append("\\")
    return "".join(translated)


class Predicate(ABC):
    @abstractmethod
    def matches(self, task: Task) -> bool: ...

    def filter(self, tasks: list[Task]) -> list[Task]:
        return [task for task in tasks if self.matches(task)]


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def matches(self, task: Task) -> bool:
        return all(predicate.matches(task) for predicate in self.predicates)


class Not(Predicate):
    def __init__(self) -> None:
        self.predicate: Optional[Predicate] = None

    def set_predicate(self, predicate: Predicate) -> None:
        self.predicate = predicate

    def matches(self, task: Task) -> bool:
        if self.predicate is None:
            raise ValueError("NOT predicate cannot be None")
        return not self.predicate.matches(task)


class Term(Predicate):
    def __init__(self, term: str) -> None:
        self.term = term
        self.pattern = compile_term(term)
        log.debug("Filter term %r compiled to %r", term, self.pattern.pattern)

    def matches(self, task: Task) -> bool:
        return self.pattern.search(task["raw"]) is not None


class Priority(Predicate):
    def __init__(self, priorities: set[str]) -> None:
        self.priorities = {priority.upper() for priority in priorities}

    def matches(self, task: Task) -> bool:
        if task["priority"] is None:
            return False
        # an empty set means any lettered priority
        return not self.priorities or task["priority"] in self.priorities


def filter_tasks(tasks: list[Task], terms: list[str]) -> list[Task]:
    if not terms:
        return list(tasks)
    return generate_filter(terms).filter(tasks)
