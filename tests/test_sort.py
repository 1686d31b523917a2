"""
Tests for query/sort.py and the sort instruction parser in query/util.py.
"""

import pytest

from todoline.model.sort import SortField
from todoline.query.parse import parse_line
from todoline.query.sort import sort_key, sort_tasks
from todoline.query.util import parse_sort_instruction


def _tasks(*lines):
    return [parse_line(line, id) for id, line in enumerate(lines, start=1)]


def _ids(tasks):
    return [task["id"] for task in tasks]


class TestSortTasks:
    def test_priority_absent_sorts_last(self):
        tasks = _tasks("no pri", "(B) b", "(A) a", "also none", "(Z) z")
        result = sort_tasks(tasks, [sort_key(SortField.PRIORITY)])
        assert _ids(result) == [3, 2, 5, 1, 4]

    def test_priority_reversed_puts_absent_first(self):
        tasks = _tasks("(A) a", "none", "(B) b")
        result = sort_tasks(tasks, [sort_key(SortField.PRIORITY, reverse=True)])
        assert _ids(result) == [2, 3, 1]

    def test_stable_for_equal_keys(self):
        tasks = _tasks("(A) one", "(A) two", "(B) three", "(A) four")
        result = sort_tasks(tasks, [sort_key(SortField.PRIORITY)])
        assert _ids(result) == [1, 2, 4, 3]

    def test_stable_for_equal_keys_when_reversed(self):
        tasks = _tasks("(A) one", "(B) two", "(A) three", "(B) four")
        result = sort_tasks(tasks, [sort_key(SortField.PRIORITY, reverse=True)])
        assert _ids(result) == [2, 4, 1, 3]

    def test_chain_uses_later_keys_for_ties(self):
        tasks = _tasks(
            "(A) x +beta",
            "(B) y +alpha",
            "(A) z +alpha",
        )
        result = sort_tasks(
            tasks, [sort_key(SortField.PRIORITY), sort_key(SortField.PROJECT)]
        )
        assert _ids(result) == [3, 1, 2]

    def test_chain_with_reversed_secondary_key(self):
        tasks = _tasks("(A) a", "(A) b", "(B) c")
        result = sort_tasks(
            tasks,
            [sort_key(SortField.PRIORITY), sort_key(SortField.ID, reverse=True)],
        )
        assert _ids(result) == [2, 1, 3]

    def test_missing_dates_sort_first(self):
        tasks = _tasks("a due:2024-03-01", "b", "c due:2024-01-01")
        result = sort_tasks(tasks, [sort_key(SortField.DUE_DATE)])
        assert _ids(result) == [2, 3, 1]

    def test_completion_and_creation_dates(self):
        tasks = _tasks(
            "x 2024-02-02 2024-01-01 late",
            "x 2024-01-02 2024-01-01 early",
            "open",
        )
        result = sort_tasks(tasks, [sort_key(SortField.COMPLETION_DATE)])
        assert _ids(result) == [3, 2, 1]
        result = sort_tasks(tasks, [sort_key(SortField.CREATION_DATE)])
        assert _ids(result) == [3, 1, 2]

    def test_threshold_date(self):
        tasks = _tasks("a t:2024-05-01", "b t:2024-04-01")
        result = sort_tasks(tasks, [sort_key(SortField.THRESHOLD_DATE)])
        assert _ids(result) == [2, 1]

    def test_completed_after_open(self):
        tasks = _tasks("x done", "open")
        result = sort_tasks(tasks, [sort_key(SortField.COMPLETED)])
        assert _ids(result) == [2, 1]

    def test_first_context_missing_first(self):
        tasks = _tasks("a @work @home", "b", "c @errands")
        result = sort_tasks(tasks, [sort_key(SortField.CONTEXT)])
        assert _ids(result) == [2, 3, 1]

    def test_strings_compare_case_sensitively(self):
        tasks = _tasks("apple", "Banana", "cherry")
        result = sort_tasks(tasks, [sort_key(SortField.RAW)])
        assert _ids(result) == [2, 1, 3]

    def test_subject_ignores_prefix(self):
        tasks = _tasks("(A) zebra", "(B) apple")
        result = sort_tasks(tasks, [sort_key(SortField.SUBJECT)])
        assert _ids(result) == [2, 1]

    def test_does_not_mutate_input(self):
        tasks = _tasks("(B) b", "(A) a")
        sort_tasks(tasks, [sort_key(SortField.PRIORITY)])
        assert _ids(tasks) == [1, 2]

    def test_empty_spec_keeps_order(self):
        tasks = _tasks("(B) b", "(A) a")
        assert _ids(sort_tasks(tasks, [])) == [1, 2]


class TestParseSortInstruction:
    def test_bare_field(self):
        assert parse_sort_instruction("priority") == {
            "field": SortField.PRIORITY,
            "reverse": False,
        }

    def test_desc(self):
        assert parse_sort_instruction("desc due_date") == {
            "field": SortField.DUE_DATE,
            "reverse": True,
        }

    def test_asc_is_case_insensitive_on_field(self):
        assert parse_sort_instruction(" asc Project ")["field"] == SortField.PROJECT

    def test_unknown_field(self):
        with pytest.raises(ValueError, match="unknown sort field"):
            parse_sort_instruction("desc colour")

    def test_unknown_direction(self):
        with pytest.raises(ValueError, match="unknown sort direction"):
            parse_sort_instruction("sideways id")
