from pathlib import Path

import pytest
import yaml

from todoline import state as app_state
from todoline.query.parse import parse_line
from todoline.view import state as view_state

SCENARIO_LINES = [
    "(A) Call mom +family @phone",
    "x 2024-01-02 2024-01-01 Buy milk @errands",
    "Write report +work due:2024-02-01",
]


@pytest.fixture(autouse=True)
def reset_state():
    yield
    view_state.set_hide_project(False)
    view_state.set_hide_context(False)
    view_state.set_hide_priority(False)
    view_state.set_plain(False)
    app_state.set_force(False)
    app_state.set_date_on_add(None)
    app_state.set_preserve_line_numbers(None)


@pytest.fixture
def scenario_tasks():
    return [parse_line(line, id) for id, line in enumerate(SCENARIO_LINES, start=1)]


@pytest.fixture
def todo_dir(tmp_path: Path):
    """A config file pointing at todo/done files inside tmp_path."""

    def make(todo_lines=None, done_lines=None, general=None, styles=None) -> Path:
        todo_file = tmp_path / "todo.txt"
        done_file = tmp_path / "done.txt"
        if todo_lines is not None:
            todo_file.write_text("".join(f"{line}\n" for line in todo_lines))
        if done_lines is not None:
            done_file.write_text("".join(f"{line}\n" for line in done_lines))
        config = {
            "general": {
                "todo_file": str(todo_file),
                "done_file": str(done_file),
                **(general or {}),
            },
            "styles": styles or [],
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.safe_dump(config))
        return config_file

    return make
