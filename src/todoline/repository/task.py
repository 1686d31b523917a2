# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Optional

from todoline import configuration
from todoline.errors import FileAccessError
from todoline.model.task import Task
from todoline.model.task_collection import TaskCollection
from todoline.query.parse import parse_line
from todoline.service.task import clear_task, is_blank

log = logging.getLogger(__name__)


class TaskRepository:
    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None
        self._done: Optional[list[Task]] = None
        self.todo_path: Path = configuration.DATA_TODO_PATH
        self.done_path: Path = configuration.DATA_DONE_PATH
        self.is_dirty = False

    def load_paths(self, todo_path: Path, done_path: Path) -> None:
        """Point the repository at new files and drop anything already loaded."""
        self.todo_path = todo_path
        self.done_path = done_path
        self._tasks = None
        self._done = None
        self.is_dirty = False

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self._tasks = [
                parse_line(line, id)
                for id, line in enumerate(self.__read_lines(self.todo_path), start=1)
            ]
            log.debug("Loaded %d tasks from %s", len(self._tasks), self.todo_path)
        return self._tasks

    @property
    def done(self) -> list[Task]:
        if self._done is None:
            # done tasks are not numbered for display
            self._done = [parse_line(line, 0) for line in self.__read_lines(self.done_path)]
            log.debug("Loaded %d done tasks from %s", len(self._done), self.done_path)
        return self._done

    def __read_lines(self, path: Path) -> list[str]:
        try:
            if not path.exists():
                log.info("Creating missing file %s", path)
                path.parent.mkdir(parents=True, exist_ok=True)
                path.touch()
            return path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(path, str(e))

    def flush(self, preserve_line_numbers: bool = True) -> bool:
        if self._tasks is None or not self.is_dirty:
            return False

        lines = [
            task["raw"]
            for task in self._tasks
            if preserve_line_numbers or not is_blank(task)
        ]
        text = "\n".join(lines) + "\n" if lines else ""
        try:
            self.todo_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise FileAccessError(self.todo_path, str(e))
        log.info("Wrote %d tasks to %s", len(lines), self.todo_path)
        self.is_dirty = False
        return True

    def get_all_tasks(self) -> TaskCollection:
        return TaskCollection(deepcopy(self.tasks))

    def get_done_tasks(self) -> TaskCollection:
        return TaskCollection(deepcopy(self.done))

    def get_task(self, id: int) -> Task:
        """
        Raises:
            KeyError: If no task has the given id
        """
        for task in self.tasks:
            if task["id"] == id:
                return deepcopy(task)
        raise KeyError(id)

    def add_task(self, raw: str) -> Task:
        self.is_dirty = True
        task = parse_line(raw, len(self.tasks) + 1)
        self.tasks.append(task)
        return deepcopy(task)

    def replace_task(self, task: Task) -> None:
        self.is_dirty = True
        for index, existing in enumerate(self.tasks):
            if existing["id"] == task["id"]:
                self.tasks[index] = deepcopy(task)
                return
        raise KeyError(task["id"])

    def remove_task(self, id: int, preserve_line_numbers: bool) -> None:
        """
        Delete a task. With preserved line numbers the line is blanked so the
        following tasks keep their ids; otherwise the line is dropped.
        """
        self.is_dirty = True
        for index, task in enumerate(self.tasks):
            if task["id"] == id:
                if preserve_line_numbers:
                    self.tasks[index] = clear_task(task)
                else:
                    del self.tasks[index]
                return
        raise KeyError(id)


TASK_REPO = TaskRepository()
