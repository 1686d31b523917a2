# SPDX-License-Identifier: MIT

from todoline.model.task import Task


def get_task_template(id: int = 0, raw: str = "") -> Task:
    return {
        "id": id,
        "raw": raw,
        "completed": False,
        "completion_date": None,
        "creation_date": None,
        "priority": None,
        "projects": [],
        "contexts": [],
        "due_date": None,
        "threshold_date": None,
        "subject": "",
    }
