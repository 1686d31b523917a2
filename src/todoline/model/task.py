# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Task(TypedDict):
    id: int
    raw: str
    completed: bool
    completion_date: Optional[pendulum.Date]
    creation_date: Optional[pendulum.Date]
    priority: Optional[str]
    projects: list[str]
    contexts: list[str]
    due_date: Optional[pendulum.Date]
    threshold_date: Optional[pendulum.Date]
    subject: str
