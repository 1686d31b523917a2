# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict


class SortField(StrEnum):
    ID = "id"
    PRIORITY = "priority"
    COMPLETED = "completed"
    COMPLETION_DATE = "completion_date"
    CREATION_DATE = "creation_date"
    DUE_DATE = "due_date"
    THRESHOLD_DATE = "threshold_date"
    PROJECT = "project"
    CONTEXT = "context"
    SUBJECT = "subject"
    RAW = "raw"


class SortKey(TypedDict):
    field: SortField
    reverse: bool


SortSpec = list[SortKey]
