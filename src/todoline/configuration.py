# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

from todoline.model.style import StyleOverride

APP_NAME = "todoline"
CONFIG_ENV_VAR = "TODOLINE_CFG_FILE"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TODO_PATH: Path = DATA_PATH / "todo.txt"
DATA_DONE_PATH: Path = DATA_PATH / "done.txt"


class Settings(TypedDict):
    todo_file: str
    done_file: str
    date_on_add: bool
    default_action: Optional[str]
    preserve_line_numbers: bool


class Configuration(TypedDict):
    general: Settings
    styles: list[StyleOverride]


def get_default_configuration() -> Configuration:
    return {
        "general": {
            "todo_file": str(DATA_TODO_PATH),
            "done_file": str(DATA_DONE_PATH),
            "date_on_add": False,
            "default_action": "list",
            "preserve_line_numbers": True,
        },
        "styles": [],
    }


def expand_path(path: str) -> Path:
    """Expand `~` and environment variables in a configured path."""
    return Path(os.path.expanduser(os.path.expandvars(path)))
