# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler


def init_logging(verbosity: int, quiet: bool) -> None:
    """Route log records to stderr through rich.

    Verbosity 0 shows warnings, 1 adds info and 2 or more adds debug.
    Quiet silences everything and wins over verbosity.
    """
    if quiet:
        level = logging.CRITICAL + 1
    elif verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
