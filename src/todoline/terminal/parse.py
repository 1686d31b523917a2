# SPDX-License-Identifier: MIT

import re
from typing import Optional

import typer

from todoline.model.sort import SortSpec
from todoline.query.util import parse_sort_instruction

PRIORITY_RANGE_PATTERN = re.compile(r"^([A-Za-z])(?:-([A-Za-z]))?$")


def parse_sort_spec(sort_instructions: Optional[list[str]]) -> SortSpec:
    """
    Parse repeated `--sort` values such as "priority" or "desc due_date".

    Raises:
        typer.BadParameter: If a direction or field is not recognized
    """
    if sort_instructions is None:
        return []
    sort_spec: SortSpec = []
    for sort_instruction in sort_instructions:
        try:
            sort_spec.append(parse_sort_instruction(sort_instruction))
        except ValueError as e:
            raise typer.BadParameter(str(e))
    return sort_spec


def parse_priority_range(priority_param: str) -> Optional[set[str]]:
    """
    Parse a priority letter ("A") or an inclusive range ("A-C").

    Returns:
        The set of uppercase priority letters, or None when the value is not a
        priority expression
    """
    match = PRIORITY_RANGE_PATTERN.match(priority_param)
    if match is None:
        return None
    start = match.group(1).upper()
    end = (match.group(2) or match.group(1)).upper()
    if start > end:
        raise typer.BadParameter(
            f"Invalid priority range: '{priority_param}' (start must be <= end)"
        )
    return {chr(code) for code in range(ord(start), ord(end) + 1)}
