# SPDX-License-Identifier: MIT

import re
from typing import NamedTuple

_TOKEN_PATTERN = re.compile(r"\S+")


class Token(NamedTuple):
    text: str
    start: int
    end: int


def tokenize(line: str) -> list[Token]:
    """Split a line on whitespace, keeping each token's offsets into the line."""
    return [
        Token(match.group(0), match.start(), match.end())
        for match in _TOKEN_PATTERN.finditer(line)
    ]
