# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict


class StyleSpec(TypedDict):
    foreground: Optional[int]
    background: Optional[int]
    bold: bool
    intense: bool
    underline: bool


class StyleOverride(TypedDict):
    name: str
    color_fg: NotRequired[Optional[int]]
    color_bg: NotRequired[Optional[int]]
    bold: NotRequired[Optional[bool]]
    intense: NotRequired[Optional[bool]]
    underline: NotRequired[Optional[bool]]
