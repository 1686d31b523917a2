# SPDX-License-Identifier: MIT

from rich.color import Color, ColorType

from todoline.model.style import StyleSpec
from todoline.template.style import get_style_template

RESET = "\x1b[0m"
BOLD = "1"
UNDERLINE = "4"


class Difference:
    """Outcome of moving the terminal from one style to another."""


class NoChange(Difference):
    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoChange)


class AddOnly(Difference):
    """Only attributes in `style` need to be emitted on top of the current ones."""

    def __init__(self, style: StyleSpec) -> None:
        self.style = style

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AddOnly) and self.style == other.style

    def __repr__(self) -> str:
        return f"AddOnly({self.style!r})"


class MustReset(Difference):
    def __eq__(self, other: object) -> bool:
        return isinstance(other, MustReset)


def difference(previous: StyleSpec, following: StyleSpec) -> Difference:
    """
    Decide how to switch from `previous` to `following`.

    Escape sequences can only add attributes, so dropping any attribute that
    `previous` has forces a full reset.
    """
    if previous == following:
        return NoChange()

    if (
        (previous["foreground"] is not None and following["foreground"] is None)
        or (previous["background"] is not None and following["background"] is None)
        or (previous["bold"] and not following["bold"])
        or (previous["intense"] and not following["intense"])
        or (previous["underline"] and not following["underline"])
    ):
        return MustReset()

    added_intense = following["intense"] and not previous["intense"]
    added = get_style_template()
    if following["foreground"] != previous["foreground"] or added_intense:
        added["foreground"] = following["foreground"]
    if following["background"] != previous["background"]:
        added["background"] = following["background"]
    added["bold"] = following["bold"] and not previous["bold"]
    # intensity is part of the foreground code, so it travels with it
    added["intense"] = following["intense"] if added["foreground"] is not None else False
    added["underline"] = following["underline"] and not previous["underline"]
    return AddOnly(added)


def escape_codes(style: StyleSpec) -> str:
    codes = []
    if style["bold"]:
        codes.append(_sgr(BOLD))
    if style["underline"]:
        codes.append(_sgr(UNDERLINE))
    if style["foreground"] is not None:
        foreground = _intensify(style["foreground"], style["intense"])
        codes.append(_sgr(*_palette_color(foreground).get_ansi_codes(foreground=True)))
    if style["background"] is not None:
        background = _palette_color(style["background"])
        codes.append(_sgr(*background.get_ansi_codes(foreground=False)))
    return "".join(codes)


def _palette_color(number: int) -> Color:
    # always the 256-color form, even for the first sixteen entries
    return Color(f"color({number})", ColorType.EIGHT_BIT, number=number)


def _sgr(*codes: str) -> str:
    return f"\x1b[{';'.join(codes)}m"


def _intensify(color: int, intense: bool) -> int:
    # the eight basic colors have bright variants at 8-15
    if intense and 0 <= color < 8:
        return color + 8
    return color
