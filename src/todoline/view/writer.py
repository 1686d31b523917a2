# SPDX-License-Identifier: MIT

from todoline.model.style import StyleSpec
from todoline.template.style import get_style_template
from todoline.view.escape import (
    RESET,
    AddOnly,
    MustReset,
    difference,
    escape_codes,
)


class StyleWriter:
    """
    Buffers styled output, emitting only the escape codes needed to move from
    the active style to the requested one.
    """

    def __init__(self, plain: bool = False) -> None:
        self.plain = plain
        self.current: StyleSpec = get_style_template()
        self._parts: list[str] = []

    def write(self, text: str) -> None:
        self._parts.append(text)

    def set_style(self, style: StyleSpec) -> None:
        if self.plain:
            return
        change = difference(self.current, style)
        if isinstance(change, AddOnly):
            self._parts.append(escape_codes(change.style))
        elif isinstance(change, MustReset):
            self._parts.append(RESET)
            self._parts.append(escape_codes(style))
        self.current = dict(style)  # type: ignore[assignment]

    def reset(self) -> None:
        if self.plain:
            return
        if self.current != get_style_template():
            self._parts.append(RESET)
            self.current = get_style_template()

    def getvalue(self) -> str:
        return "".join(self._parts)
