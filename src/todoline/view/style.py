# SPDX-License-Identifier: MIT

import re
from typing import Optional

from todoline import color
from todoline.model.style import StyleOverride, StyleSpec
from todoline.template.style import get_style_template

PRIORITY_STYLE_PATTERN = re.compile(r"^pri_[a-z]$")
OTHER_PRIORITY_STYLE = "pri_x"

DEFAULT_FOREGROUNDS: dict[str, int] = {
    "pri_a": color.HOTPINK,
    "pri_b": color.GREEN,
    "pri_c": color.BLUE,
    "pri_d": color.TURQUOISE,
    OTHER_PRIORITY_STYLE: color.TAN,
    "project": color.LIME,
    "context": color.LIGHTORANGE,
    "done": color.COMPLETED_TASK_COLOR,
}

# override key -> style field
OVERRIDE_FIELDS = {
    "color_fg": "foreground",
    "color_bg": "background",
    "bold": "bold",
    "intense": "intense",
    "underline": "underline",
}


def priority_style_name(priority: Optional[str]) -> Optional[str]:
    if priority is None:
        return None
    return f"pri_{priority.lower()}"


def default_style(name: str) -> StyleSpec:
    style = get_style_template()
    name = name.lower()
    if name in DEFAULT_FOREGROUNDS:
        style["foreground"] = DEFAULT_FOREGROUNDS[name]
    elif PRIORITY_STYLE_PATTERN.match(name):
        style["foreground"] = DEFAULT_FOREGROUNDS[OTHER_PRIORITY_STYLE]
    return style


def resolve_style(name: str, overrides: list[StyleOverride]) -> StyleSpec:
    """
    Look up the style for a style name, case insensitively.

    A configured override replaces only the attributes it sets; the rest come
    from the built-in default. Priorities without their own default or
    override fall back to `pri_x`. Unknown names resolve to no style.
    """
    name = name.lower()
    style = default_style(name)

    override = _find_override(name, overrides)
    if (
        override is None
        and PRIORITY_STYLE_PATTERN.match(name)
        and name not in DEFAULT_FOREGROUNDS
    ):
        override = _find_override(OTHER_PRIORITY_STYLE, overrides)
    if override is None:
        return style

    for override_key, style_field in OVERRIDE_FIELDS.items():
        value = override.get(override_key)
        if value is not None:
            style[style_field] = value  # type: ignore[literal-required]
    return style


def _find_override(
    name: str, overrides: list[StyleOverride]
) -> Optional[StyleOverride]:
    for override in overrides:
        if override["name"].lower() == name:
            return override
    return None


class StyleResolver:
    """Resolves style names against configured overrides, caching results."""

    def __init__(self, overrides: list[StyleOverride]) -> None:
        self.overrides = overrides
        self._cache: dict[str, StyleSpec] = {}

    def resolve(self, name: str) -> StyleSpec:
        name = name.lower()
        if name not in self._cache:
            self._cache[name] = resolve_style(name, self.overrides)
        return dict(self._cache[name])  # type: ignore[return-value]
