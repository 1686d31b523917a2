# SPDX-License-Identifier: MIT

from todoline.model.style import StyleSpec


def get_style_template() -> StyleSpec:
    return {
        "foreground": None,
        "background": None,
        "bold": False,
        "intense": False,
        "underline": False,
    }
