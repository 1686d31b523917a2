"""
Tests for view/escape.py and view/writer.py.
"""

from todoline.template.style import get_style_template
from todoline.view.escape import (
    RESET,
    AddOnly,
    MustReset,
    NoChange,
    difference,
    escape_codes,
)
from todoline.view.writer import StyleWriter


def _style(**fields):
    style = get_style_template()
    style.update(fields)
    return style


class TestDifference:
    def test_same_style_is_no_change(self):
        assert difference(_style(foreground=1), _style(foreground=1)) == NoChange()

    def test_plain_to_plain_is_no_change(self):
        assert difference(_style(), _style()) == NoChange()

    def test_adding_attributes(self):
        change = difference(_style(foreground=1), _style(foreground=1, bold=True))
        assert change == AddOnly(_style(bold=True))

    def test_changing_color_only_adds_new_color(self):
        change = difference(_style(foreground=198), _style(foreground=154))
        assert change == AddOnly(_style(foreground=154))

    def test_removing_foreground_resets(self):
        assert difference(_style(foreground=1), _style()) == MustReset()

    def test_removing_background_resets(self):
        assert difference(_style(background=3), _style(foreground=3)) == MustReset()

    def test_removing_bold_resets(self):
        change = difference(_style(foreground=1, bold=True), _style(foreground=1))
        assert change == MustReset()

    def test_removing_underline_resets(self):
        assert difference(_style(underline=True), _style(bold=True)) == MustReset()

    def test_removing_intense_resets(self):
        change = difference(_style(foreground=1, intense=True), _style(foreground=1))
        assert change == MustReset()

    def test_adding_intense_repeats_foreground(self):
        change = difference(_style(foreground=1), _style(foreground=1, intense=True))
        assert change == AddOnly(_style(foreground=1, intense=True))

    def test_changing_color_keeps_intense(self):
        change = difference(
            _style(foreground=1, intense=True), _style(foreground=2, intense=True)
        )
        assert change == AddOnly(_style(foreground=2, intense=True))

    def test_adding_bold_to_intense_style_skips_foreground(self):
        change = difference(
            _style(foreground=1, intense=True),
            _style(foreground=1, intense=True, bold=True),
        )
        assert change == AddOnly(_style(bold=True))

    def test_changing_background_only_adds_background(self):
        change = difference(
            _style(foreground=1, background=3), _style(foreground=1, background=4)
        )
        assert change == AddOnly(_style(background=4))


class TestEscapeCodes:
    def test_empty_style_emits_nothing(self):
        assert escape_codes(_style()) == ""

    def test_all_attributes(self):
        style = _style(foreground=198, background=17, bold=True, underline=True)
        assert escape_codes(style) == "\x1b[1m\x1b[4m\x1b[38;5;198m\x1b[48;5;17m"

    def test_intense_brightens_basic_colors(self):
        assert escape_codes(_style(foreground=2, intense=True)) == "\x1b[38;5;10m"
        assert escape_codes(_style(foreground=154, intense=True)) == "\x1b[38;5;154m"

    def test_basic_colors_use_256_color_form(self):
        assert escape_codes(_style(foreground=2, background=0)) == "\x1b[38;5;2m\x1b[48;5;0m"


class TestStyleWriter:
    def test_incremental_switch(self):
        writer = StyleWriter()
        writer.set_style(_style(foreground=198))
        writer.write("a")
        writer.set_style(_style(foreground=154))
        writer.write("b")
        assert writer.getvalue() == "\x1b[38;5;198ma\x1b[38;5;154mb"

    def test_switch_between_intense_styles(self):
        writer = StyleWriter()
        writer.set_style(_style(foreground=1, intense=True))
        writer.write("a")
        writer.set_style(_style(foreground=2, intense=True))
        writer.write("b")
        writer.set_style(_style(foreground=1, intense=True))
        assert writer.getvalue() == "\x1b[38;5;9ma\x1b[38;5;10mb\x1b[38;5;9m"

    def test_background_switch(self):
        writer = StyleWriter()
        writer.set_style(_style(background=17))
        writer.set_style(_style(background=4))
        assert writer.getvalue() == "\x1b[48;5;17m\x1b[48;5;4m"

    def test_reset_then_reapply_when_attribute_dropped(self):
        writer = StyleWriter()
        writer.set_style(_style(foreground=1, bold=True))
        writer.set_style(_style(foreground=2))
        assert writer.getvalue() == f"\x1b[1m\x1b[38;5;1m{RESET}\x1b[38;5;2m"

    def test_repeated_style_emits_once(self):
        writer = StyleWriter()
        writer.set_style(_style(foreground=5))
        writer.set_style(_style(foreground=5))
        assert writer.getvalue() == "\x1b[38;5;5m"

    def test_reset_only_when_styled(self):
        writer = StyleWriter()
        writer.write("plain")
        writer.reset()
        assert writer.getvalue() == "plain"

        writer.set_style(_style(underline=True))
        writer.reset()
        writer.reset()
        assert writer.getvalue() == f"plain\x1b[4m{RESET}"

    def test_plain_writer_emits_no_escapes(self):
        writer = StyleWriter(plain=True)
        writer.set_style(_style(foreground=1, bold=True))
        writer.write("text")
        writer.reset()
        assert writer.getvalue() == "text"
