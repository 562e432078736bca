import re
import pytest
from quicklog.core.errors import ColorFormatError
from quicklog.core.types import (
    Color, add_color_to_text, markup_to_ansi, strip_markup, to_hex,
)

HEX6 = re.compile(r"^[0-9A-F]{6}$")


def test_named_colors_hex():
    assert to_hex(Color.RED) == "FF0000"
    assert to_hex(Color.WHITE) == "FFFFFF"
    assert to_hex(Color.BLACK) == "000000"
    assert to_hex(Color.YELLOW) == "FFEB04"


def test_hex_rounds_and_clamps():
    assert to_hex(Color(0.5, 0.5, 0.5)) == "808080"
    assert to_hex(Color(1.7, -0.2, 0.0)) == "FF0000"
    assert to_hex(Color(0.0, 0.0, 1.0, a=0.0)) == "0000FF"


def test_from_hex():
    assert Color.from_hex("#3FA129").to_rgb255() == (0x3F, 0xA1, 0x29)
    assert to_hex(Color.from_hex("e62829")) == "E62829"
    for bad in ("#12345", "zzzzzz", "", None):
        with pytest.raises(ColorFormatError):
            Color.from_hex(bad)


def test_add_color_wraps_text_verbatim():
    text = "Player <b>spawned</b> at 3,4"
    out = add_color_to_text(text, Color.RED)
    assert out == f"<color=#FF0000>{text}</color>"
    assert out.startswith("<color=#") and out.endswith("</color>")
    assert HEX6.match(out[len("<color=#"):len("<color=#") + 6])
    assert add_color_to_text(text, Color.RED) == out


def test_strip_and_ansi():
    marked = "a " + add_color_to_text("b", Color.from_rgb255(1, 2, 3)) + " c"
    assert strip_markup(marked) == "a b c"
    assert markup_to_ansi(marked) == "a \033[38;2;1;2;3mb\033[0m c"
