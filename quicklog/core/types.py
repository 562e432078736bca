"""Colour value and console colour markup.

Provides:
  Color: RGBA value with float channels in [0, 1]
  to_hex: Color -> 'RRGGBB' (uppercase, alpha ignored)
  add_color_to_text: wrap text in <color=#RRGGBB>...</color>
  strip_markup / markup_to_ansi: helpers for plain terminal sinks
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Tuple
import re

from quicklog.core.errors import ColorFormatError

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")
MARKUP_RE = re.compile(r"<color=#([0-9a-fA-F]{6})>(.*?)</color>", re.DOTALL)
RESET = "\033[0m"


def _clamp01(v: float) -> float:
    return max(0.0, min(1.0, float(v)))


@dataclass(frozen=True)
class Color:
    r: float
    g: float
    b: float
    a: float = 1.0

    WHITE: ClassVar["Color"]
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    GRAY: ClassVar["Color"]
    CLEAR: ClassVar["Color"]

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int) -> "Color":
        return cls(r / 255, g / 255, b / 255)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        if not isinstance(value, str):
            raise ColorFormatError(value)
        m = _HEX_RE.match(value.strip())
        if not m:
            raise ColorFormatError(value)
        r, g, b = _hex_to_rgb(m.group(1))
        return cls.from_rgb255(r, g, b)

    def to_rgb255(self) -> Tuple[int,int,int]:
        # round() is half-to-even, same as the engine's colour formatter
        return (
            int(round(_clamp01(self.r) * 255)),
            int(round(_clamp01(self.g) * 255)),
            int(round(_clamp01(self.b) * 255)),
        )


Color.WHITE = Color(1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0)
Color.RED = Color(1.0, 0.0, 0.0)
Color.GREEN = Color(0.0, 1.0, 0.0)
Color.BLUE = Color(0.0, 0.0, 1.0)
Color.YELLOW = Color(1.0, 0.92156863, 0.015686275)
Color.CYAN = Color(0.0, 1.0, 1.0)
Color.MAGENTA = Color(1.0, 0.0, 1.0)
Color.GRAY = Color(0.5, 0.5, 0.5)
Color.CLEAR = Color(0.0, 0.0, 0.0, 0.0)


def _hex_to_rgb(h: str) -> Tuple[int,int,int]:
    h = h.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)


def to_hex(color: Color) -> str:
    """Return the colour as six uppercase hex digits, no leading '#'."""
    r, g, b = color.to_rgb255()
    return f"{r:02X}{g:02X}{b:02X}"


def add_color_to_text(text: str, color: Color) -> str:
    return f"<color=#{to_hex(color)}>{text}</color>"


def strip_markup(text: str) -> str:
    return MARKUP_RE.sub(lambda m: m.group(2), text)


def ansi_from_hex(hex_str: str) -> str:
    """Return the 24-bit foreground escape for 'RRGGBB'."""
    r, g, b = _hex_to_rgb(hex_str)
    return f"\033[38;2;{r};{g};{b}m"


def markup_to_ansi(text: str, reset: str = RESET) -> str:
    """Replace colour tags with ANSI escapes; ``reset`` restores the surrounding style."""
    return MARKUP_RE.sub(lambda m: f"{ansi_from_hex(m.group(1))}{m.group(2)}{reset}", text)


__all__ = [
    'Color','to_hex','add_color_to_text','strip_markup','ansi_from_hex','markup_to_ansi'
]
