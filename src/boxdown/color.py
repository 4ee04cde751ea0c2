"""Terminal color model: quantizes colors to the 256-entry xterm palette."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TermColor(IntEnum):
    """The eight base hues, in palette order."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PURPLE = 5
    CYAN = 6
    WHITE = 7


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} channel out of range: {value}")


@dataclass(frozen=True)
class Color:
    """An optional palette index. ``Color()`` means "no color set"."""

    index: int | None = None

    @property
    def is_set(self) -> bool:
        return self.index is not None

    @classmethod
    def from_dark(cls, color: TermColor) -> Color:
        return cls(int(color))

    @classmethod
    def from_light(cls, color: TermColor) -> Color:
        return cls(int(color) + 8)

    @classmethod
    def from_grey(cls, level: int) -> Color:
        """Map an 8-bit luminance onto the greyscale ramp.

        Only the top nibble is significant. Black and white come from the
        color cube (16 and 231), everything in between from 232 upwards.
        """
        _check_channel("grey", level)
        nibble = level >> 4
        if nibble == 0:
            return cls(16)
        if nibble == 15:
            return cls(231)
        return cls(231 + nibble)

    @classmethod
    def from_color(cls, red: int, green: int, blue: int) -> Color:
        """Quantize a 24-bit color to the 6x6x6 cube (or the grey ramp)."""
        _check_channel("red", red)
        _check_channel("green", green)
        _check_channel("blue", blue)
        if red >> 4 == green >> 4 == blue >> 4:
            return cls.from_grey(red)
        r = red * 6 // 256
        g = green * 6 // 256
        b = blue * 6 // 256
        return cls(16 + 36 * r + 6 * g + b)
