"""Colours, text modifiers and incremental styles for terminal cells."""

from __future__ import annotations

import enum
import functools
import operator
from dataclasses import dataclass, replace
from typing import ClassVar, Optional

__all__ = ["Color", "Modifier", "Style"]


@dataclass(frozen=True)
class Color:
    """A terminal colour: a named colour, an RGB triple or a palette index."""

    name: str
    value: tuple[int, ...] = ()

    RESET: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    GRAY: ClassVar[Color]
    DARK_GRAY: ClassVar[Color]
    LIGHT_RED: ClassVar[Color]
    LIGHT_GREEN: ClassVar[Color]
    LIGHT_YELLOW: ClassVar[Color]
    LIGHT_BLUE: ClassVar[Color]
    LIGHT_MAGENTA: ClassVar[Color]
    LIGHT_CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """A true-colour value; each channel must lie in 0..255."""
        for channel in (r, g, b):
            _check_byte(channel)
        return cls("rgb", (r, g, b))

    @classmethod
    def indexed(cls, index: int) -> Color:
        """A colour from the 256-entry terminal palette."""
        _check_byte(index)
        return cls("indexed", (index,))

    def __repr__(self) -> str:
        if self.value:
            return f"Color.{self.name}{self.value}"
        return f"Color.{self.name.upper()}"


def _check_byte(value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"colour component out of range 0..255: {value!r}")


for _name in (
    "reset",
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "gray",
    "dark_gray",
    "light_red",
    "light_green",
    "light_yellow",
    "light_blue",
    "light_magenta",
    "light_cyan",
    "white",
):
    setattr(Color, _name.upper(), Color(_name))
del _name


class Modifier(enum.Flag):
    """Text emphasis flags that can be combined with ``|``."""

    BOLD = 0b0000_0000_0001
    DIM = 0b0000_0000_0010
    ITALIC = 0b0000_0000_0100
    UNDERLINED = 0b0000_0000_1000
    SLOW_BLINK = 0b0000_0001_0000
    RAPID_BLINK = 0b0000_0010_0000
    REVERSED = 0b0000_0100_0000
    HIDDEN = 0b0000_1000_0000
    CROSSED_OUT = 0b0001_0000_0000


EMPTY = Modifier(0)
ALL = functools.reduce(operator.or_, Modifier, EMPTY)


def without(flags: Modifier, removed: Modifier) -> Modifier:
    """Return ``flags`` with every bit of ``removed`` cleared."""
    return Modifier(flags.value & ~removed.value)


@dataclass(frozen=True)
class Style:
    """An incremental change to a cell's colours and modifiers."""

    fg: Optional[Color] = None
    bg: Optional[Color] = None
    add_modifier: Modifier = EMPTY
    sub_modifier: Modifier = EMPTY

    @classmethod
    def reset(cls) -> Style:
        """A style that resets every property."""
        return cls(fg=Color.RESET, bg=Color.RESET, add_modifier=EMPTY, sub_modifier=ALL)

    def with_fg(self, color: Color) -> Style:
        return replace(self, fg=color)

    def with_bg(self, color: Color) -> Style:
        return replace(self, bg=color)

    def with_modifier(self, modifier: Modifier) -> Style:
        """Add ``modifier`` to the modifiers this style turns on."""
        return replace(
            self,
            add_modifier=self.add_modifier | modifier,
            sub_modifier=without(self.sub_modifier, modifier),
        )

    def without_modifier(self, modifier: Modifier) -> Style:
        """Add ``modifier`` to the modifiers this style turns off."""
        return replace(
            self,
            add_modifier=without(self.add_modifier, modifier),
            sub_modifier=self.sub_modifier | modifier,
        )

    def patch(self, other: Style) -> Style:
        """Combine two styles as if ``other`` were applied after ``self``."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            add_modifier=without(self.add_modifier, other.sub_modifier) | other.add_modifier,
            sub_modifier=without(self.sub_modifier, other.add_modifier) | other.sub_modifier,
        )