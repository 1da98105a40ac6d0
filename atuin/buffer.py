"""A grid of styled cells describing what the terminal should show."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator

import regex
from wcwidth import wcwidth

from atuin.layout import Rect
from atuin.style import EMPTY, Color, Modifier, Style, without

__all__ = ["Cell", "Buffer"]

_GRAPHEME = regex.compile(r"\X")


def _str_width(text: str) -> int:
    """Display width of ``text`` in terminal columns; control characters count as zero."""
    return sum(max(wcwidth(ch), 0) for ch in text)


def _graphemes(text: str) -> Iterator[str]:
    return (match.group() for match in _GRAPHEME.finditer(text))


@dataclass
class Cell:
    """One terminal cell: a grapheme with its colours and modifiers."""

    symbol: str = " "
    fg: Color = Color.RESET
    bg: Color = Color.RESET
    modifier: Modifier = EMPTY

    def set_symbol(self, symbol: str) -> Cell:
        self.symbol = symbol
        return self

    def set_style(self, style: Style) -> Cell:
        """Apply ``style`` on top of the cell's current attributes."""
        if style.fg is not None:
            self.fg = style.fg
        if style.bg is not None:
            self.bg = style.bg
        self.modifier = without(self.modifier | style.add_modifier, style.sub_modifier)
        return self

    def style(self) -> Style:
        return Style().with_fg(self.fg).with_bg(self.bg).with_modifier(self.modifier)

    def reset(self) -> None:
        self.symbol = " "
        self.fg = Color.RESET
        self.bg = Color.RESET
        self.modifier = EMPTY

    def copy(self) -> Cell:
        return Cell(self.symbol, self.fg, self.bg, self.modifier)


@dataclass
class Buffer:
    """The desired terminal content for an area, stored row by row."""

    area: Rect = field(default_factory=Rect)
    content: list[Cell] = field(default_factory=list)

    @classmethod
    def empty(cls, area: Rect) -> Buffer:
        """A buffer whose cells are all blank."""
        return cls.filled(area, Cell())

    @classmethod
    def filled(cls, area: Rect, cell: Cell) -> Buffer:
        """A buffer whose cells are all copies of ``cell``."""
        return cls(area, [cell.copy() for _ in range(area.area())])

    @classmethod
    def with_lines(cls, lines: Iterable[str]) -> Buffer:
        """A buffer at the origin holding ``lines``, as wide as the widest one."""
        lines = list(lines)
        width = max((_str_width(line) for line in lines), default=0)
        buffer = cls.empty(Rect(0, 0, width, len(lines)))
        for y, line in enumerate(lines):
            buffer.set_string(0, y, line, Style())
        return buffer

    def get(self, x: int, y: int) -> Cell:
        """The cell at global coordinates (x, y); it may be changed in place."""
        return self.content[self.index_of(x, y)]

    def index_of(self, x: int, y: int) -> int:
        """Index into ``content`` of the global coordinates (x, y)."""
        area = self.area
        if not (area.left() <= x < area.right() and area.top() <= y < area.bottom()):
            raise IndexError(
                f"Trying to access position outside the buffer: x={x}, y={y}, area={area!r}"
            )
        return (y - area.y) * area.width + (x - area.x)

    def pos_of(self, i: int) -> tuple[int, int]:
        """Global coordinates of the cell at index ``i``."""
        if not 0 <= i < len(self.content):
            raise IndexError(
                f"Trying to get the coords of a cell outside the buffer: "
                f"i={i} len={len(self.content)}"
            )
        return self.area.x + i % self.area.width, self.area.y + i // self.area.width

    def set_string(self, x: int, y: int, string: str, style: Style = Style()) -> tuple[int, int]:
        """Print ``string`` from (x, y) as far as the line allows."""
        return self.set_stringn(x, y, string, sys.maxsize, style)

    def set_stringn(
        self, x: int, y: int, string: str, width: int, style: Style = Style()
    ) -> tuple[int, int]:
        """Print at most ``width`` columns of ``string`` from (x, y).

        Returns the position just past the last printed grapheme.
        """
        index = self.index_of(x, y)
        x_offset = x
        max_offset = min(self.area.right(), max(width, 0) + x)
        for grapheme in _graphemes(string):
            grapheme_width = _str_width(grapheme)
            if grapheme_width == 0:
                continue
            if grapheme_width > max(max_offset - x_offset, 0):
                break
            self.content[index].set_symbol(grapheme).set_style(style)
            # Cells hidden behind a wide grapheme are cleared.
            for hidden in self.content[index + 1 : index + grapheme_width]:
                hidden.reset()
            index += grapheme_width
            x_offset += grapheme_width
        return x_offset, y

    def set_style(self, area: Rect, style: Style) -> None:
        """Apply ``style`` to every cell inside ``area``."""
        for y in range(area.top(), area.bottom()):
            for x in range(area.left(), area.right()):
                self.get(x, y).set_style(style)

    def resize(self, area: Rect) -> None:
        """Make the buffer cover ``area``, truncating or padding with blank cells."""
        length = area.area()
        if len(self.content) > length:
            del self.content[length:]
        else:
            self.content.extend(Cell() for _ in range(length - len(self.content)))
        self.area = area

    def reset(self) -> None:
        """Blank every cell."""
        for cell in self.content:
            cell.reset()

    def merge(self, other: Buffer) -> None:
        """Grow to cover ``other`` as well, copying its cells over this buffer's."""
        area = self.area.union(other.area)
        self.content.extend(Cell() for _ in range(area.area() - len(self.content)))

        for i in reversed(range(self.area.area())):
            x, y = self.pos_of(i)
            k = (y - area.y) * area.width + x - area.x
            if i != k:
                self.content[k] = self.content[i]
                self.content[i] = Cell()

        for i in range(other.area.area()):
            x, y = other.pos_of(i)
            k = (y - area.y) * area.width + x - area.x
            self.content[k] = other.content[i].copy()
        self.area = area

    def diff(self, other: Buffer) -> list[tuple[int, int, Cell]]:
        """The minimal updates, as (x, y, cell), that turn this buffer into ``other``.

        A wide grapheme hides the cells after it, so those are skipped, and cells
        previously hidden by a wide grapheme are always redrawn.
        """
        updates: list[tuple[int, int, Cell]] = []
        invalidated = 0
        to_skip = 0
        for i, (current, previous) in enumerate(zip(other.content, self.content)):
            if (current != previous or invalidated > 0) and to_skip == 0:
                x, y = self.pos_of(i)
                updates.append((x, y, current))

            current_width = _str_width(current.symbol)
            to_skip = max(current_width - 1, 0)
            affected_width = max(current_width, _str_width(previous.symbol))
            invalidated = max(max(affected_width, invalidated) - 1, 0)
        return updates