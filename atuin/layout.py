"""Rectangles, margins and sizing constraints used to lay out terminal widgets."""

from __future__ import annotations

import enum
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

__all__ = [
    "Corner",
    "Direction",
    "Alignment",
    "Margin",
    "Constraint",
    "Percentage",
    "Ratio",
    "Length",
    "Max",
    "Min",
    "Rect",
]

U16_MAX = 0xFFFF


def _check_u16(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= U16_MAX:
        raise ValueError(f"{name} must be an integer in 0..{U16_MAX}, got {value!r}")


class Corner(enum.Enum):
    TOP_LEFT = enum.auto()
    TOP_RIGHT = enum.auto()
    BOTTOM_RIGHT = enum.auto()
    BOTTOM_LEFT = enum.auto()


class Direction(enum.Enum):
    HORIZONTAL = enum.auto()
    VERTICAL = enum.auto()


class Alignment(enum.Enum):
    LEFT = enum.auto()
    CENTER = enum.auto()
    RIGHT = enum.auto()


@dataclass(frozen=True)
class Margin:
    """Space kept free on each side of an area."""

    vertical: int = 0
    horizontal: int = 0

    def __post_init__(self) -> None:
        _check_u16("vertical", self.vertical)
        _check_u16("horizontal", self.horizontal)


class Constraint(ABC):
    """A rule that limits the size of a layout chunk."""

    @abstractmethod
    def apply(self, length: int) -> int:
        """Return the size this constraint allows out of ``length``."""


@dataclass(frozen=True)
class Percentage(Constraint):
    percent: int

    def apply(self, length: int) -> int:
        return length * self.percent // 100


@dataclass(frozen=True)
class Ratio(Constraint):
    numerator: int
    denominator: int

    def apply(self, length: int) -> int:
        # The result is narrowed to 16 bits, as a wrapped cast would do.
        return (self.numerator * length // self.denominator) & U16_MAX


@dataclass(frozen=True)
class Length(Constraint):
    length: int

    def apply(self, length: int) -> int:
        return min(length, self.length)


@dataclass(frozen=True)
class Max(Constraint):
    maximum: int

    def apply(self, length: int) -> int:
        return min(length, self.maximum)


@dataclass(frozen=True)
class Min(Constraint):
    minimum: int

    def apply(self, length: int) -> int:
        return max(length, self.minimum)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in terminal cell coordinates."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        for name in ("x", "y", "width", "height"):
            _check_u16(name, getattr(self, name))

    @classmethod
    def clipped(cls, x: int, y: int, width: int, height: int) -> Rect:
        """Build a rect whose area fits in 16 bits, shrinking it if needed.

        When the size is reduced the aspect ratio is kept as far as whole cells allow.
        """
        if width * height > U16_MAX:
            aspect_ratio = width / height
            height_f = math.sqrt(U16_MAX / aspect_ratio)
            width_f = height_f * aspect_ratio
            width, height = int(width_f), int(height_f)
        return cls(x, y, width, height)

    def area(self) -> int:
        """Number of cells covered; raises OverflowError beyond 16 bits."""
        cells = self.width * self.height
        if cells > U16_MAX:
            raise OverflowError(f"area {cells} of {self!r} exceeds {U16_MAX}")
        return cells

    def left(self) -> int:
        return self.x

    def right(self) -> int:
        return min(self.x + self.width, U16_MAX)

    def top(self) -> int:
        return self.y

    def bottom(self) -> int:
        return min(self.y + self.height, U16_MAX)

    def inner(self, margin: Margin) -> Rect:
        """The area left inside ``margin``, or an empty rect if the margin does not fit."""
        if self.width < 2 * margin.horizontal or self.height < 2 * margin.vertical:
            return Rect()
        return Rect(
            self.x + margin.horizontal,
            self.y + margin.vertical,
            self.width - 2 * margin.horizontal,
            self.height - 2 * margin.vertical,
        )

    def union(self, other: Rect) -> Rect:
        """The smallest rect that covers both rects."""
        x1 = min(self.x, other.x)
        y1 = min(self.y, other.y)
        x2 = max(self.x + self.width, other.x + other.width)
        y2 = max(self.y + self.height, other.y + other.height)
        return Rect(x1, y1, x2 - x1, y2 - y1)

    def intersection(self, other: Rect) -> Rect:
        """The area shared by both rects; raises ValueError if they are apart."""
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.x + self.width, other.x + other.width)
        y2 = min(self.y + self.height, other.y + other.height)
        if x2 < x1 or y2 < y1:
            raise ValueError(f"{self!r} and {other!r} do not overlap")
        return Rect(x1, y1, x2 - x1, y2 - y1)

    def intersects(self, other: Rect) -> bool:
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )