"""An editable line of text with a cursor, and word-wise cursor movement."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

__all__ = ["WordJumpMode", "WordJumper", "Cursor"]


class WordJumpMode(enum.Enum):
    """How the cursor decides where a word starts and ends."""

    EMACS = "emacs"
    SUBL = "subl"


@dataclass(frozen=True)
class WordJumper:
    """Finds word positions in a string; positions are character indices."""

    word_chars: str
    word_jump_mode: WordJumpMode

    def _is_word_boundary(self, c: str, next_c: str) -> bool:
        if c.isspace() != next_c.isspace():
            return True
        return (c in self.word_chars) != (next_c in self.word_chars)

    def _emacs_next(self, source: str, index: int) -> int:
        limit = max(len(source) - 1, 0)
        start = next(
            (i for i in range(index + 1, limit) if source[i] in self.word_chars),
            len(source),
        )
        return next(
            (i for i in range(start + 1, limit) if source[i] not in self.word_chars),
            len(source),
        )

    def _emacs_prev(self, source: str, index: int) -> int:
        start = next(
            (i for i in reversed(range(1, index)) if source[i] in self.word_chars),
            0,
        )
        found = next(
            (i for i in reversed(range(1, start)) if source[i] not in self.word_chars),
            None,
        )
        return 0 if found is None else found + 1

    def _subl_next(self, source: str, index: int) -> int:
        boundary = next(
            (
                i
                for i in range(index, max(len(source) - 1, 0))
                if self._is_word_boundary(source[i], source[i + 1])
            ),
            None,
        )
        if boundary is None:
            return len(source)
        return next(
            (i for i in range(boundary + 1, len(source)) if not source[i].isspace()),
            len(source),
        )

    def _subl_prev(self, source: str, index: int) -> int:
        start = next(
            (i for i in reversed(range(1, index)) if not source[i].isspace()),
            None,
        )
        if start is None:
            return 0
        return next(
            (
                i
                for i in reversed(range(1, start))
                if self._is_word_boundary(source[i - 1], source[i])
            ),
            0,
        )

    def next_word_pos(self, source: str, index: int) -> int:
        """Index of the next word position after ``index``."""
        if self.word_jump_mode is WordJumpMode.EMACS:
            return self._emacs_next(source, index)
        return self._subl_next(source, index)

    def prev_word_pos(self, source: str, index: int) -> int:
        """Index of the previous word position before ``index``."""
        if self.word_jump_mode is WordJumpMode.EMACS:
            return self._emacs_prev(source, index)
        return self._subl_prev(source, index)


@dataclass
class Cursor:
    """A text line with a cursor position counted in characters."""

    source: str = ""
    index: int = 0

    def __str__(self) -> str:
        return self.source

    def substring(self) -> str:
        """The text before the cursor."""
        return self.source[: self.index]

    def char(self) -> Optional[str]:
        """The character under the cursor, or None at the end."""
        return self.source[self.index] if self.index < len(self.source) else None

    def right(self) -> None:
        if self.index < len(self.source):
            self.index += 1

    def left(self) -> bool:
        """Move left one character; return False if already at the start."""
        if self.index > 0:
            self.index -= 1
            return True
        return False

    def next_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        self.index = jumper.next_word_pos(self.source, self.index)

    def prev_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        self.index = jumper.prev_word_pos(self.source, self.index)

    def insert(self, c: str) -> None:
        """Insert text at the cursor and move past it."""
        self.source = self.source[: self.index] + c + self.source[self.index :]
        self.index += len(c)

    def remove(self) -> Optional[str]:
        """Delete and return the character under the cursor."""
        if self.index < len(self.source):
            removed = self.source[self.index]
            self.source = self.source[: self.index] + self.source[self.index + 1 :]
            return removed
        return None

    def remove_next_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        end = jumper.next_word_pos(self.source, self.index)
        self.source = self.source[: self.index] + self.source[end:]

    def remove_prev_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        start = jumper.prev_word_pos(self.source, self.index)
        self.source = self.source[:start] + self.source[self.index :]
        self.index = start

    def back(self) -> Optional[str]:
        """Delete and return the character before the cursor."""
        if self.left():
            return self.remove()
        return None

    def clear(self) -> None:
        self.source = ""
        self.index = 0

    def end(self) -> None:
        self.index = len(self.source)

    def start(self) -> None:
        self.index = 0