"""Cursor positions and ranges expressed in line buffer coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True, order=True)
class CursorPosition:
    """A ``(line, character)`` pair; both components count from zero."""

    line: int
    character: int

    OUT_OF_SCOPE: ClassVar["CursorPosition"]

    @property
    def in_scope(self) -> bool:
        return self.line >= 0

    def moved(self, *, lines: int = 0) -> "CursorPosition":
        return CursorPosition(self.line + lines, self.character)


CursorPosition.OUT_OF_SCOPE = CursorPosition(-1, -1)


@dataclass(frozen=True, slots=True)
class CursorRange:
    """Span of text to replace, ``end`` is exclusive on its line."""

    start: CursorPosition
    end: CursorPosition

    @classmethod
    def from_points(
        cls, start_line: int, start_character: int, end_line: int, end_character: int
    ) -> "CursorRange":
        return cls(
            CursorPosition(start_line, start_character),
            CursorPosition(end_line, end_character),
        )

    def contains(self, position: CursorPosition) -> bool:
        return self.start <= position <= self.end

    def shifted(self, lines: int) -> "CursorRange":
        return CursorRange(self.start.moved(lines=lines), self.end.moved(lines=lines))
