"""Value types exchanged between the engine and its caller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from suggestion_engine.buffer import CursorPosition, CursorRange, ModificationRecorder


@dataclass(frozen=True, slots=True)
class Suggestion:
    """A completion anchored to the buffer as it was when it was generated."""

    text: str
    range: CursorRange
    display_index: int = 0
    total_count: int = 1
    id: str = ""

    def with_range(self, new_range: CursorRange) -> "Suggestion":
        return Suggestion(
            text=self.text,
            range=new_range,
            display_index=self.display_index,
            total_count=self.total_count,
            id=self.id,
        )


@dataclass(slots=True)
class ExtraInfo:
    """What a call changed, and how to replay it on another copy of the buffer.

    ``cursor`` is the cursor after the call; it equals the cursor passed in
    when ``cursor_changed`` is false.
    """

    content_changed: bool = False
    cursor_changed: bool = False
    annotation_range: Optional[CursorRange] = None
    modifications: ModificationRecorder = field(default_factory=ModificationRecorder)
    # Accepted spans keyed by ``Suggestion.id``.
    modification_ranges: Dict[str, CursorRange] = field(default_factory=dict)
    cursor: Optional[CursorPosition] = None


__all__ = ["ExtraInfo", "Suggestion"]
