"""Replay engine modifications on a Textual document.

The engine edits a plain list of lines; a host built on Textual keeps its
text in the ``Document`` behind a ``TextArea``. The bridge translates each
recorded ``Inserted``/``Deleted`` into a ``replace_range`` call so both copies
stay identical, then reports the new cursor through the hooks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple

from textual.widgets.text_area import Document

from suggestion_engine.buffer import Deleted, LineBuffer, Modification, join_lines
from suggestion_engine.runtime import telemetry
from suggestion_engine.suggestions import ExtraInfo

Location = Tuple[int, int]


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualBridgeHooks:
    """Callbacks a Textual host uses to mirror changes on its widgets."""

    update_text: Callable[[str], None] = _noop
    move_cursor: Callable[[Location], None] = _noop
    log: Callable[[str], None] = _noop


class TextualDocumentBridge:
    """Keeps a Textual ``Document`` in step with an engine line buffer."""

    def __init__(
        self, document: Document, hooks: Optional[TextualBridgeHooks] = None
    ) -> None:
        self.document = document
        self.hooks = hooks or TextualBridgeHooks()

    @classmethod
    def from_lines(
        cls, lines: Sequence[str], hooks: Optional[TextualBridgeHooks] = None
    ) -> "TextualDocumentBridge":
        return cls(Document(join_lines(lines)), hooks)

    def lines(self) -> LineBuffer:
        """Engine-style lines: each keeps its break, the last may not have one."""

        return self.document.text.splitlines(keepends=True)

    def apply(self, info: ExtraInfo) -> None:
        self.replay(info.modifications)
        if info.content_changed:
            self.hooks.update_text(self.document.text)
        if info.cursor_changed and info.cursor is not None:
            self.hooks.move_cursor((info.cursor.line, info.cursor.character))

    def replay(self, modifications: Iterable[Modification]) -> None:
        with telemetry.span("textual::replay", component="adapters.textual"):
            for modification in modifications:
                self._apply_one(modification)

    def _location(self, row: int) -> Location:
        if row < self.document.line_count:
            return (row, 0)
        return self.document.end

    def _apply_one(self, modification: Modification) -> None:
        if isinstance(modification, Deleted):
            start = self._location(modification.start)
            end = self._location(modification.end + 1)
            self.document.replace_range(start, end, "")
            self.hooks.log(f"deleted rows {modification.start}..{modification.end}")
        else:
            at = self._location(modification.index)
            self.document.replace_range(at, at, join_lines(modification.lines))
            self.hooks.log(
                f"inserted {len(modification.lines)} rows at {modification.index}"
            )


__all__ = ["TextualBridgeHooks", "TextualDocumentBridge"]
