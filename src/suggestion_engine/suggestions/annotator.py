"""Comment-delimited annotation blocks that preview a suggestion in place.

A proposed suggestion is written into the buffer as::

    /*========== Copilot Suggestion 1/3
               ^: String
        var age: String
    *///======== End of Copilot Suggestion

The caret line points at the column where the suggestion stops repeating the
line it was proposed for. Rejecting removes every complete block.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from suggestion_engine.buffer import (
    CursorPosition,
    CursorRange,
    Deleted,
    Inserted,
    LineBuffer,
    break_lines,
    detect_line_ending,
    is_empty_or_newline,
    longest_common_prefix,
)
from suggestion_engine.buffer.lines import LINE_BREAKS, safe_line
from suggestion_engine.runtime import telemetry

from .config import InjectorConfig
from .models import ExtraInfo, Suggestion


def caret_marker(common_prefix: str) -> str:
    """Text that replaces ``common_prefix`` at the start of the first block line."""

    for ending in LINE_BREAKS:
        if common_prefix.endswith(ending):
            width = len(common_prefix) - len(ending)
            if width == 0:
                return ending
            return " " * (width - 1) + "^" + ending
    return " " * (len(common_prefix) - 1) + "^"


class SuggestionAnnotator:
    """Proposes suggestions as annotation blocks and rejects them again."""

    def __init__(self, config: Optional[InjectorConfig] = None) -> None:
        self.config = config or InjectorConfig()
        self.logger_name = "suggestion_engine.annotator"

    def find_annotations(self, lines: LineBuffer) -> List[Tuple[int, int]]:
        """Inclusive ``(start, end)`` row pairs of every closed block, top-down.

        A start delimiter seen while a block is open restarts the block; a
        block that is never closed is not reported.
        """

        ranges: List[Tuple[int, int]] = []
        open_at = -1
        for index, line in enumerate(lines):
            if line.startswith(self.config.annotation_start):
                open_at = index
            if open_at >= 0 and line.startswith(self.config.annotation_end):
                ranges.append((open_at, index))
                open_at = -1
        return ranges

    def reject(
        self,
        lines: LineBuffer,
        cursor: CursorPosition,
        extra_info: Optional[ExtraInfo] = None,
    ) -> ExtraInfo:
        """Remove all annotation blocks from ``lines`` and move ``cursor`` up."""

        info = extra_info if extra_info is not None else ExtraInfo()
        with telemetry.span(
            "suggestion::reject",
            logger_name=self.logger_name,
            component="annotator",
            metadata={"line_count": len(lines)},
        ) as handle:
            ranges = self.find_annotations(lines)
            handle.add_metadata("blocks", len(ranges))

            for start, end in reversed(ranges):
                info.modifications.append(Deleted(start, end))
                for index in range(end, start - 1, -1):
                    if cursor.in_scope and index <= cursor.line:
                        cursor = CursorPosition(
                            cursor.line - 1,
                            0 if index == cursor.line else cursor.character,
                        )
                        info.cursor_changed = True
                    del lines[index]

            if ranges:
                info.content_changed = True
            else:
                telemetry.record_event(
                    "suggestion.reject.noop",
                    level="debug",
                    data={"lines": len(lines)},
                    logger_name=self.logger_name,
                )
            info.annotation_range = None
            info.cursor = cursor
        return info

    def build_block(
        self, suggestion: Suggestion, index: int, count: int, *, line_ending: str = "\n"
    ) -> LineBuffer:
        block = [f"{self.config.annotation_start} {index + 1}/{count}{line_ending}"]
        block.extend(
            break_lines(
                suggestion.text,
                line_ending=line_ending,
                append_line_break_to_last_line=True,
            )
        )
        block.append(self.config.annotation_end + line_ending)
        return block

    def propose(
        self,
        lines: LineBuffer,
        suggestion: Suggestion,
        index: Optional[int] = None,
        count: Optional[int] = None,
        extra_info: Optional[ExtraInfo] = None,
    ) -> ExtraInfo:
        """Insert ``suggestion`` as an annotation block near its start row.

        ``index`` and ``count`` default to the suggestion's own display index
        and total count. The buffer is left untouched when the suggestion has
        nothing to show beyond what is already typed.
        """

        info = extra_info if extra_info is not None else ExtraInfo()
        index = suggestion.display_index if index is None else index
        count = suggestion.total_count if count is None else count
        row = max(0, suggestion.range.start.line)

        with telemetry.span(
            "suggestion::propose",
            logger_name=self.logger_name,
            component="annotator",
            metadata={"row": row, "index": index, "count": count},
        ) as handle:
            block = self.build_block(
                suggestion, index, count, line_ending=detect_line_ending(lines)
            )
            existing = safe_line(lines, row)
            common_prefix = longest_common_prefix(block[1], existing or "")
            # compared in block space so CRLF prefixes line up with the content
            remainder = "".join(block[1:-1])[len(common_prefix) :]
            if not remainder.strip():
                telemetry.record_event(
                    "suggestion.propose.skipped",
                    level="debug",
                    data={"row": row, "reason": "whitespace_only"},
                    logger_name=self.logger_name,
                )
                return info

            if common_prefix:
                block[1] = caret_marker(common_prefix) + block[1][len(common_prefix) :]

            if existing is not None and (
                is_empty_or_newline(existing) or common_prefix
            ):
                row += 1
            row = min(row, len(lines))

            lines[row:row] = block
            info.modifications.append(Inserted(row, block))
            info.content_changed = True
            info.annotation_range = CursorRange(
                CursorPosition(row, 0),
                CursorPosition(row + len(block) - 1, len(self.config.annotation_end)),
            )
            handle.add_metadata("inserted_at", row)
        return info


__all__ = ["SuggestionAnnotator", "caret_marker"]
