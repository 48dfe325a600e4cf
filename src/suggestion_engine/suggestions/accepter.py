"""Splice accepted suggestions into a buffer the user kept editing.

A suggestion's range points at the buffer as it was when the completion was
requested. By the time it is accepted the user may have typed part of it, or
typed past it. Accepting replaces the whole rows the range touches and then
reconciles both ends of the inserted text with what was there:

* the text left of ``range.start.character`` on the first row is kept;
* characters the user typed after ``range.end.character`` that the
  suggestion does not already account for are appended to its last line.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Pattern, Sequence

from suggestion_engine.buffer import (
    CursorPosition,
    CursorRange,
    Deleted,
    Inserted,
    LineBuffer,
    Modification,
    break_lines,
    detect_line_ending,
    dropped_line_break,
    is_empty_or_newline,
    recovered_line_break,
)
from suggestion_engine.buffer.lines import safe_line
from suggestion_engine.runtime import telemetry

from .config import InjectorConfig
from .models import ExtraInfo, Suggestion


def line_delta_above(modifications: Iterable[Modification], row: int) -> int:
    """Net number of rows ``modifications`` added at or above ``row``."""

    delta = 0
    for modification in modifications:
        if isinstance(modification, Deleted):
            if modification.start <= row:
                delta -= modification.count
                if modification.end >= row:
                    delta += modification.end - row
        elif modification.index <= row:
            delta += len(modification.lines)
    return delta


class SuggestionAccepter:
    """Destructively applies suggestions, recording every edit it makes."""

    def __init__(self, config: Optional[InjectorConfig] = None) -> None:
        self.config = config or InjectorConfig()
        self._placeholder: Optional[Pattern[str]] = self.config.compiled_placeholder()
        self.logger_name = "suggestion_engine.accepter"

    def accept(
        self,
        lines: LineBuffer,
        cursor: CursorPosition,
        suggestion: Suggestion,
        extra_info: Optional[ExtraInfo] = None,
    ) -> ExtraInfo:
        """Replace the rows covered by ``suggestion.range`` with its text.

        ``cursor`` is taken for parity with the other editing calls but does
        not influence the result: ``extra_info.cursor`` is always left right
        after the accepted text, before any recovered suffix.
        """

        info = extra_info if extra_info is not None else ExtraInfo()
        start = suggestion.range.start
        end = suggestion.range.end

        with telemetry.span(
            "suggestion::accept",
            logger_name=self.logger_name,
            component="accepter",
            metadata={"start": (start.line, start.character), "end": (end.line, end.character)},
        ) as handle:
            info.content_changed = True
            info.cursor_changed = True
            info.annotation_range = None
            line_ending = detect_line_ending(lines)

            first_removed = safe_line(lines, start.line)
            last_removed = safe_line(lines, end.line)
            start_line = max(0, start.line)
            end_line = max(start_line, min(end.line, len(lines) - 1))
            if start_line < len(lines):
                info.modifications.append(Deleted(start_line, end_line))
                del lines[start_line : end_line + 1]

            to_insert = break_lines(
                suggestion.text,
                line_ending=line_ending,
                append_line_break_to_last_line=True,
            )

            if (
                first_removed is not None
                and not is_empty_or_newline(first_removed)
                and 0 < start.character < len(first_removed)
                and to_insert
            ):
                kept = dropped_line_break(first_removed[: start.character])
                to_insert[0] = kept + to_insert[0]

            recovered = self.recover_suffix_if_needed(
                end, to_insert, last_removed, line_ending
            )
            if recovered:
                handle.add_metadata("recovered_suffix", recovered)

            insert_at = min(start_line, len(lines))
            lines[insert_at:insert_at] = to_insert
            info.modifications.append(Inserted(insert_at, to_insert))

            column = len(dropped_line_break(to_insert[-1])) - recovered
            new_cursor = CursorPosition(insert_at + len(to_insert) - 1, max(0, column))
            info.cursor = new_cursor
            info.modification_ranges[suggestion.id] = CursorRange(start, new_cursor)
            handle.add_metadata("inserted_lines", len(to_insert))
        return info

    def accept_many(
        self,
        lines: LineBuffer,
        cursor: CursorPosition,
        suggestions: Sequence[Suggestion],
        extra_info: Optional[ExtraInfo] = None,
    ) -> ExtraInfo:
        """Accept several non-overlapping suggestions in one pass.

        Suggestions are applied top to bottom; each range is moved down or up
        by the rows the earlier acceptances added or removed above it.
        """

        info = extra_info if extra_info is not None else ExtraInfo()
        info.cursor = cursor
        ordered = sorted(
            suggestions,
            key=lambda item: (item.range.start.line, item.range.start.character),
        )
        first_new = len(info.modifications)
        with telemetry.span(
            "suggestion::accept_many",
            logger_name=self.logger_name,
            component="accepter",
            metadata={"count": len(ordered)},
        ):
            for suggestion in ordered:
                delta = line_delta_above(
                    info.modifications[first_new:], suggestion.range.start.line
                )
                if delta:
                    suggestion = suggestion.with_range(suggestion.range.shifted(delta))
                self.accept(lines, info.cursor, suggestion, info)
        return info

    def recover_suffix_if_needed(
        self,
        end: CursorPosition,
        to_be_inserted: List[str],
        last_removed_line: Optional[str],
        line_ending: str = "\n",
    ) -> int:
        """Append what the user typed past ``end`` to the last inserted line.

        Returns the number of characters appended. Nothing is appended when
        the typed tail is already part of the suggestion, either because the
        user is typing the suggestion itself or because the suggestion ends
        with the same text.
        """

        if is_empty_or_newline(last_removed_line) or not to_be_inserted:
            return 0
        assert last_removed_line is not None
        removed = dropped_line_break(last_removed_line)
        if end.character < 0 or end.character >= len(removed):
            return 0
        if is_empty_or_newline(to_be_inserted[0]) or is_empty_or_newline(
            to_be_inserted[-1]
        ):
            return 0

        tail = removed[end.character :]
        suggested = dropped_line_break(to_be_inserted[0])[end.character :]
        if suggested.startswith(tail):
            return 0

        split = 0
        for size in range(len(tail) - 1, 0, -1):
            if suggested.startswith(tail[:size]):
                split = size
                break
        leftover = tail[split:]

        last_line = dropped_line_break(to_be_inserted[-1])
        if last_line.endswith(leftover):
            return 0

        if self._placeholder is not None:
            match = self._placeholder.match(leftover)
            if match is not None:
                leftover = leftover[match.end() :]

        to_be_inserted[-1] = recovered_line_break(last_line + leftover, line_ending)
        telemetry.record_event(
            "suggestion.accept.suffix_recovered",
            level="debug",
            data={"suffix": leftover},
            logger_name=self.logger_name,
        )
        return len(leftover)


__all__ = ["SuggestionAccepter", "line_delta_above"]
