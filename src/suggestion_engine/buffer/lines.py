"""Line buffer conventions and the small text helpers built on them.

A line buffer is a plain ``list[str]``. Every entry keeps its trailing line
break, except possibly the conceptually last line of the document. Helpers in
this module are the only place that knows how breaks are attached or removed.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

LineBuffer = List[str]

LINE_BREAKS = ("\r\n", "\n", "\r")
DEFAULT_LINE_ENDING = "\n"


def break_lines(
    text: str,
    *,
    line_ending: str = DEFAULT_LINE_ENDING,
    append_line_break_to_last_line: bool = False,
) -> LineBuffer:
    """Split ``text`` on ``"\\n"`` and re-attach ``line_ending`` to each line.

    Empty segments are kept, so ``"a\\n"`` yields ``["a\\n", ""]`` unless the
    last line is asked to carry a break as well.
    """

    segments = text.split("\n")
    lines: LineBuffer = []
    last = len(segments) - 1
    for index, segment in enumerate(segments):
        if segment.endswith("\r") and line_ending != "\r":
            segment = segment[:-1]
        if index == last and not append_line_break_to_last_line:
            lines.append(segment)
        else:
            lines.append(segment + line_ending)
    return lines


def split_editor_lines(text: str) -> LineBuffer:
    """Lines the way an editor extension hands them over: all end in a break."""

    if not text:
        return []
    lines = text.splitlines(keepends=True)
    if not lines[-1].endswith(LINE_BREAKS):
        lines[-1] += DEFAULT_LINE_ENDING
    return lines


def join_lines(lines: Iterable[str]) -> str:
    return "".join(lines)


def longest_common_prefix(a: str, b: str) -> str:
    length = min(len(a), len(b))
    for index in range(length):
        if a[index] != b[index]:
            return a[:index]
    return a[:length]


def is_empty_or_newline(line: str | None) -> bool:
    return not line or line in LINE_BREAKS


def dropped_line_break(line: str) -> str:
    for ending in LINE_BREAKS:
        if line.endswith(ending):
            return line[: -len(ending)]
    return line


def recovered_line_break(line: str, line_ending: str = DEFAULT_LINE_ENDING) -> str:
    if line.endswith(line_ending):
        return line
    return line + line_ending


def detect_line_ending(lines: Sequence[str]) -> str:
    """Line ending used by the first line, ``"\\n"`` when it has none."""

    if lines:
        first = lines[0]
        for ending in LINE_BREAKS:
            if first.endswith(ending):
                return ending
    return DEFAULT_LINE_ENDING


def safe_line(lines: Sequence[str], index: int) -> str | None:
    if 0 <= index < len(lines):
        return lines[index]
    return None


__all__ = [
    "DEFAULT_LINE_ENDING",
    "LINE_BREAKS",
    "LineBuffer",
    "break_lines",
    "detect_line_ending",
    "dropped_line_break",
    "is_empty_or_newline",
    "join_lines",
    "longest_common_prefix",
    "recovered_line_break",
    "safe_line",
    "split_editor_lines",
]
