"""Line buffer model, cursor types, and replayable modifications."""

from .lines import (
    LineBuffer,
    break_lines,
    detect_line_ending,
    dropped_line_break,
    is_empty_or_newline,
    join_lines,
    longest_common_prefix,
    recovered_line_break,
    split_editor_lines,
)
from .modifications import (
    Deleted,
    Inserted,
    InvalidModificationError,
    Modification,
    ModificationRecorder,
    apply_modifications,
)
from .state import CursorPosition, CursorRange

__all__ = [
    "CursorPosition",
    "CursorRange",
    "Deleted",
    "Inserted",
    "InvalidModificationError",
    "LineBuffer",
    "Modification",
    "ModificationRecorder",
    "apply_modifications",
    "break_lines",
    "detect_line_ending",
    "dropped_line_break",
    "is_empty_or_newline",
    "join_lines",
    "longest_common_prefix",
    "recovered_line_break",
    "split_editor_lines",
]
