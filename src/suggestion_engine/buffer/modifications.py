"""Atomic, order-dependent line edits and the log that records them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, Union, overload


@dataclass(frozen=True, slots=True)
class Inserted:
    """``lines`` were inserted so that the first of them sits at ``index``."""

    index: int
    lines: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))


@dataclass(frozen=True, slots=True)
class Deleted:
    """Lines ``start`` through ``end`` (inclusive) were removed."""

    start: int
    end: int

    @property
    def count(self) -> int:
        return self.end - self.start + 1


Modification = Union[Inserted, Deleted]


class InvalidModificationError(ValueError):
    """Raised when a modification does not fit the buffer it is replayed on."""

    def __init__(self, message: str, *, modification: Modification) -> None:
        super().__init__(message)
        self.modification = modification


class ModificationRecorder(Sequence[Modification]):
    """Append-only log of modifications, kept in the order they happened."""

    def __init__(self, modifications: Iterable[Modification] = ()) -> None:
        self._entries: List[Modification] = list(modifications)

    def append(self, modification: Modification) -> None:
        self._entries.append(modification)

    def extend(self, modifications: Iterable[Modification]) -> None:
        self._entries.extend(modifications)

    @overload
    def __getitem__(self, index: int) -> Modification: ...

    @overload
    def __getitem__(self, index: slice) -> List[Modification]: ...

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Modification]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModificationRecorder):
            return self._entries == other._entries
        if isinstance(other, (list, tuple)):
            return self._entries == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ModificationRecorder({self._entries!r})"


def apply_modification(lines: List[str], modification: Modification) -> None:
    """Apply one modification to ``lines`` in place."""

    if isinstance(modification, Deleted):
        if modification.start < 0 or modification.start > modification.end:
            raise InvalidModificationError(
                "Deleted range is inverted or negative", modification=modification
            )
        if modification.start >= len(lines):
            raise InvalidModificationError(
                "Deleted range starts past the end of the buffer",
                modification=modification,
            )
        del lines[modification.start : modification.end + 1]
    elif isinstance(modification, Inserted):
        if modification.index < 0 or modification.index > len(lines):
            raise InvalidModificationError(
                "Insertion index is outside the buffer", modification=modification
            )
        lines[modification.index : modification.index] = modification.lines
    else:
        raise TypeError(f"Unsupported modification {modification!r}")


def apply_modifications(
    lines: Sequence[str], modifications: Iterable[Modification]
) -> List[str]:
    """Replay ``modifications`` in order on a copy of ``lines``."""

    replayed = list(lines)
    for modification in modifications:
        apply_modification(replayed, modification)
    return replayed


__all__ = [
    "Deleted",
    "Inserted",
    "InvalidModificationError",
    "Modification",
    "ModificationRecorder",
    "apply_modification",
    "apply_modifications",
]
