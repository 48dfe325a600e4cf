"""Single entry point bundling the annotator and the accepter."""

from __future__ import annotations

from typing import Optional, Sequence

from suggestion_engine.buffer import CursorPosition, LineBuffer

from .accepter import SuggestionAccepter
from .annotator import SuggestionAnnotator
from .config import InjectorConfig
from .models import ExtraInfo, Suggestion


class SuggestionInjector:
    """Stateless façade; every call works on the buffer it is handed."""

    def __init__(self, config: Optional[InjectorConfig] = None) -> None:
        self.config = config or InjectorConfig()
        self.annotator = SuggestionAnnotator(self.config)
        self.accepter = SuggestionAccepter(self.config)

    @classmethod
    def from_env(cls) -> "SuggestionInjector":
        return cls(InjectorConfig.from_env())

    def reject(
        self,
        lines: LineBuffer,
        cursor: CursorPosition,
        extra_info: Optional[ExtraInfo] = None,
    ) -> ExtraInfo:
        return self.annotator.reject(lines, cursor, extra_info)

    def propose(
        self,
        lines: LineBuffer,
        suggestion: Suggestion,
        index: Optional[int] = None,
        count: Optional[int] = None,
        extra_info: Optional[ExtraInfo] = None,
    ) -> ExtraInfo:
        return self.annotator.propose(lines, suggestion, index, count, extra_info)

    def accept(
        self,
        lines: LineBuffer,
        cursor: CursorPosition,
        suggestion: Suggestion,
        extra_info: Optional[ExtraInfo] = None,
    ) -> ExtraInfo:
        return self.accepter.accept(lines, cursor, suggestion, extra_info)

    def accept_many(
        self,
        lines: LineBuffer,
        cursor: CursorPosition,
        suggestions: Sequence[Suggestion],
        extra_info: Optional[ExtraInfo] = None,
    ) -> ExtraInfo:
        return self.accepter.accept_many(lines, cursor, suggestions, extra_info)


__all__ = ["SuggestionInjector"]
