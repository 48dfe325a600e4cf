"""Injector configuration: annotation delimiters and placeholder grammar."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Optional, Pattern

ENV_PREFIX = "SUGGESTION_ENGINE_"

ANNOTATION_START = "/*========== Copilot Suggestion"
ANNOTATION_END = "*///======== End of Copilot Suggestion"
# Xcode editor placeholders look like ``<#name#>``.
XCODE_PLACEHOLDER_PATTERN = r"\s*?<#.*?#>"


class InjectorConfigError(ValueError):
    """Raised when delimiters or the placeholder pattern are unusable."""

    def __init__(self, message: str, *, field_name: str) -> None:
        super().__init__(message)
        self.field_name = field_name


@dataclass(frozen=True, slots=True)
class InjectorConfig:
    annotation_start: str = ANNOTATION_START
    annotation_end: str = ANNOTATION_END
    placeholder_pattern: Optional[str] = XCODE_PLACEHOLDER_PATTERN

    def __post_init__(self) -> None:
        if not self.annotation_start:
            raise InjectorConfigError(
                "Annotation start delimiter is empty", field_name="annotation_start"
            )
        if not self.annotation_end:
            raise InjectorConfigError(
                "Annotation end delimiter is empty", field_name="annotation_end"
            )
        if self.placeholder_pattern is not None:
            try:
                re.compile(self.placeholder_pattern)
            except re.error as exc:
                raise InjectorConfigError(
                    f"Invalid placeholder pattern: {exc}",
                    field_name="placeholder_pattern",
                ) from exc

    @classmethod
    def from_env(cls) -> "InjectorConfig":
        """Build a config from ``SUGGESTION_ENGINE_*`` variables.

        An empty ``SUGGESTION_ENGINE_PLACEHOLDER_PATTERN`` turns placeholder
        stripping off.
        """

        pattern = os.getenv(f"{ENV_PREFIX}PLACEHOLDER_PATTERN")
        return cls(
            annotation_start=os.getenv(
                f"{ENV_PREFIX}ANNOTATION_START", ANNOTATION_START
            ),
            annotation_end=os.getenv(f"{ENV_PREFIX}ANNOTATION_END", ANNOTATION_END),
            placeholder_pattern=(
                XCODE_PLACEHOLDER_PATTERN if pattern is None else (pattern or None)
            ),
        )

    def compiled_placeholder(self) -> Optional[Pattern[str]]:
        if self.placeholder_pattern is None:
            return None
        return re.compile(self.placeholder_pattern)


__all__ = [
    "ANNOTATION_END",
    "ANNOTATION_START",
    "InjectorConfig",
    "InjectorConfigError",
    "XCODE_PLACEHOLDER_PATTERN",
]
