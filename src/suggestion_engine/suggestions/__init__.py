"""Propose, reject and accept code suggestions on a line buffer."""

from .accepter import SuggestionAccepter, line_delta_above
from .annotator import SuggestionAnnotator, caret_marker
from .config import InjectorConfig, InjectorConfigError
from .injector import SuggestionInjector
from .models import ExtraInfo, Suggestion

__all__ = [
    "ExtraInfo",
    "InjectorConfig",
    "InjectorConfigError",
    "Suggestion",
    "SuggestionAccepter",
    "SuggestionAnnotator",
    "SuggestionInjector",
    "caret_marker",
    "line_delta_above",
]
