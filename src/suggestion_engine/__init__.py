"""Suggestion injection and merge engine for editor integrations."""

__all__ = [
    "adapters",
    "buffer",
    "runtime",
    "suggestions",
]

__version__ = "0.1.0"
