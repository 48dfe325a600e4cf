"""Textual host integration."""

from .bridge import TextualBridgeHooks, TextualDocumentBridge

__all__ = ["TextualBridgeHooks", "TextualDocumentBridge"]
