from __future__ import annotations

from typing import List, Tuple

from suggestion_engine.adapters.textual import TextualBridgeHooks, TextualDocumentBridge
from suggestion_engine.buffer import CursorPosition, CursorRange, Deleted, Inserted, join_lines
from suggestion_engine.suggestions import Suggestion, SuggestionInjector

CAT_FIELDS = "    var name: String\n    var age: String"


def make_bridge(lines: List[str]) -> Tuple[TextualDocumentBridge, List[str], List[Tuple[int, int]]]:
    texts: List[str] = []
    cursors: List[Tuple[int, int]] = []
    hooks = TextualBridgeHooks(update_text=texts.append, move_cursor=cursors.append)
    return TextualDocumentBridge.from_lines(lines, hooks), texts, cursors


def test_bridge_mirrors_accept() -> None:
    lines = ["struct Cat {\n", "    var name\n", "}\n"]
    bridge, texts, cursors = make_bridge(lines)
    suggestion = Suggestion(text=CAT_FIELDS, range=CursorRange.from_points(1, 0, 1, 12))

    info = SuggestionInjector().accept(lines, CursorPosition(1, 12), suggestion)
    bridge.apply(info)

    assert bridge.document.text == join_lines(lines)
    assert bridge.lines() == lines
    assert texts == [join_lines(lines)]
    assert cursors == [(2, 19)]


def test_bridge_mirrors_propose_and_reject() -> None:
    lines = ["struct Cat {\n", "    var name\n", "}\n"]
    bridge, texts, cursors = make_bridge(lines)
    injector = SuggestionInjector()
    suggestion = Suggestion(text=CAT_FIELDS, range=CursorRange.from_points(1, 0, 2, 18))

    bridge.apply(injector.propose(lines, suggestion))
    assert bridge.lines() == lines
    assert len(lines) == 7

    bridge.apply(injector.reject(lines, CursorPosition(1, 12)))
    assert bridge.lines() == ["struct Cat {\n", "    var name\n", "}\n"]
    assert len(texts) == 2
    assert cursors == []


def test_bridge_handles_missing_trailing_break() -> None:
    bridge, _, _ = make_bridge(["a\n", "b"])

    bridge.replay([Deleted(1, 1)])
    assert bridge.document.text == "a\n"

    bridge.replay([Inserted(1, ["c\n", "d"])])
    assert bridge.document.text == "a\nc\nd"
