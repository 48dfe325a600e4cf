from __future__ import annotations

import pytest

from suggestion_engine.buffer import (
    CursorPosition,
    CursorRange,
    apply_modifications,
    split_editor_lines,
)
from suggestion_engine.runtime import telemetry
from suggestion_engine.suggestions import Suggestion, SuggestionInjector

CAT_FIELDS = "    var name: String\n    var age: String"


@pytest.mark.parametrize(
    ("content", "points"),
    [
        ("struct Cat {\n\n}\n", (1, 0, 1, 0)),
        ("struct Cat {\n    var name\n}\n", (1, 0, 1, 12)),
        ("struct Cat {\n    var name: Str\n}\n", (1, 0, 1, 12)),
        ("struct Cat {\n    var na }\n}\n", (1, 0, 1, 10)),
        ("struct Cat {\n    var name\n}\n", (1, 4, 2, 0)),
        ("struct Cat {\n}\n", (-3, 0, 40, 2)),
        ("struct Cat {\n}\n", (9, 0, 9, 0)),
    ],
)
def test_accept_modifications_replay_to_the_same_buffer(content, points) -> None:
    lines = split_editor_lines(content)
    original = list(lines)
    suggestion = Suggestion(text=CAT_FIELDS, range=CursorRange.from_points(*points))

    info = SuggestionInjector().accept(lines, CursorPosition(0, 0), suggestion)

    assert apply_modifications(original, info.modifications) == lines


def test_propose_reject_accept_lifecycle() -> None:
    injector = SuggestionInjector()
    lines = split_editor_lines("struct Cat {\n    var name\n}")
    original = list(lines)
    suggestion = Suggestion(
        text=CAT_FIELDS,
        range=CursorRange.from_points(1, 0, 1, 12),
        display_index=0,
        total_count=2,
    )
    cursor = CursorPosition(1, 12)

    proposed = injector.propose(lines, suggestion)
    assert proposed.annotation_range == CursorRange.from_points(2, 0, 5, 38)
    assert lines[2].endswith(" 1/2\n")

    rejected = injector.reject(lines, cursor)
    assert lines == original
    assert rejected.cursor == cursor

    accepted = injector.accept(lines, rejected.cursor, suggestion)
    assert "".join(lines) == "struct Cat {\n" + CAT_FIELDS + "\n}\n"
    assert accepted.cursor == CursorPosition(2, 19)


def test_injector_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUGGESTION_ENGINE_ANNOTATION_START", "# >>>")
    monkeypatch.setenv("SUGGESTION_ENGINE_ANNOTATION_END", "# <<<")

    injector = SuggestionInjector.from_env()
    lines = ["a\n", "# >>> 1/1\n", "b\n", "# <<<\n"]

    injector.reject(lines, CursorPosition(0, 0))

    assert lines == ["a\n"]
    assert injector.annotator.config is injector.accepter.config


def test_telemetry_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="nope")
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_components_log_under_their_own_logger(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = []

    def fake_record_event(name, *, level="info", data=None, logger_name=None):
        seen.append((name, logger_name))

    monkeypatch.setattr(telemetry, "record_event", fake_record_event)
    injector = SuggestionInjector()

    injector.reject(["a\n"], CursorPosition(0, 0))
    lines = ["struct Cat {\n", "    var na }\n", "}\n"]
    suggestion = Suggestion(
        text="    var name: String", range=CursorRange.from_points(1, 0, 1, 10)
    )
    injector.accept(lines, CursorPosition(1, 10), suggestion)

    assert lines[1] == "    var name: String }\n"
    assert seen == [
        ("suggestion.reject.noop", "suggestion_engine.annotator"),
        ("suggestion.accept.suffix_recovered", "suggestion_engine.accepter"),
    ]
