# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime

import pytest

from captain_log.core.errors import ValidationError
from captain_log.tasks.task_models import Deadline, Event, Todo


def test_todo_same_details_ignores_done_flag() -> None:
    a = Todo("read")
    b = Todo("read")
    b.mark()

    assert a.same_details(b)


def test_deadline_different_date_is_not_same() -> None:
    a = Deadline("submit", datetime(2026, 2, 1, 10, 0))
    b = Deadline("submit", datetime(2026, 2, 2, 10, 0))

    assert not a.same_details(b)


def test_event_same_fields_is_same() -> None:
    a = Event("meeting", datetime(2026, 2, 1, 10, 0), datetime(2026, 2, 1, 12, 0))
    b = Event("meeting", datetime(2026, 2, 1, 10, 0), datetime(2026, 2, 1, 12, 0), done=True)

    assert a.same_details(b)


def test_different_types_same_description_are_not_same() -> None:
    todo = Todo("plan")
    deadline = Deadline("plan", datetime(2026, 2, 1, 10, 0))

    assert not todo.same_details(deadline)
    assert not todo.same_details(None)


def test_new_task_starts_not_done_and_toggles() -> None:
    t = Todo("read book")
    assert t.done is False
    t.mark()
    assert t.done is True
    t.unmark()
    assert t.done is False


def test_event_end_must_be_after_start() -> None:
    start = datetime(2026, 1, 30, 16, 0)
    with pytest.raises(ValidationError) as exc:
        Event("meeting", start, datetime(2026, 1, 30, 15, 0))
    assert exc.value.reason == "end must be after start"

    with pytest.raises(ValidationError):
        Event("meeting", start, start)


def test_blank_description_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc:
        Todo("   ")
    assert exc.value.reason == "empty description"


def test_render_formats() -> None:
    d = Deadline("return book", datetime(2026, 1, 30, 14, 0), done=True)
    e = Event("trip", datetime(2026, 3, 1, 8, 0), datetime(2026, 3, 2, 20, 0))

    assert Todo("read").render() == "[T][ ] read"
    assert d.render() == "[D][X] return book (by: Jan 30 2026 14:00)"
    assert e.render() == "[E][ ] trip (from: Mar 01 2026 08:00 to: Mar 02 2026 20:00)"


def test_copy_is_independent() -> None:
    t = Todo("read")
    c = t.copy()
    c.mark()
    assert t.done is False
    assert c == Todo("read", done=True)


@pytest.mark.parametrize("desc", ["a|b", "a | b", "line\nbreak", "carriage\rreturn"])
def test_description_must_be_storable(desc: str) -> None:
    with pytest.raises(ValidationError) as exc:
        Todo(desc)
    assert exc.value.reason == "unencodable description"
