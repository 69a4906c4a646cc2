# tests/test_task_file.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from captain_log.core.command_parser import parse
from captain_log.core.errors import PersistenceError
from captain_log.tasks.task_file import TaskFile
from captain_log.tasks.task_models import Deadline, Event, Todo


def _sample_tasks():
    done = Todo("read book")
    done.mark()
    return [
        done,
        Deadline("return book", datetime(2026, 1, 30, 14, 0)),
        Event("meeting", datetime(2026, 1, 30, 14, 0), datetime(2026, 1, 30, 16, 0)),
    ]


def test_missing_file_is_first_run(tmp_path: Path) -> None:
    store = TaskFile(tmp_path / "nope.txt")
    result = store.load()

    assert store.exists() is False
    assert result.first_run is True
    assert result.tasks == []


def test_save_then_load_keeps_tasks(tmp_path: Path) -> None:
    path = tmp_path / "data" / "tasks.txt"
    store = TaskFile(path)
    tasks = _sample_tasks()

    store.save(tasks)
    result = store.load()

    assert store.exists() is True
    assert result.first_run is False
    assert result.tasks == tasks
    assert not path.with_name("tasks.txt.tmp").exists()


def test_saved_lines_use_pipe_format(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    TaskFile(path).save(_sample_tasks())

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == [
        "T | 1 | read book",
        "D | 0 | return book | 2026-01-30 1400",
        "E | 0 | meeting | 2026-01-30 1400 | 2026-01-30 1600",
    ]


def test_save_is_deterministic(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    store = TaskFile(path)
    store.save(_sample_tasks())
    first = path.read_bytes()
    store.save(store.load().tasks)

    assert path.read_bytes() == first


def test_blank_lines_and_loose_spacing_are_accepted(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("\nT|0|read\n   \nD  |  1 | pay | 2026-02-01 0900\n", encoding="utf-8")

    tasks = TaskFile(path).load().tasks
    assert [t.render() for t in tasks] == [
        "[T][ ] read",
        "[D][X] pay (by: Feb 01 2026 09:00)",
    ]


@pytest.mark.parametrize(
    ("line", "reason"),
    [
        ("T | 9 | read book", "bad done flag"),
        ("X | 0 | read book", "unknown type"),
        ("D | 0 | return book", "corrupted line"),
        ("T | 0", "corrupted line"),
        ("T | 0 | read | extra", "corrupted line"),
        ("D | 0 | return book | 30/01/2026", "corrupted date/time"),
        ("E | 0 | trip | 2026-01-30 1600 | 2026-01-30 1400", "corrupted line"),
        ("T | 0 |  ", "corrupted line"),
    ],
)
def test_bad_line_aborts_load(tmp_path: Path, line: str, reason: str) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T | 0 | fine\n" + line + "\n", encoding="utf-8")

    with pytest.raises(PersistenceError) as exc:
        TaskFile(path).load()
    assert exc.value.reason == reason


def test_unencodable_description_leaves_file_untouched(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    store = TaskFile(path)
    store.save([Todo("keep me")])
    before = path.read_bytes()

    # Tasks refuse "|" on construction; this one was edited in place afterwards.
    edited = Todo("a b")
    edited.description = "a | b"

    with pytest.raises(PersistenceError) as exc:
        store.save([Todo("fine"), edited])
    assert exc.value.reason == "unencodable description"
    assert path.read_bytes() == before


def test_write_failure_raises_persistence_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = TaskFile(blocker / "tasks.txt")

    with pytest.raises(PersistenceError) as exc:
        store.save([Todo("read")])
    assert exc.value.reason == "write failed"


def test_unreadable_bytes_raise_read_failed(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T | 0 | \xff\xfe\n")

    with pytest.raises(PersistenceError) as exc:
        TaskFile(path).load()
    assert exc.value.reason == "read failed"


def test_parsed_tasks_survive_encode_and_decode() -> None:
    store = TaskFile("unused.txt")
    d = parse("deadline return book /by 2026-01-30 1400")
    e = parse("event meeting /from 2026-01-30 1400 /to 2026-01-30 1600")

    deadline = Deadline(d.description, d.due_at, done=True)
    event = Event(e.description, e.start_at, e.end_at)

    assert store.decode_line(store.encode_line(deadline)) == deadline
    assert store.decode_line(store.encode_line(event)) == event


@pytest.mark.parametrize(
    "desc",
    [
        "read\x85book",
        "read\u2028book",
        "read\u2029book",
        "read\x0bbook",
        "read\x0cbook",
        "read\x1cbook",
        "read\x1ebook",
        "read \t  book",
        "café ☠ ahoy",
    ],
)
def test_unusual_descriptions_survive_save_and_load(tmp_path: Path, desc: str) -> None:
    path = tmp_path / "tasks.txt"
    cmd = parse(f"todo {desc}")
    task = Todo(cmd.description)

    TaskFile(path).save([task, Todo("after")])
    loaded = TaskFile(path).load().tasks

    assert [t.description for t in loaded] == [desc, "after"]


def test_crlf_and_cr_line_endings_are_accepted(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T | 0 | one\r\nT | 1 | two\rT | 0 | three\n")

    tasks = TaskFile(path).load().tasks
    assert [(t.description, t.done) for t in tasks] == [("one", False), ("two", True), ("three", False)]


def test_failed_replace_removes_temp_file(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "tasks.txt"

    def refuse(src, dst):
        raise OSError("read-only target")

    monkeypatch.setattr("captain_log.tasks.task_file.os.replace", refuse)

    with pytest.raises(PersistenceError) as exc:
        TaskFile(path).save([Todo("read")])
    assert exc.value.reason == "write failed"
    assert not path.with_name("tasks.txt.tmp").exists()
    assert not path.exists()
