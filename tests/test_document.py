from __future__ import annotations

from pathlib import Path

import pytest

from vision_editor.buffer import (
    Action,
    CharDelete,
    CharInsert,
    Document,
    History,
    LineDelete,
    LineInsert,
    LineReplace,
)
from vision_editor.errors import DocumentWriteError, MissingPathError


def make_document(*lines: str, viewport_height: int = 24, **kwargs) -> Document:
    return Document(list(lines), viewport_height=viewport_height, **kwargs)


def test_empty_document_has_one_empty_line() -> None:
    document = Document()

    assert document.lines == ("",)
    assert document.length == 1
    assert document.modified is False
    assert document.path is None


def test_from_text_splits_lines() -> None:
    document = Document.from_text("one\ntwo\n")

    assert document.lines == ("one", "two")


def test_get_line_and_get_char_bounds() -> None:
    document = make_document("abc")

    assert document.get_line(0) == "abc"
    assert document.get_line(1) is None
    assert document.get_line(-1) is None
    assert document.get_char(0, 2) == "c"
    assert document.get_char(0, 3) is None
    assert document.get_char(5, 0) is None


def test_insert_char_records_and_marks_modified() -> None:
    document = make_document("ac")

    document.insert_char(0, 1, "b")

    assert document.lines == ("abc",)
    assert document.modified is True
    assert document.history.done == (CharInsert(0, 1, "b"),)
    assert document.edit_count == 1


def test_insert_char_clamps_column_to_line_end() -> None:
    document = make_document("ab")

    document.insert_char(0, 10, "c")

    assert document.lines == ("abc",)
    assert document.history.done == (CharInsert(0, 2, "c"),)


def test_out_of_range_edits_are_ignored() -> None:
    document = make_document("ab")

    document.insert_char(3, 0, "x")
    document.delete_char(0, 5)
    document.set_line(4, "nope")
    document.delete_line(2)

    assert document.lines == ("ab",)
    assert document.modified is False
    assert document.history.done == ()


def test_delete_line_keeps_last_line() -> None:
    document = make_document("only")

    document.delete_line(0)

    assert document.lines == ("only",)
    assert document.history.done == ()


def test_line_operations_record_their_inverse_data() -> None:
    document = make_document("a", "b")

    document.set_line(0, "A")
    document.insert_line(1, "mid")
    document.delete_line(2)

    assert document.lines == ("A", "mid")
    assert document.history.done == (
        LineReplace(0, "a", "A"),
        LineInsert(1, "mid"),
        LineDelete(2, "b"),
    )


def test_undo_restores_previous_content() -> None:
    document = make_document("hello")
    document.delete_char(0, 0)
    document.insert_line(1, "world")

    assert document.undo() is True
    assert document.lines == ("ello",)
    assert document.undo() is True
    assert document.lines == ("hello",)
    assert document.undo() is False
    assert document.history.undone == (LineInsert(1, "world"), CharDelete(0, 0, "h"))


def test_redo_reapplies_undone_edits() -> None:
    document = make_document("ab")
    document.set_line(0, "xy")
    document.undo()

    assert document.redo() is True
    assert document.lines == ("xy",)
    assert document.redo() is False


def test_undo_then_redo_is_identity_for_every_record() -> None:
    document = make_document("one", "two")
    document.insert_char(0, 3, "!")
    document.delete_char(1, 0)
    document.set_line(0, "ONE!")
    document.insert_line(2, "three")
    document.delete_line(0)
    after = document.lines

    while document.undo():
        pass
    assert document.lines == ("one", "two")

    while document.redo():
        pass
    assert document.lines == after


def test_new_edit_after_undo_clears_redo() -> None:
    document = make_document("a")
    document.insert_char(0, 1, "b")
    document.undo()

    document.insert_char(0, 1, "c")

    assert document.redo() is False
    assert document.lines == ("ac",)


def test_stale_redo_replays_when_clearing_disabled() -> None:
    document = make_document("a", history=History(clear_redo_on_edit=False))
    document.insert_line(1, "b")
    document.undo()
    document.insert_char(0, 1, "c")

    assert document.redo() is True
    assert document.lines == ("ac", "b")


def test_replayed_noop_still_moves_history() -> None:
    document = make_document("a")
    document.history.update(CharDelete(5, 0, "x"), Action.DO)

    assert document.undo() is True
    assert document.history.done == ()
    assert document.history.undone == (CharDelete(5, 0, "x"),)


def test_edits_store_absolute_rows_while_scrolled() -> None:
    document = make_document(*[str(i) for i in range(10)], viewport_height=3)
    assert document.move_down(2) is True
    assert document.move_down(2) is True

    document.set_line(0, "two")

    assert document.scroll_offset == 2
    assert document.history.done == (LineReplace(2, "2", "two"),)

    assert document.move_up() is True
    document.undo()
    assert document.lines[2] == "2"


def test_scrolling_stops_at_document_edges() -> None:
    document = make_document("a", "b", "c", viewport_height=2)

    assert document.move_up() is False
    assert document.move_down(1) is True
    assert document.scroll_offset == 1
    assert document.move_down(1) is False
    assert document.visible_lines() == ("b", "c")


def test_render_shows_only_the_viewport() -> None:
    document = make_document("a", "b", "c", viewport_height=2)

    assert document.render() == "a\nb"


def test_to_text_terminates_every_line() -> None:
    document = make_document("a", "", "b")

    assert document.to_text() == "a\n\nb\n"


def test_write_then_open_round_trips(tmp_path: Path) -> None:
    target = tmp_path / "note.txt"
    document = make_document("first", "", "third", path=target)

    document.write()
    reopened = Document.open(target)

    assert target.read_text(encoding="utf-8") == "first\n\nthird\n"
    assert reopened.lines == document.lines
    assert reopened.path == target
    assert list(tmp_path.iterdir()) == [target]


def test_write_without_path_raises() -> None:
    with pytest.raises(MissingPathError, match="Path is empty"):
        make_document("a").write()


def test_write_failure_is_wrapped(tmp_path: Path) -> None:
    document = make_document("a", path=tmp_path / "missing" / "file.txt")

    with pytest.raises(DocumentWriteError) as excinfo:
        document.write()

    assert isinstance(excinfo.value.cause, OSError)


def test_open_missing_file_keeps_path(tmp_path: Path) -> None:
    target = tmp_path / "new.txt"

    document = Document.open(target)

    assert document.lines == ("",)
    assert document.path == target
    assert not target.exists()


def test_open_without_path_is_empty() -> None:
    document = Document.open(None)

    assert document.lines == ("",)
    assert document.path is None


def test_mirror_snapshots_visible_state(tmp_path: Path) -> None:
    document = make_document("a", "b", "c", viewport_height=2, path=tmp_path / "x")
    document.insert_char(0, 0, ">")

    mirror = document.mirror()

    assert mirror.text == ">a\nb"
    assert mirror.line_count == 3
    assert mirror.modified is True
    assert mirror.path == str(tmp_path / "x")


def test_insert_then_delete_line_is_identity() -> None:
    document = make_document("a", "b", "c")

    for row in range(4):
        document.insert_line(row, "new")
        document.delete_line(row)
        assert document.lines == ("a", "b", "c")


def test_undo_restores_line_after_mixed_char_edits() -> None:
    document = make_document("editor")
    for col, char in ((0, ">"), (3, "-"), (8, "!")):
        document.insert_char(0, col, char)
    document.delete_char(0, 1)
    document.delete_char(0, 0)

    while document.undo():
        pass

    assert document.lines == ("editor",)
