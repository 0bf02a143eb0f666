from __future__ import annotations

from pathlib import Path

import pytest

from vision_editor.adapters.textual import app
from vision_editor.adapters.textual.controller import EditorView
from vision_editor.buffer import DocumentMirror
from vision_editor.config import EditorConfig
from vision_editor.modes import Mode


def make_view(*lines: str, cursor: tuple[int, int] = (0, 0)) -> EditorView:
    mirror = DocumentMirror(
        text="\n".join(lines), scroll_offset=0, line_count=len(lines), modified=False
    )
    return EditorView(
        mirror=mirror,
        cursor=cursor,
        mode=Mode.NORMAL,
        mode_label="-=NORMAL MODE=-",
        mode_color="green",
    )


def test_load_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("alpha\nbeta\n", encoding="utf-8")

    document = app.load_document(str(target), EditorConfig())

    assert document.lines == ("alpha", "beta")
    assert document.path == target
    assert document.modified is False


def test_load_missing_file_keeps_path(tmp_path: Path) -> None:
    target = tmp_path / "fresh.txt"

    document = app.load_document(str(target), EditorConfig())

    assert document.lines == ("",)
    assert document.path == target


def test_load_without_path() -> None:
    document = app.load_document(None, EditorConfig(history_limit=3))

    assert document.path is None
    assert document.history.limit == 3


def test_unreadable_file_exits_with_status_one(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    target = tmp_path / "binary.txt"
    target.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(SystemExit) as excinfo:
        app.main([str(target)])

    assert excinfo.value.code == 1
    assert "cannot open" in capsys.readouterr().err


def test_parse_args_path_is_optional() -> None:
    assert app._parse_args([]).path is None
    assert app._parse_args(["file.txt"]).path == "file.txt"


@pytest.mark.parametrize(
    ("key", "character", "expected"),
    [
        ("escape", None, ("ESC", None, ())),
        ("enter", "\r", ("ENTER", None, ())),
        ("backspace", None, ("BACKSPACE", None, ())),
        ("tab", "\t", ("TAB", None, ())),
        ("up", None, ("UP", None, ())),
        ("ctrl+r", None, ("r", None, ("CTRL",))),
        ("a", "a", ("a", "a", ())),
        ("colon", ":", (":", ":", ())),
        ("f1", None, None),
    ],
)
def test_normalize_key(key: str, character: str | None, expected: object) -> None:
    assert app.normalize_key(key, character) == expected


def test_render_buffer_highlights_cursor_cell() -> None:
    text = app.render_buffer(make_view("abc", "de", cursor=(1, 2)))

    assert text.plain == "abc\nde "
    assert any(span.style == "reverse" and span.start == 6 for span in text.spans)


def test_render_status_marks_modified_documents() -> None:
    view = make_view("abc")
    view.mirror = DocumentMirror(
        text="abc", scroll_offset=0, line_count=1, modified=True, path="a.txt"
    )

    status = app.render_status(view)

    assert status.plain == "-=NORMAL MODE=-  a.txt [+]"
