from __future__ import annotations

import pytest

from vision_editor.buffer import CursorCoordinator, CursorPosition, Document


def make_cursor(
    *lines: str, viewport_height: int = 24, position: tuple[int, int] = (0, 0)
) -> CursorCoordinator:
    document = Document(list(lines), viewport_height=viewport_height)
    return CursorCoordinator(document, position=position)


def make_tall_cursor(count: int = 30, viewport_height: int = 10) -> CursorCoordinator:
    return make_cursor(*["x"] * count, viewport_height=viewport_height)


def test_horizontal_moves_stop_at_line_edges() -> None:
    cursor = make_cursor("ab")

    assert cursor.move_left() is False
    assert cursor.move_right() is True
    assert cursor.move_right() is True
    assert cursor.position == (0, 2)
    assert cursor.move_right() is False


def test_vertical_moves_stop_at_document_edges() -> None:
    cursor = make_cursor("a", "b")

    assert cursor.move_up() is False
    assert cursor.move_down() is True
    assert cursor.move_down() is False
    assert cursor.position == (1, 0)


def test_sticky_column_survives_short_lines() -> None:
    cursor = make_cursor("long line", "ab", "long line", position=(0, 8))

    cursor.move_down()
    assert cursor.position == (1, 2)
    assert cursor.sticky_column == 8

    cursor.move_down()
    assert cursor.position == (2, 8)
    assert cursor.sticky_column is None


def test_horizontal_move_forgets_sticky_column() -> None:
    cursor = make_cursor("long line", "ab", "long line", position=(0, 8))

    cursor.move_down()
    cursor.move_left()
    cursor.move_down()

    assert cursor.position == (2, 1)


def test_moving_down_scrolls_at_bottom_edge() -> None:
    cursor = make_tall_cursor()

    moves = 0
    while cursor.move_down():
        moves += 1

    assert moves == 29
    assert cursor.position == (9, 0)
    assert cursor.document.scroll_offset == 20
    assert cursor.document_position == (29, 0)


def test_moving_up_scrolls_at_top_edge() -> None:
    cursor = make_tall_cursor()
    while cursor.move_down():
        pass

    for _ in range(10):
        assert cursor.move_up() is True

    assert cursor.position == (0, 0)
    assert cursor.document.scroll_offset == 19
    assert cursor.document_position == (19, 0)


def test_screen_row_stays_inside_viewport() -> None:
    cursor = make_tall_cursor(count=50, viewport_height=7)

    for _ in range(40):
        cursor.move_down()
        assert 0 <= cursor.row < 7
    for _ in range(40):
        cursor.move_up()
        assert 0 <= cursor.row < 7


def test_reveal_scrolls_until_row_is_visible() -> None:
    cursor = make_tall_cursor()

    cursor.reveal(12, 0)

    assert cursor.position == (9, 0)
    assert cursor.document.scroll_offset == 3


def test_reveal_clamps_to_document_and_line() -> None:
    cursor = make_cursor("abc", "d")

    cursor.reveal(5, 9)

    assert cursor.position == (1, 1)


def test_home_parks_at_end_of_last_visible_line() -> None:
    assert_home = make_cursor("a", "bb", "ccc")
    assert_home.home()
    assert assert_home.position == (2, 3)

    tall = make_tall_cursor()
    tall.home()
    assert tall.position == (9, 1)


def test_resize_keeps_document_position() -> None:
    cursor = make_tall_cursor()
    cursor.reveal(9, 0)

    cursor.resize(5)

    assert cursor.viewport_height == 5
    assert cursor.position == (4, 0)
    assert cursor.document_position == (9, 0)


def test_tracking_records_one_entry_per_edit() -> None:
    cursor = make_cursor("ab")

    with cursor.tracking():
        cursor.document.insert_char(0, 0, "(")
        cursor.document.insert_char(0, 1, ")")
        cursor.reveal(0, 1)

    expected = CursorPosition(old=(0, 0), new=(0, 1))
    assert cursor.history.done == (expected, expected)
    assert len(cursor.history) == len(cursor.document.history)


def test_tracking_without_edits_records_nothing() -> None:
    cursor = make_cursor("ab")

    with cursor.tracking():
        cursor.move_right()

    assert cursor.history.done == ()


def test_undo_and_redo_restore_positions() -> None:
    cursor = make_cursor("ab")
    with cursor.tracking():
        cursor.document.insert_char(0, 2, "c")
        cursor.reveal(0, 3)

    assert cursor.undo() is True
    assert cursor.position == (0, 0)
    assert cursor.redo() is True
    assert cursor.position == (0, 3)
    assert cursor.redo() is False


def test_restore_compensates_for_scroll_changes() -> None:
    cursor = make_tall_cursor()
    cursor.reveal(15, 0)
    assert cursor.document.scroll_offset == 6
    with cursor.tracking():
        cursor.document.set_line(cursor.row, "edited")
        cursor.reveal(cursor.row, 6)

    for _ in range(6):
        cursor.move_up()
    for _ in range(9):
        cursor.move_up()
    assert cursor.document.scroll_offset == 0

    cursor.undo()

    assert cursor.document_position == (15, 0)


def test_tracking_records_edits_made_before_an_error() -> None:
    cursor = make_cursor("ab")

    with pytest.raises(RuntimeError):
        with cursor.tracking():
            cursor.document.insert_char(0, 0, "x")
            cursor.reveal(0, 1)
            raise RuntimeError("action failed")

    assert cursor.history.done == (CursorPosition(old=(0, 0), new=(0, 1)),)
    assert len(cursor.history) == len(cursor.document.history)
