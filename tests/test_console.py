# tests/test_console.py
from flappy_console.console import CellBuffer, DEFAULT_BG
from flappy_console.constants import BLACK, WHITE


def test_set_outside_grid_is_ignored():
    buf = CellBuffer(10, 5)
    buf.set(10, 0, (1, 2, 3), (0, 0, 0), "x")
    buf.set(-1, 2, (1, 2, 3), (0, 0, 0), "x")
    buf.set(3, 5, (1, 2, 3), (0, 0, 0), "x")
    assert buf.positions_of("x") == {}


def test_print_clips_at_right_edge():
    buf = CellBuffer(10, 3)
    buf.print(6, 1, "abcdef")
    assert buf.row_text(1) == "      abcd"


def test_print_centered():
    buf = CellBuffer(20, 3)
    buf.print_centered(2, "abcd")
    assert buf.row_text(2) == "        abcd        "


def test_print_keeps_background():
    buf = CellBuffer(10, 2)
    buf.cls_bg((0, 0, 128))
    buf.print(0, 0, "hi")
    assert buf.cell(0, 0).bg == (0, 0, 128)


def test_cls_blanks_cells_and_resets_background():
    buf = CellBuffer(4, 2)
    buf.cls_bg((9, 9, 9))
    buf.set(1, 1, (1, 1, 1), (2, 2, 2), "@")
    buf.cls()
    assert buf.glyph_at(1, 1) is None
    assert buf.cell(1, 1).bg == DEFAULT_BG
    assert [buf.row_text(y) for y in range(2)] == ["    ", "    "]


def test_quitting_starts_false():
    assert CellBuffer(1, 1).quitting is False


def test_default_colours_come_from_palette():
    cell = CellBuffer(1, 1).cell(0, 0)
    assert cell.fg == WHITE
    assert cell.bg == BLACK
