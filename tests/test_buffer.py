import pytest

from atuin.buffer import Buffer, Cell
from atuin.layout import Rect
from atuin.style import EMPTY, Color, Modifier, Style


def cell(symbol):
    return Cell().set_symbol(symbol)


def test_translates_to_and_from_coordinates():
    buf = Buffer.empty(Rect(200, 100, 50, 80))
    assert buf.pos_of(0) == (200, 100)
    assert buf.index_of(200, 100) == 0
    assert buf.pos_of(len(buf.content) - 1) == (249, 179)
    assert buf.index_of(249, 179) == len(buf.content) - 1


def test_index_and_pos_examples():
    buf = Buffer.empty(Rect(200, 100, 10, 10))
    assert buf.index_of(200, 100) == 0
    assert buf.pos_of(14) == (204, 101)


def test_pos_of_out_of_bounds():
    buf = Buffer.empty(Rect(0, 0, 10, 10))
    with pytest.raises(IndexError, match="outside the buffer"):
        buf.pos_of(100)


def test_index_of_out_of_bounds():
    buf = Buffer.empty(Rect(0, 0, 10, 10))
    with pytest.raises(IndexError, match="outside the buffer"):
        buf.index_of(10, 0)
    with pytest.raises(IndexError):
        Buffer.empty(Rect(200, 100, 10, 10)).index_of(0, 0)


def test_get_and_modify_cells():
    buf = Buffer.empty(Rect(0, 0, 10, 5))
    buf.get(0, 2).set_symbol("x")
    assert buf.get(0, 2).symbol == "x"
    buf.set_string(3, 0, "string", Style().with_fg(Color.RED).with_bg(Color.WHITE))
    assert buf.get(5, 0) == Cell("r", Color.RED, Color.WHITE, EMPTY)
    buf.get(5, 0).set_symbol("x")
    assert buf.get(5, 0).symbol == "x"


def test_buffer_set_string():
    buffer = Buffer.empty(Rect(0, 0, 5, 1))

    buffer.set_stringn(0, 0, "aaa", 0, Style())
    assert buffer == Buffer.with_lines(["     "])

    buffer.set_string(0, 0, "aaa", Style())
    assert buffer == Buffer.with_lines(["aaa  "])

    buffer.set_stringn(0, 0, "bbbbbbbbbbbbbb", 4, Style())
    assert buffer == Buffer.with_lines(["bbbb "])

    buffer.set_string(0, 0, "12345", Style())
    assert buffer == Buffer.with_lines(["12345"])

    buffer.set_string(0, 0, "123456", Style())
    assert buffer == Buffer.with_lines(["12345"])


def test_set_stringn_returns_end_position():
    buffer = Buffer.empty(Rect(0, 0, 5, 2))
    assert buffer.set_stringn(1, 1, "abc", 10, Style()) == (4, 1)


def test_buffer_set_string_zero_width():
    buffer = Buffer.empty(Rect(0, 0, 1, 1))
    buffer.set_stringn(0, 0, "\x01a", 1, Style())
    assert buffer == Buffer.with_lines(["a"])
    buffer.set_stringn(0, 0, "a\x01", 1, Style())
    assert buffer == Buffer.with_lines(["a"])


def test_buffer_set_string_double_width():
    buffer = Buffer.empty(Rect(0, 0, 5, 1))
    buffer.set_string(0, 0, "コン", Style())
    assert buffer == Buffer.with_lines(["コン "])
    buffer.set_string(0, 0, "コンピ", Style())
    assert buffer == Buffer.with_lines(["コン "])


def test_buffer_with_lines():
    buffer = Buffer.with_lines(["┌────────┐", "│コンピュ│", "│ーa 上で│", "└────────┘"])
    assert buffer.area == Rect(0, 0, 10, 4)


def test_buffer_diffing_empty_empty():
    area = Rect(0, 0, 40, 40)
    assert Buffer.empty(area).diff(Buffer.empty(area)) == []


def test_buffer_diffing_empty_filled():
    area = Rect(0, 0, 40, 40)
    diff = Buffer.empty(area).diff(Buffer.filled(area, cell("a")))
    assert len(diff) == 40 * 40


def test_buffer_diffing_filled_filled():
    area = Rect(0, 0, 40, 40)
    prev = Buffer.filled(area, cell("a"))
    nxt = Buffer.filled(area, cell("a"))
    assert prev.diff(nxt) == []


def test_buffer_diffing_single_width():
    prev = Buffer.with_lines(
        ["          ", "┌Title─┐  ", "│      │  ", "│      │  ", "└──────┘  "]
    )
    nxt = Buffer.with_lines(
        ["          ", "┌TITLE─┐  ", "│      │  ", "│      │  ", "└──────┘  "]
    )
    assert prev.diff(nxt) == [
        (2, 1, cell("I")),
        (3, 1, cell("T")),
        (4, 1, cell("L")),
        (5, 1, cell("E")),
    ]


def test_buffer_diffing_multi_width():
    prev = Buffer.with_lines(["┌Title─┐  ", "└──────┘  "])
    nxt = Buffer.with_lines(["┌称号──┐  ", "└──────┘  "])
    assert prev.diff(nxt) == [
        (1, 0, cell("称")),
        (3, 0, cell("号")),
        (5, 0, cell("─")),
    ]


def test_buffer_diffing_multi_width_offset():
    prev = Buffer.with_lines(["┌称号──┐"])
    nxt = Buffer.with_lines(["┌─称号─┐"])
    assert prev.diff(nxt) == [
        (1, 0, cell("─")),
        (2, 0, cell("称")),
        (4, 0, cell("号")),
    ]


def test_buffer_merge():
    one = Buffer.filled(Rect(0, 0, 2, 2), cell("1"))
    two = Buffer.filled(Rect(0, 2, 2, 2), cell("2"))
    one.merge(two)
    assert one == Buffer.with_lines(["11", "11", "22", "22"])


def test_buffer_merge2():
    one = Buffer.filled(Rect(2, 2, 2, 2), cell("1"))
    two = Buffer.filled(Rect(0, 0, 2, 2), cell("2"))
    one.merge(two)
    assert one == Buffer.with_lines(["22  ", "22  ", "  11", "  11"])


def test_buffer_merge3():
    one = Buffer.filled(Rect(3, 3, 2, 2), cell("1"))
    two = Buffer.filled(Rect(1, 1, 3, 4), cell("2"))
    one.merge(two)
    merged = Buffer.with_lines(["222 ", "222 ", "2221", "2221"])
    merged.area = Rect(1, 1, 4, 4)
    assert one == merged


def test_cell_styles_accumulate():
    buffer = Buffer.empty(Rect(0, 0, 1, 1))
    styles = [
        Style().with_fg(Color.BLUE).with_modifier(Modifier.BOLD | Modifier.ITALIC),
        Style().with_bg(Color.RED),
        Style().with_fg(Color.YELLOW).without_modifier(Modifier.ITALIC),
    ]
    for style in styles:
        buffer.get(0, 0).set_style(style)
    assert buffer.get(0, 0).style() == Style(
        fg=Color.YELLOW, bg=Color.RED, add_modifier=Modifier.BOLD, sub_modifier=EMPTY
    )


def test_cell_reset_style():
    buffer = Buffer.empty(Rect(0, 0, 1, 1))
    buffer.get(0, 0).set_style(
        Style().with_fg(Color.BLUE).with_modifier(Modifier.BOLD | Modifier.ITALIC)
    )
    buffer.get(0, 0).set_style(Style.reset().with_fg(Color.YELLOW))
    assert buffer.get(0, 0).style() == Style(
        fg=Color.YELLOW, bg=Color.RESET, add_modifier=EMPTY, sub_modifier=EMPTY
    )


def test_cell_reset():
    c = Cell("x", Color.RED, Color.BLUE, Modifier.BOLD)
    c.reset()
    assert c == Cell()


def test_set_style_on_area():
    buffer = Buffer.empty(Rect(0, 0, 3, 3))
    buffer.set_style(Rect(1, 1, 2, 2), Style().with_fg(Color.GREEN))
    assert buffer.get(1, 1).fg == Color.GREEN
    assert buffer.get(2, 2).fg == Color.GREEN
    assert buffer.get(0, 0).fg == Color.RESET
    assert buffer.get(2, 0).fg == Color.RESET


def test_resize_grows_and_shrinks():
    buffer = Buffer.filled(Rect(0, 0, 2, 2), cell("a"))
    buffer.resize(Rect(0, 0, 3, 2))
    assert len(buffer.content) == 6
    assert buffer.content[5] == Cell()
    assert buffer.content[0].symbol == "a"
    buffer.resize(Rect(0, 0, 1, 1))
    assert buffer.content == [cell("a")]
    assert buffer.area == Rect(0, 0, 1, 1)


def test_reset_blanks_all_cells():
    buffer = Buffer.with_lines(["ab", "cd"])
    buffer.reset()
    assert buffer == Buffer.with_lines(["  ", "  "])


def test_filled_cells_are_independent():
    buffer = Buffer.filled(Rect(0, 0, 2, 1), cell("a"))
    buffer.get(0, 0).set_symbol("b")
    assert buffer.get(1, 0).symbol == "a"