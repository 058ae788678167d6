"""Tests for frame composition and widgets."""

from pathlib import Path

from mim.cli.studio.renderer import Renderer
from mim.cli.widgets.base import Rect, Widget
from mim.cli.widgets.status_bar import StatusBarWidget
from mim.cli.widgets.text_view import TextViewWidget
from mim.core.buffer import TextBuffer
from mim.core.constants import (
    CLEAR_LINE,
    CURSOR_HOME,
    HIDE_CURSOR,
    INVERT_OFF,
    INVERT_ON,
    SHOW_CURSOR,
)
from mim.core.status import StatusLine, StatusMessage
from mim.core.viewport import Viewport


def make_renderer(lines=(), rows: int = 3, cols: int = 40, **cursor) -> Renderer:
    buffer = TextBuffer(lines)
    viewport = Viewport(screenrows=rows, screencols=cols, **cursor)
    return Renderer(buffer, viewport, StatusLine())


class TestRenderer:
    """Tests for Renderer.compose."""

    def test_frame_layout(self) -> None:
        renderer = make_renderer([b"hello"], rows=3, cols=40)
        frame = renderer.compose()
        expected = (
            HIDE_CURSOR + CURSOR_HOME
            + b"hello" + CLEAR_LINE + b"\r\n"
            + b"~" + CLEAR_LINE + b"\r\n"
            + b"~" + CLEAR_LINE + b"\r\n"
            + INVERT_ON + b"[No name] - 1 lines" + b" " * 18 + b"1/1" + INVERT_OFF + b"\r\n"
            + CLEAR_LINE
            + b"\x1b[1;1H" + SHOW_CURSOR
        )
        assert frame == expected

    def test_welcome_only_for_empty_buffer(self) -> None:
        empty = make_renderer([], rows=6).compose()
        assert b"Mim editor -- version" in empty
        assert b"Mim editor" not in make_renderer([b"x"], rows=6).compose()

    def test_tab_cursor_uses_render_column(self) -> None:
        frame = make_renderer([b"\tx"], cx=1).compose()
        assert b"    x" + CLEAR_LINE in frame
        assert frame.endswith(b"\x1b[1;5H" + SHOW_CURSOR)

    def test_horizontal_scroll_slices_render(self) -> None:
        renderer = make_renderer([b"abcdefghij"], rows=2, cols=5, cx=8)
        frame = renderer.compose()
        assert renderer.viewport.coloff == 4
        assert b"efghi" + CLEAR_LINE in frame
        assert frame.endswith(b"\x1b[1;5H" + SHOW_CURSOR)

    def test_vertical_scroll(self) -> None:
        lines = [f"line {i}".encode() for i in range(20)]
        renderer = make_renderer(lines, rows=5, cy=12)
        frame = renderer.compose()
        assert renderer.viewport.rowoff == 8
        assert b"line 8" + CLEAR_LINE in frame
        assert b"line 7" + CLEAR_LINE not in frame
        assert frame.endswith(b"\x1b[5;1H" + SHOW_CURSOR)

    def test_message_bar_shows_fresh_message(self) -> None:
        renderer = make_renderer([b"x"])
        renderer.message_bar.status.set("hello there")
        assert CLEAR_LINE + b"hello there\x1b[" in renderer.compose()

    def test_message_bar_hides_expired_message(self) -> None:
        renderer = make_renderer([b"x"])
        renderer.message_bar.status.message = StatusMessage("stale", 0.0)
        frame = renderer.compose()
        assert b"stale" not in frame
        assert frame.endswith(CLEAR_LINE + b"\x1b[1;1H" + SHOW_CURSOR)


class TestStatusBarWidget:
    """Tests for the status bar."""

    def test_modified_named_file(self) -> None:
        buffer = TextBuffer([b"a", b"b"], filename=Path("notes.txt"))
        buffer.insert_char(0, 0, ord("z"))
        viewport = Viewport(screenrows=5, screencols=40, cy=1)
        bar = StatusBarWidget(buffer, viewport)
        assert bar.left_text() == "notes.txt - 2 lines (modified)"
        assert bar.right_text() == "2/2"

    def test_long_filename_is_cut(self) -> None:
        buffer = TextBuffer(filename=Path("a" * 30 + ".txt"))
        bar = StatusBarWidget(buffer, Viewport(screenrows=5, screencols=80))
        assert bar.left_text() == "a" * 20 + " - 0 lines"

    def test_narrow_terminal_drops_right_text(self) -> None:
        buffer = TextBuffer([b"a"])
        bar = StatusBarWidget(buffer, Viewport(screenrows=5, screencols=10))
        (line,) = bar.render(Rect(0, 0, 10, 1))
        assert line == INVERT_ON + b"[No name] " + INVERT_OFF


class TestTextViewWidget:
    """Tests for the text view."""

    def test_welcome_is_centered(self) -> None:
        view = TextViewWidget(TextBuffer(), Viewport(screenrows=3, screencols=60))
        lines = view.render(Rect(0, 0, 60, 3))
        banner = lines[1]
        assert banner.startswith(b"~ ")
        text = b"Mim editor -- version"
        assert banner.index(text) == (60 - len(b"Mim editor -- version 0.1.0")) // 2

    def test_rows_shorter_than_offset_are_blank(self) -> None:
        viewport = Viewport(screenrows=2, screencols=5, coloff=10)
        view = TextViewWidget(TextBuffer([b"short"]), viewport)
        assert view.render(Rect(0, 0, 5, 2))[0] == CLEAR_LINE

    def test_widgets_satisfy_protocol(self) -> None:
        renderer = Renderer(TextBuffer(), Viewport(screenrows=2, screencols=10), StatusLine())
        for widget in (renderer.text_view, renderer.status_bar, renderer.message_bar):
            assert isinstance(widget, Widget)
