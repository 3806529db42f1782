"""Tests for spans and source locations."""

from plainnote.location import SourceLocation, Span, locate


class TestSpan:
    def test_slice(self) -> None:
        assert Span(6, 11).slice("Hello world") == "world"

    def test_len(self) -> None:
        assert len(Span(3, 3)) == 0
        assert len(Span(2, 9)) == 7

    def test_to(self) -> None:
        assert Span(1, 3).to(Span(5, 8)) == Span(1, 8)


class TestLocate:
    def test_first_character(self) -> None:
        assert locate("abc", 0) == SourceLocation(lineno=1, col_offset=1, offset=0)

    def test_after_newlines(self) -> None:
        loc = locate("ab\ncd\nef", 7)
        assert (loc.lineno, loc.col_offset) == (3, 2)

    def test_offset_at_newline(self) -> None:
        loc = locate("ab\ncd", 2)
        assert (loc.lineno, loc.col_offset) == (1, 3)

    def test_clamped_past_end(self) -> None:
        loc = locate("ab", 10)
        assert loc.offset == 2

    def test_str(self) -> None:
        assert str(locate("a\nb", 2, "notes/n.txt")) == "notes/n.txt:2:1"
        assert str(SourceLocation(4, 2)) == "4:2"
