"""Tests for the high-level plainnote API."""

import pytest


class TestScenarios:
    """End-to-end compile of representative notes."""

    def test_inline_code(self) -> None:
        from plainnote import Mono, Paragraph, Span, Text, compile_note, parse

        source = "Hello `world`"
        doc = parse(source)
        assert doc.children == (Paragraph(children=(Text(Span(0, 6)), Mono(Span(7, 12)))),)
        assert doc.children[0].children[0].span.slice(source) == "Hello "
        assert compile_note(source) == '<p>Hello  <span class="mono">world</span> </p>'

    def test_link(self) -> None:
        from plainnote import Link, parse, render

        source = "[Home](index.html)"
        doc = parse(source)
        (link,) = doc.children[0].children
        assert isinstance(link, Link)
        assert link.title.slice(source) == "Home"
        assert link.href.slice(source) == "index.html"
        assert render(doc, source=source) == '<p><a href="index.html">Home</a> </p>'

    def test_unterminated(self) -> None:
        from plainnote import UnterminatedCodeError, compile_note

        with pytest.raises(UnterminatedCodeError):
            compile_note("`oops")

    def test_two_paragraphs(self) -> None:
        from plainnote import Text, parse

        source = "A\n\nB"
        doc = parse(source)
        assert len(doc.children) == 2
        texts = [p.children[0] for p in doc.children]
        assert all(isinstance(t, Text) for t in texts)
        assert [t.span.slice(source) for t in texts] == ["A", "B"]

    def test_fenced_code(self) -> None:
        from plainnote import BlockMono, compile_note, parse

        source = "```code\nline```"
        (block,) = parse(source).children[0].children
        assert isinstance(block, BlockMono)
        assert compile_note(source) == "<p><pre>code\nline</pre> </p>"

    def test_empty(self) -> None:
        from plainnote import Lexer, compile_note, parse

        assert list(Lexer("").tokenize()) == []
        assert parse("").children == ()
        assert compile_note("") == ""


class TestNotesClass:
    """Tests for the Notes class."""

    def test_basic_usage(self) -> None:
        from plainnote import Notes

        notes = Notes()
        assert notes("plain") == "<p>plain </p>"

    def test_parse_and_render(self) -> None:
        from plainnote import Document, Notes

        notes = Notes()
        source = "`x`"
        doc = notes.parse(source)
        assert isinstance(doc, Document)
        assert notes.render(doc, source=source) == '<p><span class="mono">x</span> </p>'

    def test_config_applies(self) -> None:
        from plainnote import NoteConfig, Notes

        notes = Notes(config=NoteConfig(escape_html=True))
        assert notes("1 < 2") == "<p>1 &lt; 2 </p>"
        assert notes.config.escape_html is True

    def test_compile_many(self) -> None:
        from plainnote import Notes

        assert Notes().compile_many(["a", "b\n\nc"]) == ["<p>a </p>", "<p>b </p><p>c </p>"]

    def test_compile_many_aborts_on_error(self) -> None:
        from plainnote import Notes, ParseError

        with pytest.raises(ParseError):
            Notes().compile_many(["fine", "`broken"])

    def test_source_file_in_error(self) -> None:
        from plainnote import Notes, ParseError

        with pytest.raises(ParseError) as exc_info:
            Notes()("[x", source_file="notes/x.txt")
        assert exc_info.value.source_file == "notes/x.txt"


class TestPublicSurface:
    """Everything in __all__ is importable."""

    def test_all_exports(self) -> None:
        import plainnote

        for name in plainnote.__all__:
            assert hasattr(plainnote, name), name

    def test_version(self) -> None:
        import plainnote

        assert plainnote.__version__.count(".") == 2
