"""Tests for the recursive descent Parser."""

from __future__ import annotations

import pytest

from plainnote.errors import UnexpectedTokenError
from plainnote.location import Span
from plainnote.nodes import BlockMono, Document, Link, Mono, Paragraph, Text
from plainnote.parser import Parser


def parse(source: str) -> Document:
    return Parser(source).parse()


def elements(source: str) -> list[tuple]:
    """Paragraph children of ``source`` as tuples of node types."""
    return [p.children for p in parse(source).children]


class TestInlineElements:
    """Each inline element in isolation."""

    def test_link(self) -> None:
        assert elements("[a link](here)") == [
            (Link(title=Span(1, 7), href=Span(9, 13)),),
        ]

    def test_mono(self) -> None:
        assert elements("`Some monospace text`") == [(Mono(Span(1, 20)),)]

    def test_block_mono(self) -> None:
        assert elements("```This is some block mono```") == [(BlockMono(Span(3, 26)),)]

    def test_mono_may_span_lines(self) -> None:
        assert elements("`a\nb`") == [(Mono(Span(1, 4)),)]

    def test_block_mono_keeps_single_backticks(self) -> None:
        assert elements("```a `b` c```") == [(BlockMono(Span(3, 10)),)]

    def test_mono_keeps_triple_backticks(self) -> None:
        assert elements("`a ``` b`") == [(Mono(Span(1, 8)),)]

    def test_fenced_code_over_several_lines(self) -> None:
        source = "```code\nline```"
        assert elements(source) == [(BlockMono(Span(3, 12)),)]


class TestTextRuns:
    """Text runs absorb everything up to a code opener, '[' or newline."""

    def test_stray_closers_inside_text(self) -> None:
        assert elements("a ] b ( c ) d") == [(Text(Span(0, 13)),)]

    def test_double_backticks_are_prose(self) -> None:
        assert elements("a``b") == [(Text(Span(0, 4)),)]

    def test_text_stops_at_link(self) -> None:
        assert elements("a (b) [x](y)") == [
            (Text(Span(0, 6)), Link(title=Span(7, 8), href=Span(10, 11))),
        ]

    def test_paragraph_with_every_kind(self) -> None:
        source = "This is a `paragraph` with [a link](here)"
        assert elements(source) == [
            (
                Text(Span(0, 10)),
                Mono(Span(11, 20)),
                Text(Span(21, 27)),
                Link(title=Span(28, 34), href=Span(36, 40)),
            )
        ]


class TestParagraphs:
    """Blank lines split paragraphs; single newlines join lines."""

    def test_empty_source(self) -> None:
        assert parse("") == Document(children=())

    def test_two_paragraphs(self) -> None:
        assert parse("This is a note\n\nwith a couple of lines") == Document(
            children=(
                Paragraph(children=(Text(Span(0, 14)),)),
                Paragraph(children=(Text(Span(16, 38)),)),
            )
        )

    def test_single_newline_continues_paragraph(self) -> None:
        assert elements("A\nB") == [(Text(Span(0, 1)), Text(Span(2, 3)))]

    def test_blank_line_split(self) -> None:
        assert elements("A\n\nB") == [(Text(Span(0, 1)),), (Text(Span(3, 4)),)]

    def test_three_newlines_drop_the_extra_one(self) -> None:
        assert elements("A\n\n\nB") == [(Text(Span(0, 1)),), (Text(Span(4, 5)),)]

    def test_many_newlines_never_make_empty_paragraphs(self) -> None:
        assert elements("A\n\n\n\nB") == [(Text(Span(0, 1)),), (Text(Span(5, 6)),)]
        assert elements("A\n\n\n\n\n\n\nB") == [(Text(Span(0, 1)),), (Text(Span(8, 9)),)]

    def test_leading_blank_lines(self) -> None:
        assert elements("\n\nA") == [(Text(Span(2, 3)),)]

    def test_trailing_newlines(self) -> None:
        assert elements("A\n") == [(Text(Span(0, 1)),)]
        assert elements("A\n\n") == [(Text(Span(0, 1)),)]
        assert elements("A\n\n\n") == [(Text(Span(0, 1)),)]

    def test_only_newlines(self) -> None:
        assert parse("\n\n\n\n") == Document(children=())

    def test_newline_after_element(self) -> None:
        assert elements("`x`\n[a](b)") == [
            (Mono(Span(1, 2)), Link(title=Span(5, 6), href=Span(8, 9))),
        ]


class TestParserFailures:
    """Parsing is all-or-nothing."""

    def test_error_after_valid_paragraphs(self) -> None:
        with pytest.raises(UnexpectedTokenError):
            Parser("fine\n\nalso fine\n\n)broken").parse()

    def test_parser_reads_source_file(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            Parser("(", source_file="notes/bad.txt").parse()
        assert exc_info.value.source_file == "notes/bad.txt"
