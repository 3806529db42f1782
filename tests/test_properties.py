"""Property-based tests for parser and renderer using Hypothesis."""

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from plainnote import compile_note, parse
from plainnote.errors import ParseError
from plainnote.renderers.html import HtmlRenderer

MARKUP_ALPHABET = "ab []()`\n<&"

plain_prose = st.text(
    alphabet=st.characters(exclude_characters="[]()`\n"),
    min_size=1,
    max_size=200,
)


class TestParserProperties:
    """Parsing either succeeds completely or raises ParseError."""

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=200))
    @settings(max_examples=300)
    def test_only_parse_errors_escape(self, source: str) -> None:
        try:
            parse(source)
        except ParseError:
            pass

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=200))
    @settings(max_examples=200)
    def test_no_empty_paragraphs(self, source: str) -> None:
        try:
            doc = parse(source)
        except ParseError:
            assume(False)
        assert all(p.children for p in doc.children)

    @given(st.text(alphabet="ab\n", max_size=200))
    @settings(max_examples=200)
    def test_paragraph_count_matches_blank_line_groups(self, source: str) -> None:
        """Prose-only notes have one paragraph per non-empty block."""
        doc = parse(source)
        # A run of n newlines (n >= 2) ends a paragraph; a single newline joins lines.
        blocks = [b for b in _split_blocks(source) if b]
        assert len(doc.children) == len(blocks)


def _split_blocks(source: str) -> list[str]:
    blocks = []
    current = []
    i = 0
    while i < len(source):
        if source.startswith("\n\n", i):
            blocks.append("".join(current))
            current = []
            i += 2
            while i < len(source) and source[i] == "\n":
                i += 1
        else:
            current.append(source[i])
            i += 1
    blocks.append("".join(current))
    return [b.replace("\n", "") for b in blocks]


class TestRendererProperties:
    """Rendering is pure and predictable."""

    @given(plain_prose)
    def test_plain_prose_round_trip(self, source: str) -> None:
        assert compile_note(source) == f"<p>{source} </p>"

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_idempotent(self, source: str) -> None:
        try:
            doc = parse(source)
        except ParseError:
            assume(False)
        renderer = HtmlRenderer(source)
        assert renderer.render(doc) == renderer.render(doc)
