"""Tests for the lexical chunker."""

from autolinker import Chunk, ChunkType, reassemble, tokenize
from autolinker.chunks import is_well_formed

T = ChunkType.TEXT
M = ChunkType.MARKUP


def _kinds(chunks: list[Chunk]) -> list[ChunkType]:
    return [c.type for c in chunks]


class TestTokenize:
    def test_plain_text_is_one_chunk(self) -> None:
        assert tokenize("hello") == [Chunk(T, "hello")]

    def test_empty_input(self) -> None:
        assert tokenize("") == [Chunk(T, "")]

    def test_leading_and_trailing_markup_get_empty_text(self) -> None:
        chunks = tokenize("<p>Hi</p>")
        assert chunks == [
            Chunk(T, ""),
            Chunk(M, "<p>"),
            Chunk(T, "Hi"),
            Chunk(M, "</p>"),
            Chunk(T, ""),
        ]

    def test_adjacent_tags_separated_by_empty_text(self) -> None:
        assert _kinds(tokenize("<b><i>x</i></b>")) == [T, M, T, M, T, M, T, M, T]

    def test_tag_spanning_lines(self) -> None:
        chunks = tokenize('a<div\nclass="x">b')
        assert chunks[1] == Chunk(M, '<div\nclass="x">')

    def test_lazy_match_stops_at_first_gt(self) -> None:
        chunks = tokenize('<a title="1 > 0">x')
        assert chunks[1] == Chunk(M, '<a title="1 >')
        assert chunks[2] == Chunk(T, ' 0">x')

    def test_lone_lt_is_text(self) -> None:
        assert tokenize("1 < 2") == [Chunk(T, "1 < 2")]

    def test_empty_angle_brackets_are_text(self) -> None:
        assert tokenize("a <> b") == [Chunk(T, "a <> b")]

    def test_comment_is_single_markup_chunk(self) -> None:
        chunks = tokenize("x<!--placeholder-->y")
        assert chunks == [Chunk(T, "x"), Chunk(M, "<!--placeholder-->"), Chunk(T, "y")]


class TestChunkHelpers:
    def test_is_text_and_is_markup(self) -> None:
        assert Chunk(T, "x").is_text
        assert Chunk(M, "<b>").is_markup

    def test_reassemble_round_trips(self) -> None:
        source = "<p>a <b>b</b> c</p>"
        assert reassemble(tokenize(source)) == source

    def test_is_well_formed(self) -> None:
        assert is_well_formed(tokenize("<p>x</p>"))
        assert not is_well_formed([])
        assert not is_well_formed([Chunk(M, "<p>")])
        assert not is_well_formed([Chunk(T, ""), Chunk(T, "")])
        assert not is_well_formed([Chunk(T, "a"), Chunk(T, "b"), Chunk(T, "c")])

    def test_repr(self) -> None:
        assert repr(Chunk(M, "<b>")) == "Chunk(MARKUP, '<b>')"
