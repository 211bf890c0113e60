"""Lexical splitter for HTML fragments.

Splits text on a lazy ``<...>`` tag pattern, keeping the delimiters, to
produce an alternating TEXT/MARKUP chunk sequence. This is not an HTML
parser: anything between a ``<`` and the next ``>`` is one MARKUP chunk,
so malformed markup is tolerated the same way on every pass.

Example:
    >>> from autolinker.lexer import tokenize
    >>> tokenize("<p>Hi</p>")
    [Chunk(TEXT, ''), Chunk(MARKUP, '<p>'), Chunk(TEXT, 'Hi'), Chunk(MARKUP, '</p>'), Chunk(TEXT, '')]

"""

from __future__ import annotations

import re

from autolinker.chunks import Chunk, ChunkType

# Capturing group keeps the tags in re.split output
_TAG_PATTERN = re.compile(r"(<.+?>)", re.IGNORECASE | re.DOTALL)


def tokenize(text: str) -> list[Chunk]:
    """Split ``text`` into alternating TEXT and MARKUP chunks.

    The result always starts and ends with a TEXT chunk; when ``text``
    starts or ends with a tag, that TEXT chunk is empty.

    Args:
        text: Fragment to split (comment bodies already protected)

    Returns:
        List of chunks; even indices are TEXT, odd indices are MARKUP.
    """
    parts = _TAG_PATTERN.split(text)
    chunks = [
        Chunk(ChunkType.TEXT if i % 2 == 0 else ChunkType.MARKUP, part)
        for i, part in enumerate(parts)
    ]
    # re.split already yields text at both ends; the sentinel guards the invariant
    if not chunks or chunks[-1].is_markup:
        chunks.append(Chunk(ChunkType.TEXT, ""))
    return chunks
