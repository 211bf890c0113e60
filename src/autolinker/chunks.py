"""Chunk and ChunkType definitions for the autolinker tokenizer.

The tokenizer splits a fragment into an alternating sequence of TEXT and
MARKUP chunks. A well-formed sequence starts and ends with a TEXT chunk
(possibly empty) and strictly alternates kinds.

Thread Safety:
Chunk is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from autolinker.stringbuilder import StringBuilder


class ChunkType(Enum):
    """Kinds of chunk produced by the tokenizer."""

    TEXT = auto()  # Character data between tags
    MARKUP = auto()  # A single <...> delimiter, comments included


@dataclass(frozen=True, slots=True)
class Chunk:
    """A run of text or a single tag delimiter.

    Attributes:
        type: TEXT or MARKUP
        content: The exact source characters of the chunk

    """

    type: ChunkType
    content: str

    @property
    def is_text(self) -> bool:
        return self.type is ChunkType.TEXT

    @property
    def is_markup(self) -> bool:
        return self.type is ChunkType.MARKUP

    def __repr__(self) -> str:
        return f"Chunk({self.type.name}, {self.content!r})"


def is_well_formed(chunks: list[Chunk]) -> bool:
    """Check the TEXT, MARKUP, ..., TEXT alternation invariant."""
    if not chunks or len(chunks) % 2 == 0:
        return False
    return all(
        chunk.type is (ChunkType.TEXT if i % 2 == 0 else ChunkType.MARKUP)
        for i, chunk in enumerate(chunks)
    )


def reassemble(chunks: Iterable[Chunk]) -> str:
    """Join a chunk sequence back into a single string."""
    sb = StringBuilder()
    for chunk in chunks:
        sb.append(chunk.content)
    return sb.build()
