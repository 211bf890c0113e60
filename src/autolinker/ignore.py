"""Ignore-region tracking for the chunk sequence.

A small state machine that records whether the current chunk lies inside an
element whose text must never be linked (``a``, ``script``, ``style``,
``code``, ``pre``). The tracker holds a single open tag name:

    OUTSIDE --<pre ...>--> INSIDE("pre") --</pre>--> OUTSIDE

While one ignore element is open, any other tag (an opening tag of a
different ignore element included) leaves the state unchanged, and only the
close tag of the element that opened the region returns to OUTSIDE. Nesting
is not counted: in ``<pre><pre>a</pre> b</pre>`` the first ``</pre>`` ends
the region and ``b`` is eligible again.

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from autolinker.chunks import Chunk

IGNORE_TAGS = frozenset({"a", "script", "style", "code", "pre"})

_OPEN_PATTERN = re.compile(
    r"<(" + "|".join(sorted(IGNORE_TAGS)) + r")(?:\s|>)",
    re.IGNORECASE,
)


class IgnoreTracker:
    """Single-slot OUTSIDE / INSIDE(tag) state machine.

    Feed it every MARKUP chunk in document order; ``inside`` tells whether
    the next TEXT chunk is inside an ignore element.
    """

    __slots__ = ("_close_pattern", "_open_tag")

    def __init__(self) -> None:
        self._open_tag: str | None = None
        self._close_pattern: re.Pattern[str] | None = None

    @property
    def open_tag(self) -> str | None:
        """Lower-cased name of the open ignore element, or None."""
        return self._open_tag

    @property
    def inside(self) -> bool:
        return self._open_tag is not None

    def feed(self, markup: str) -> None:
        """Advance the state machine over one MARKUP chunk."""
        if self._close_pattern is None:
            match = _OPEN_PATTERN.search(markup)
            if match:
                self._open_tag = match.group(1).lower()
                self._close_pattern = re.compile(
                    r"</" + re.escape(self._open_tag) + r">", re.IGNORECASE
                )
        elif self._close_pattern.search(markup):
            self._open_tag = None
            self._close_pattern = None


def eligible_chunks(chunks: Iterable[Chunk]) -> Iterator[tuple[Chunk, bool]]:
    """Yield each chunk with whether it may be scanned for links.

    MARKUP chunks are never eligible; a TEXT chunk is eligible iff no
    ignore element is open when it is reached. State left open at the end
    of the sequence is discarded.
    """
    tracker = IgnoreTracker()
    for chunk in chunks:
        if chunk.is_markup:
            tracker.feed(chunk.content)
            yield chunk, False
        else:
            yield chunk, not tracker.inside
