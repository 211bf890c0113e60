"""LinkifyAccumulator — opt-in profiling for linkify calls.

This module provides accumulated metrics during linkification:
- Total time
- Input length
- Passes run and links created per link kind
- Chunks left unchanged because their scan failed

Zero overhead when disabled (get_linkify_accumulator() returns None).

Example:
    from autolinker import linkify
    from autolinker.profiling import profiled_linkify

    with profiled_linkify() as metrics:
        html = linkify("See http://example.com")

    print(metrics.summary())
    # {"total_ms": 0.4, "input_length": 22, "links": {"full_url": 1}, ...}

"""

from collections import Counter
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class LinkifyAccumulator:
    """Accumulated metrics during linkification.

    Attributes:
        start_time: Profiling start timestamp.
        input_length: Total length of fragments processed.
        linkify_calls: Number of linkify() invocations recorded.
        passes: Number of passes run.
        links: Links created, keyed by link kind value.
        skipped_chunks: Text chunks left unchanged after a failed scan.

    """

    start_time: float = field(default_factory=perf_counter)
    input_length: int = 0
    linkify_calls: int = 0
    passes: int = 0
    links: Counter[str] = field(default_factory=Counter)
    skipped_chunks: int = 0

    def record_call(self, input_length: int) -> None:
        self.linkify_calls += 1
        self.input_length += input_length

    def record_pass(self, kind: str, links: int, skipped_chunks: int = 0) -> None:
        """Record one pass.

        Args:
            kind: Link kind value of the pass (e.g. "email").
            links: Anchors inserted by the pass.
            skipped_chunks: Chunks whose scan was abandoned.

        """
        self.passes += 1
        self.links[kind] += links
        self.skipped_chunks += skipped_chunks

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of linkify metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "input_length": self.input_length,
            "linkify_calls": self.linkify_calls,
            "passes": self.passes,
            "links": dict(self.links),
            "skipped_chunks": self.skipped_chunks,
        }


_accumulator: ContextVar[LinkifyAccumulator | None] = ContextVar(
    "linkify_accumulator",
    default=None,
)


def get_linkify_accumulator() -> LinkifyAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_linkify() -> Iterator[LinkifyAccumulator]:
    """Context manager for profiled linkification.

    Creates a LinkifyAccumulator and makes it available via
    get_linkify_accumulator() for the duration of the with block.

    Yields:
        LinkifyAccumulator that will be populated during linkify calls.

    """
    acc = LinkifyAccumulator()
    token: Token[LinkifyAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
