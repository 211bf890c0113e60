"""Link matching and anchor substitution for one pass.

Scans the eligible TEXT chunks of a chunk sequence with one compiled link
grammar and replaces every match with anchor markup. MARKUP chunks and
TEXT chunks inside ignore elements pass through untouched.

Anchors are rendered as ``<a href="HREF">DISPLAY</a>``:

- full URL: href is the match itself (it carries its scheme)
- www address: href is ``http://`` + match
- email: href is ``mailto:`` + match

The match is entity-decoded once, so ``&amp;`` in already rendered HTML is a
single character for truncation and escaping. The href is attribute-escaped
and the display text, truncated to ``max_display_length`` characters plus
``ellipsis``, is text-escaped.

"""

from __future__ import annotations

from dataclasses import dataclass

import regex

from autolinker.chunks import Chunk, ChunkType
from autolinker.config import LinkifyConfig
from autolinker.ignore import eligible_chunks
from autolinker.patterns import LinkKind, LinkPattern
from autolinker.utils.logger import get_logger
from autolinker.utils.text import decode_entities, escape_attr, escape_text, truncate_display

logger = get_logger(__name__)

# A chunk without this substring cannot contain a match of the kind
_REQUIRED_SUBSTRING: dict[LinkKind, str] = {
    LinkKind.FULL_URL: ":",
    LinkKind.WWW_URL: "www.",
    LinkKind.EMAIL: "@",
}

_HREF_PREFIX: dict[LinkKind, str] = {
    LinkKind.FULL_URL: "",
    LinkKind.WWW_URL: "http://",
    LinkKind.EMAIL: "mailto:",
}


@dataclass(frozen=True, slots=True)
class ReplaceResult:
    """Outcome of scanning one chunk sequence.

    Attributes:
        chunks: The new chunk sequence (same length and kinds as the input)
        links: Number of anchors inserted
        skipped_chunks: TEXT chunks left unchanged because the scan failed

    """

    chunks: list[Chunk]
    links: int
    skipped_chunks: int


def build_href(kind: LinkKind, url: str) -> str:
    """Return the unescaped href for a decoded match."""
    return _HREF_PREFIX[kind] + url


def render_anchor(kind: LinkKind, matched: str, config: LinkifyConfig) -> str:
    """Render the anchor that replaces ``matched``.

    Args:
        kind: Link kind of the grammar that produced the match
        matched: The raw matched substring
        config: Configuration supplying the display length and ellipsis

    Returns:
        Anchor markup

    Example:
        >>> render_anchor(LinkKind.WWW_URL, "www.example.com", LinkifyConfig())
        '<a href="http://www.example.com">www.example.com</a>'
    """
    url = decode_entities(matched)
    href = escape_attr(build_href(kind, url))
    display = escape_text(truncate_display(url, config.max_display_length, config.ellipsis))
    return f'<a href="{href}">{display}</a>'


def replace_in_text(
    text: str, link: LinkPattern, config: LinkifyConfig
) -> tuple[str, int]:
    """Replace every match of ``link`` in one TEXT chunk.

    Returns:
        (new_text, number_of_links)

    Raises:
        TimeoutError: If scanning exceeds ``config.match_timeout``
    """
    if _REQUIRED_SUBSTRING[link.kind] not in text:
        return text, 0

    def _anchor(match: regex.Match[str]) -> str:
        return render_anchor(link.kind, match.group(0), config)

    return link.pattern.subn(_anchor, text, timeout=config.match_timeout)


def replace_links(
    chunks: list[Chunk], link: LinkPattern, config: LinkifyConfig
) -> ReplaceResult:
    """Scan the eligible TEXT chunks of ``chunks`` for one link kind.

    A chunk whose scan fails is kept exactly as it was; the remaining
    chunks are still processed.
    """
    out: list[Chunk] = []
    links = 0
    skipped = 0
    for chunk, eligible in eligible_chunks(chunks):
        if not eligible or not chunk.content:
            out.append(chunk)
            continue
        try:
            text, count = replace_in_text(chunk.content, link, config)
        except TimeoutError:
            logger.warning(
                "Link scan for %s timed out on a %d character chunk; leaving it unchanged",
                link.kind.value,
                len(chunk.content),
            )
            out.append(chunk)
            skipped += 1
            continue
        if count:
            links += count
            out.append(Chunk(ChunkType.TEXT, text))
        else:
            out.append(chunk)
    return ReplaceResult(chunks=out, links=links, skipped_chunks=skipped)
