"""Text helpers for building anchor markup.

Example:
    >>> from autolinker.utils.text import escape_attr, truncate_display
    >>> escape_attr('http://example.com/?q="x"')
    'http://example.com/?q=&quot;x&quot;'
    >>> truncate_display("http://example.com/long", 10)
    'http://exa…'
"""

from __future__ import annotations

import html as html_module
from html.entities import html5

import regex

# Only semicolon-terminated references; legacy forms like "&copy" stay literal
_CHAR_REF = regex.compile(r"&(#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")

_GRAPHEME = regex.compile(r"\X")


def escape_attr(text: str) -> str:
    """Escape HTML special characters for safe use in attributes.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text safe for use in attribute values
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)


def escape_text(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for use as element content.

    Quotes are left alone so display text reads exactly as typed.
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False)


def _decode_ref(match: regex.Match[str]) -> str:
    ref = match.group(1)
    if ref.startswith("#"):
        return html_module.unescape(match.group(0))
    return html5.get(ref + ";", match.group(0))


def decode_entities(text: str) -> str:
    """Decode semicolon-terminated character references (``&amp;`` -> ``&``).

    Unknown names and references without a trailing ``;`` are kept as
    written, so query strings such as ``?a=1&not=2`` survive unchanged.
    """
    if "&" not in text:
        return text
    return _CHAR_REF.sub(_decode_ref, text)


def truncate_display(text: str, max_length: int, ellipsis: str = "…") -> str:
    """Shorten display text to ``max_length`` characters plus ``ellipsis``.

    Args:
        text: Decoded display text
        max_length: Maximum number of grapheme clusters to keep (0 = unlimited)
        ellipsis: Marker appended when truncation happens

    Returns:
        The original text, or its first ``max_length`` characters followed
        by ``ellipsis``

    Examples:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("abcdefghijkl", 4, ellipsis="...")
        'abcd...'
    """
    if max_length <= 0 or len(text) <= max_length:
        return text
    graphemes = _GRAPHEME.findall(text)
    if len(graphemes) <= max_length:
        return text
    return "".join(graphemes[:max_length]) + ellipsis
