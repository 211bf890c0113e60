"""Reversible protection of HTML comment bodies.

Before a pass is tokenized, every ``<!-- ... -->`` body is swapped for a
placeholder so the tokenizer cannot mistake ``<`` or ``>`` inside a comment
for a tag boundary, and so comment text is never linked. After the pass the
placeholders are swapped back for the original bodies.

A CommentStore belongs to one invocation and is cleared at the start of
every pass; it is never shared between invocations.

Example:
    >>> store = CommentStore()
    >>> protected = store.protect("<!-- see <b>http://x.org</b> -->")
    >>> store.restore(protected)
    '<!-- see <b>http://x.org</b> -->'

"""

from __future__ import annotations

import re

from autolinker.utils.hashing import hash_str

_COMMENT_PATTERN = re.compile(r"<!--(.*?)-->", re.DOTALL)


class CommentStore:
    """Ordered placeholder -> original comment body mapping for one pass."""

    __slots__ = ("_bodies",)

    def __init__(self) -> None:
        self._bodies: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._bodies)

    def clear(self) -> None:
        self._bodies.clear()

    def placeholder(self, index: int, body: str) -> str:
        """Placeholder text for the ``index``-th comment of a pass.

        Contains only ASCII letters, digits and dashes, so it can neither
        open nor close a tag and never matches a link grammar.
        """
        return f"autolinker-comment-{index}-{hash_str(body, truncate=16)}"

    def protect(self, text: str) -> str:
        """Replace every comment body in ``text`` with a placeholder.

        Clears bodies stored by a previous pass first.
        """
        self._bodies.clear()
        if "<!--" not in text:
            return text

        def _stash(match: re.Match[str]) -> str:
            body = match.group(1)
            token = self.placeholder(len(self._bodies), body)
            self._bodies[token] = body
            return f"<!--{token}-->"

        return _COMMENT_PATTERN.sub(_stash, text)

    def restore(self, text: str) -> str:
        """Put the original comment bodies back in place of placeholders."""
        if not self._bodies:
            return text

        def _unstash(match: re.Match[str]) -> str:
            body = self._bodies.get(match.group(1))
            if body is None:
                return match.group(0)
            return f"<!--{body}-->"

        return _COMMENT_PATTERN.sub(_unstash, text)
