"""
autolinker — turn bare URLs and email addresses in HTML into links

A text filter for already rendered HTML fragments. Absolute URLs with an
allowed scheme, protocol-less ``www.`` addresses and email addresses found in
text are wrapped in ``<a>`` elements. Existing markup, comments and the
contents of ``a``, ``script``, ``style``, ``code`` and ``pre`` elements are
left untouched.

Quick Start:
    >>> from autolinker import linkify
    >>> linkify("<p>See http://example.com/path?a=1.</p>")
    '<p>See <a href="http://example.com/path?a=1">http://example.com/path?a=1</a>.</p>'

    >>> # Or reuse compiled patterns with a Linkifier
    >>> from autolinker import Linkifier, LinkifyConfig
    >>> linker = Linkifier(LinkifyConfig(with_www=False, max_display_length=30))
    >>> html = linker("Mail me@example.com")

Installation:
    pip install autolinker
"""

from autolinker.chunks import Chunk, ChunkType, reassemble
from autolinker.comments import CommentStore
from autolinker.config import (
    DEFAULT_ALLOWED_SCHEMES,
    LinkifyConfig,
    get_linkify_config,
    linkify_config_context,
    reset_linkify_config,
    set_linkify_config,
)
from autolinker.errors import AutolinkerError, ConfigError, PatternError
from autolinker.ignore import IGNORE_TAGS, IgnoreTracker
from autolinker.lexer import tokenize
from autolinker.patterns import LinkKind, LinkPattern, build_patterns
from autolinker.pipeline import PassContext, run_passes
from autolinker.profiling import LinkifyAccumulator, get_linkify_accumulator, profiled_linkify
from autolinker.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def _as_text(html: str | bytes) -> str | None:
    if isinstance(html, str):
        return html
    try:
        return html.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("Fragment is not valid UTF-8; returning it unchanged")
        return None


def linkify(html: str | bytes, config: LinkifyConfig | None = None) -> str | bytes:
    """Insert anchors around link-like text in an HTML fragment.

    Args:
        html: HTML fragment. ``bytes`` are decoded as UTF-8.
        config: Configuration for this call (defaults to the context's
            config, see linkify_config_context())

    Returns:
        The transformed fragment. Bytes that are not valid UTF-8 are
        returned unchanged.

    Raises:
        ConfigError: If the configuration is invalid

    Example:
        >>> linkify("Contact me@example.com now")
        'Contact <a href="mailto:me@example.com">me@example.com</a> now'
    """
    if config is None:
        config = get_linkify_config()
    patterns = build_patterns(config)

    text = _as_text(html)
    if text is None:
        return html

    acc = get_linkify_accumulator()
    if acc is not None:
        acc.record_call(len(text))

    if not text:
        return text
    return run_passes(text, patterns, config)


class Linkifier:
    """Reusable linkify processor.

    Validates the configuration and compiles its patterns once, at
    construction.

    Usage:
        >>> linker = Linkifier(LinkifyConfig(max_display_length=20))
        >>> html = linker("Visit www.example.com today")

    Thread Safety:
        Holds only immutable state; every call builds its own pass context.
        Safe to share one instance between threads.

    """

    __slots__ = ("_config", "_patterns")

    def __init__(self, config: LinkifyConfig | None = None) -> None:
        """Initialize the processor.

        Args:
            config: Configuration (defaults to the context's config)

        Raises:
            ConfigError: If the configuration is invalid
        """
        self._config = config if config is not None else get_linkify_config()
        self._patterns = build_patterns(self._config)

    @property
    def config(self) -> LinkifyConfig:
        return self._config

    @property
    def kinds(self) -> tuple[LinkKind, ...]:
        """Enabled link kinds, in pass order."""
        return tuple(p.kind for p in self._patterns)

    def __call__(self, html: str | bytes) -> str | bytes:
        """Linkify an HTML fragment (same input handling as linkify())."""
        text = _as_text(html)
        if text is None:
            return html

        acc = get_linkify_accumulator()
        if acc is not None:
            acc.record_call(len(text))
        if not text:
            return text
        return run_passes(text, self._patterns, self._config)

    def __repr__(self) -> str:
        kinds = ", ".join(k.value for k in self.kinds)
        return f"Linkifier(kinds=[{kinds}])"


__all__ = [
    "DEFAULT_ALLOWED_SCHEMES",
    "IGNORE_TAGS",
    "AutolinkerError",
    "Chunk",
    "ChunkType",
    "CommentStore",
    "ConfigError",
    "IgnoreTracker",
    "LinkKind",
    "LinkPattern",
    "LinkifyAccumulator",
    "LinkifyConfig",
    "Linkifier",
    "PassContext",
    "PatternError",
    "build_patterns",
    "get_linkify_accumulator",
    "get_linkify_config",
    "linkify",
    "linkify_config_context",
    "profiled_linkify",
    "reassemble",
    "reset_linkify_config",
    "run_passes",
    "set_linkify_config",
    "tokenize",
    "__version__",
]
