"""Link grammars for autolinker.

Builds the three top-level link patterns (full URLs, ``www.`` addresses and
email addresses) from small named sub-grammars. Character classes use Unicode
properties (``\\p{L}``, ``\\p{M}``, ``\\p{N}``) so links written in non-Latin
scripts are detected; these need the ``regex`` engine rather than ``re``.

Sub-grammars:
    PATH_CHAR: characters allowed anywhere in a path
    BALANCED_PARENS: a ``(...)`` path segment, e.g. ``/wiki/Foo_(bar)``
    PATH_ENDING: characters a path may end on (never ``.`` or ``,``)
    QUERY_CHAR / QUERY_ENDING: the same pair for the part after ``?``
    DOMAIN: optional dotted labels plus a 2-64 letter top-level label
    IPV4: four dotted groups of 1-3 digits (not range checked)
    USERINFO: ``user:pass@`` style authority prefix
    TRAIL: optional path followed by optional query

Example:
    >>> from autolinker import LinkifyConfig
    >>> from autolinker.patterns import build_patterns
    >>> patterns = build_patterns(LinkifyConfig())
    >>> [p.kind for p in patterns]
    [<LinkKind.FULL_URL: 'full_url'>, <LinkKind.WWW_URL: 'www_url'>, <LinkKind.EMAIL: 'email'>]

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

import regex

from autolinker.config import LinkifyConfig
from autolinker.errors import ConfigError, PatternError

# Letters, marks and numbers in any script
_LMN = r"\p{L}\p{M}\p{N}"

PATH_CHAR = r"[" + _LMN + r"!*';:=+,.$/%#\[\]\-_~@&]"
BALANCED_PARENS = r"\(" + PATH_CHAR + r"+\)"
PATH_ENDING = r"(?:[" + _LMN + r":_+~#=/]|(?:" + BALANCED_PARENS + r"))"
QUERY_CHAR = r"[a-zA-Z0-9!?*'@();:&=+$/%#\[\]\-_.,~|]"
QUERY_ENDING = r"[a-zA-Z0-9_&=#/]"

PATH = (
    r"(?:(?:"
    + PATH_CHAR
    + r"*(?:"
    + BALANCED_PARENS
    + PATH_CHAR
    + r"*)*"
    + PATH_ENDING
    + r")|(?:@"
    + PATH_CHAR
    + r"+/))"
)

DOMAIN = r"(?:[" + _LMN + r"._+\-]+\.)?[\p{L}\p{M}]{2,64}\b"
IPV4 = r"(?:[0-9]{1,3}\.){3}[0-9]{1,3}"
USERINFO = r"[" + _LMN + r":%_+*~#?&=.,/;\-]+@"
TRAIL = r"(?:" + PATH + r"*)?(?:\?" + QUERY_CHAR + r"*" + QUERY_ENDING + r")?"

EMAIL_LOCAL = r"[" + _LMN + r"._+\-]{1,254}"

# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_SYNTAX = regex.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")


class LinkKind(Enum):
    """Kinds of link-like text, in pass order."""

    FULL_URL = "full_url"
    WWW_URL = "www_url"
    EMAIL = "email"


@dataclass(frozen=True, slots=True)
class LinkPattern:
    """A compiled top-level grammar and the link kind it detects."""

    kind: LinkKind
    pattern: regex.Pattern[str]


def scheme_alternation(schemes: tuple[str, ...]) -> str:
    """Build ``(?:http:(?://)?|https:(?://)?|...)`` from an allow-list.

    The ``//`` is optional for every scheme so ``mailto:`` and ``tel:``
    share the same grammar as ``http://``.
    """
    alternatives = "|".join(regex.escape(scheme) + r":(?://)?" for scheme in schemes)
    return r"(?:" + alternatives + r")"


def full_url_grammar(schemes: tuple[str, ...]) -> str:
    """Grammar for absolute URLs with an allowed scheme."""
    return (
        scheme_alternation(schemes)
        + r"(?:"
        + USERINFO
        + r")?(?:"
        + DOMAIN
        + r"|"
        + IPV4
        + r")/?(?:"
        + TRAIL
        + r")?"
    )


def www_grammar() -> str:
    """Grammar for protocol-less ``www.`` addresses."""
    return r"www\.(?:" + DOMAIN + r")/?(?:" + TRAIL + r")?"


def email_grammar() -> str:
    """Grammar for email addresses."""
    return EMAIL_LOCAL + r"@(?:" + DOMAIN + r")"


def validate_config(config: LinkifyConfig) -> None:
    """Reject configurations that cannot produce a usable grammar.

    Raises:
        ConfigError: If the scheme list is empty or malformed while full
            links are enabled, or the display length is negative.
    """
    if config.max_display_length < 0:
        raise ConfigError(
            "max_display_length",
            f"must be >= 0, got {config.max_display_length}",
        )
    if not config.with_protocol:
        return
    if not config.allowed_schemes:
        raise ConfigError("allowed_schemes", "at least one scheme is required for full links")
    for scheme in config.allowed_schemes:
        if not isinstance(scheme, str) or not _SCHEME_SYNTAX.fullmatch(scheme):
            raise ConfigError("allowed_schemes", f"{scheme!r} is not a valid URL scheme")


def _compile(kind: LinkKind, grammar: str) -> LinkPattern:
    try:
        return LinkPattern(kind=kind, pattern=regex.compile(grammar))
    except regex.error as e:
        raise PatternError(kind.value, str(e)) from e


@lru_cache(maxsize=32)
def build_patterns(config: LinkifyConfig) -> tuple[LinkPattern, ...]:
    """Compile the enabled link grammars for a configuration.

    Args:
        config: Linkify configuration (hashable, so results are cached)

    Returns:
        LinkPattern tuples for the enabled kinds only, in pass order:
        full URLs, then www addresses, then emails.

    Raises:
        ConfigError: If the configuration is invalid
        PatternError: If a grammar fails to compile
    """
    validate_config(config)

    patterns: list[LinkPattern] = []
    if config.with_protocol:
        patterns.append(_compile(LinkKind.FULL_URL, full_url_grammar(config.allowed_schemes)))
    if config.with_www:
        patterns.append(_compile(LinkKind.WWW_URL, www_grammar()))
    if config.with_mail:
        patterns.append(_compile(LinkKind.EMAIL, email_grammar()))
    return tuple(patterns)


__all__ = [
    "LinkKind",
    "LinkPattern",
    "build_patterns",
    "email_grammar",
    "full_url_grammar",
    "scheme_alternation",
    "validate_config",
    "www_grammar",
]
