"""ContextVar-based linkify configuration for autolinker.

Provides thread-local default configuration using Python's ContextVars
(PEP 567). A host sets the config once per context; ``linkify()`` reads it
once at the start of each invocation and then threads it explicitly through
every component.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit config
    html = linkify(fragment, LinkifyConfig(max_display_length=40))

    # Host-wide default for the current context
    with linkify_config_context(LinkifyConfig(with_mail=False)):
        html = linkify(fragment)

"""

from collections.abc import Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator

# Schemes allowed by the default URL policy
DEFAULT_ALLOWED_SCHEMES: tuple[str, ...] = (
    "http",
    "https",
    "ftp",
    "news",
    "nntp",
    "tel",
    "telnet",
    "mailto",
    "irc",
    "ssh",
    "sftp",
    "webcal",
    "rtsp",
)


@dataclass(frozen=True, slots=True)
class LinkifyConfig:
    """Immutable linkify configuration.

    Created per invocation (or once per Linkifier) and never mutated.
    Frozen dataclass ensures thread-safety and makes the config hashable,
    so compiled patterns can be cached by config.

    Attributes:
        with_protocol: Link absolute URLs carrying an allowed scheme
        with_www: Link protocol-less ``www.`` addresses
        with_mail: Link email addresses
        max_display_length: Truncate link text beyond this many characters
            (0 = unlimited)
        allowed_schemes: Ordered scheme allow-list supplied by the URL policy
        ellipsis: Marker appended to truncated link text
        match_timeout: Seconds allowed for scanning one text chunk
            (None = no limit)

    """

    with_protocol: bool = True
    with_www: bool = True
    with_mail: bool = True
    max_display_length: int = 72
    allowed_schemes: tuple[str, ...] = DEFAULT_ALLOWED_SCHEMES
    ellipsis: str = "…"
    match_timeout: float | None = None

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "LinkifyConfig":
        """Create LinkifyConfig from a mapping.

        Useful for host integration where settings come from an external
        configuration system. Unknown keys are silently ignored, and
        ``allowed_schemes`` may be given as any iterable of strings.

        Args:
            config_dict: Mapping with config values. Keys should match
                LinkifyConfig attribute names.

        Returns:
            New LinkifyConfig instance with values from the mapping.

        Example:
            >>> config = LinkifyConfig.from_dict({
            ...     "with_www": False,
            ...     "allowed_schemes": ["http", "https"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.allowed_schemes
            ('http', 'https')

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        schemes = filtered.get("allowed_schemes")
        if schemes is not None and not isinstance(schemes, tuple):
            if isinstance(schemes, str):
                schemes = schemes.split()
            filtered["allowed_schemes"] = tuple(schemes)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LinkifyConfig = LinkifyConfig()

_linkify_config: ContextVar[LinkifyConfig] = ContextVar(
    "linkify_config",
    default=_DEFAULT_CONFIG,
)


def get_linkify_config() -> LinkifyConfig:
    """Get the current default configuration (thread-local)."""
    return _linkify_config.get()


def set_linkify_config(config: LinkifyConfig) -> None:
    """Set the default configuration for the current context.

    Args:
        config: LinkifyConfig instance to use for this context.

    """
    _linkify_config.set(config)


def reset_linkify_config() -> None:
    """Reset to the module-level default configuration."""
    _linkify_config.set(_DEFAULT_CONFIG)


@contextmanager
def linkify_config_context(config: LinkifyConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LinkifyConfig to use within the context.

    Example:
        >>> with linkify_config_context(LinkifyConfig(with_www=False)):
        ...     html = linkify("www.example.com")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _linkify_config.get()
    _linkify_config.set(config)
    try:
        yield
    finally:
        _linkify_config.set(previous)


__all__ = [
    "DEFAULT_ALLOWED_SCHEMES",
    "LinkifyConfig",
    "get_linkify_config",
    "linkify_config_context",
    "reset_linkify_config",
    "set_linkify_config",
]
