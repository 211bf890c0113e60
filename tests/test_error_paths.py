"""Error-path and malformed input tests.

Tests that exercise error handling, edge cases, and graceful degradation
for unusual HTML input. These complement the happy-path tests in
test_api.py.
"""

import pytest

from autolinker import (
    AutolinkerError,
    ConfigError,
    LinkifyConfig,
    PatternError,
    linkify,
)

ALL = LinkifyConfig(max_display_length=0)

# =========================================================================
# Exception construction and formatting
# =========================================================================


class TestErrorFormatting:
    def test_config_error_names_field(self) -> None:
        err = ConfigError("allowed_schemes", "empty")
        assert err.field == "allowed_schemes"
        assert str(err) == "Invalid config 'allowed_schemes': empty"

    def test_pattern_error_names_kind(self) -> None:
        err = PatternError("email", "bad grammar")
        assert err.kind == "email"
        assert "email" in str(err)

    def test_hierarchy(self) -> None:
        assert issubclass(ConfigError, AutolinkerError)
        assert issubclass(PatternError, AutolinkerError)


class TestConfigErrorsSurfaceBeforeScanning:
    def test_linkify_raises_for_empty_schemes(self) -> None:
        with pytest.raises(ConfigError):
            linkify("no links here", LinkifyConfig(allowed_schemes=()))

    def test_linkify_raises_even_for_empty_input(self) -> None:
        with pytest.raises(ConfigError):
            linkify("", LinkifyConfig(max_display_length=-5))


# =========================================================================
# Malformed markup is split lexically and passed through
# =========================================================================


class TestMalformedMarkup:
    def test_unclosed_tag_swallows_rest_as_text(self) -> None:
        result = linkify("<b http://example.com", ALL)
        assert result == '<b <a href="http://example.com">http://example.com</a>'

    def test_stray_gt(self) -> None:
        result = linkify("a > b http://example.com", ALL)
        assert result.endswith('<a href="http://example.com">http://example.com</a>')

    def test_unterminated_comment_is_plain_text(self) -> None:
        result = linkify("<!-- http://example.com", ALL)
        assert result == '<!-- <a href="http://example.com">http://example.com</a>'

    def test_lone_surrogate_does_not_crash(self) -> None:
        source = "\ud800 http://example.com"
        result = linkify(source, ALL)
        assert result.startswith("\ud800 ")

    def test_control_characters_pass_through(self) -> None:
        source = "\x00\x1b<p>\x07</p>"
        assert linkify(source, ALL) == source
