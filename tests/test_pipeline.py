"""Tests for pass orchestration."""

import logging

import pytest

from autolinker import LinkifyConfig, LinkKind, LinkPattern, PassContext, build_patterns, run_passes
from autolinker.pipeline import run_pass

CONFIG = LinkifyConfig(max_display_length=0)


def _link(kind: LinkKind) -> LinkPattern:
    return next(p for p in build_patterns(CONFIG) if p.kind is kind)


class TestRunPass:
    def test_single_pass_only_links_its_kind(self) -> None:
        ctx = PassContext(config=CONFIG)
        result = run_pass("http://example.com me@example.com", _link(LinkKind.EMAIL), ctx)
        assert result == 'http://example.com <a href="mailto:me@example.com">me@example.com</a>'

    def test_comment_store_cleared_after_pass(self) -> None:
        ctx = PassContext(config=CONFIG)
        run_pass("<!-- x --> http://example.com", _link(LinkKind.FULL_URL), ctx)
        assert len(ctx.comments) == 0

    def test_earlier_anchor_is_opaque_to_later_pass(self) -> None:
        ctx = PassContext(config=CONFIG)
        text = run_pass("mailto:me@example.com", _link(LinkKind.FULL_URL), ctx)
        assert run_pass(text, _link(LinkKind.EMAIL), ctx) == text

    def test_logs_link_count(self, caplog: pytest.LogCaptureFixture) -> None:
        ctx = PassContext(config=CONFIG)
        with caplog.at_level(logging.DEBUG, logger="autolinker.pipeline"):
            run_pass("www.example.com", _link(LinkKind.WWW_URL), ctx)
        assert "www_url pass inserted 1 link(s)" in caplog.text


class TestRunPasses:
    def test_no_patterns_is_identity(self) -> None:
        assert run_passes("http://example.com", (), CONFIG) == "http://example.com"

    def test_fixed_order_www_before_email(self) -> None:
        # The www pass claims the host before the email pass sees the address
        result = run_passes("me@www.example.com", build_patterns(CONFIG), CONFIG)
        assert result == 'me@<a href="http://www.example.com">www.example.com</a>'

    def test_email_only(self) -> None:
        config = LinkifyConfig(with_protocol=False, with_www=False, max_display_length=0)
        result = run_passes("me@www.example.com", build_patterns(config), config)
        assert result == '<a href="mailto:me@www.example.com">me@www.example.com</a>'
