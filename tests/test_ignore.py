"""Tests for the ignore-region state machine."""

import pytest

from autolinker import IGNORE_TAGS, IgnoreTracker, tokenize
from autolinker.ignore import eligible_chunks


def _eligible_text(source: str) -> list[str]:
    return [chunk.content for chunk, ok in eligible_chunks(tokenize(source)) if ok and chunk.content]


class TestIgnoreTracker:
    def test_initially_outside(self) -> None:
        tracker = IgnoreTracker()
        assert not tracker.inside
        assert tracker.open_tag is None

    @pytest.mark.parametrize("tag", sorted(IGNORE_TAGS))
    def test_open_and_close(self, tag: str) -> None:
        tracker = IgnoreTracker()
        tracker.feed(f"<{tag}>")
        assert tracker.open_tag == tag
        tracker.feed(f"</{tag}>")
        assert not tracker.inside

    def test_open_tag_with_attributes(self) -> None:
        tracker = IgnoreTracker()
        tracker.feed('<a href="http://example.com">')
        assert tracker.open_tag == "a"

    def test_open_tag_with_newline_before_attributes(self) -> None:
        tracker = IgnoreTracker()
        tracker.feed('<pre\nclass="x">')
        assert tracker.open_tag == "pre"

    def test_name_is_lower_cased(self) -> None:
        tracker = IgnoreTracker()
        tracker.feed("<SCRIPT>")
        assert tracker.open_tag == "script"
        tracker.feed("</Script>")
        assert not tracker.inside

    @pytest.mark.parametrize("markup", ["<abbr>", "<address>", "<prefix>", "<codex>", "<p>", "</pre>"])
    def test_non_ignore_markup_keeps_outside(self, markup: str) -> None:
        tracker = IgnoreTracker()
        tracker.feed(markup)
        assert not tracker.inside

    def test_other_tags_keep_inside(self) -> None:
        tracker = IgnoreTracker()
        tracker.feed("<pre>")
        for markup in ("<b>", "</b>", "<code>", "</code>", "<a href='x'>", "</a>", "</pre >"):
            tracker.feed(markup)
            assert tracker.open_tag == "pre"

    def test_close_requires_exact_name(self) -> None:
        tracker = IgnoreTracker()
        tracker.feed("<a>")
        tracker.feed("</abbr>")
        assert tracker.inside
        tracker.feed("</a>")
        assert not tracker.inside


class TestEligibleChunks:
    def test_markup_never_eligible(self) -> None:
        for chunk, ok in eligible_chunks(tokenize("<p>x</p>")):
            if chunk.is_markup:
                assert not ok

    def test_text_outside_eligible(self) -> None:
        assert _eligible_text("a<b>b</b>c") == ["a", "b", "c"]

    def test_text_inside_excluded(self) -> None:
        assert _eligible_text("a<code>b<i>c</i>d</code>e") == ["a", "e"]

    def test_single_slot_does_not_track_inner_element(self) -> None:
        assert _eligible_text("<pre><code>a</code>b</pre>c") == ["c"]

    def test_nested_same_tag_closes_early(self) -> None:
        assert _eligible_text("<pre><pre>a</pre>b</pre>c") == ["b", "c"]

    def test_unclosed_region_discarded_at_end(self) -> None:
        assert _eligible_text("a<style>b") == ["a"]
        # A fresh sequence starts outside again
        assert _eligible_text("c") == ["c"]
