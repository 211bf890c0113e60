"""Pass orchestration for autolinker.

One invocation runs one pass per enabled link kind, in the fixed order full
URLs, www addresses, emails. Each pass consumes the complete output of the
previous one:

    protect comments -> tokenize -> replace in eligible text
        -> reassemble -> restore comments

Re-tokenizing every pass turns anchors inserted earlier into ordinary MARKUP
chunks (and their text into ignore-region text), so a later pass never
rewrites them.

Thread Safety:
All per-invocation state lives on a PassContext created by run_passes() and
passed explicitly to each pass. Nothing is stored at module level.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from autolinker.chunks import reassemble
from autolinker.comments import CommentStore
from autolinker.config import LinkifyConfig
from autolinker.lexer import tokenize
from autolinker.patterns import LinkPattern
from autolinker.profiling import get_linkify_accumulator
from autolinker.replacer import replace_links
from autolinker.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class PassContext:
    """Scratch state for a single linkify invocation.

    Attributes:
        config: Configuration used unchanged by every pass
        comments: Comment placeholders of the pass currently running

    """

    config: LinkifyConfig
    comments: CommentStore = field(default_factory=CommentStore)


def run_pass(text: str, link: LinkPattern, ctx: PassContext) -> str:
    """Run one tokenize, replace, reassemble cycle for one link kind."""
    protected = ctx.comments.protect(text)
    result = replace_links(tokenize(protected), link, ctx.config)
    if not result.links:
        # Nothing replaced: the protected text would restore to the input
        output = text
    else:
        output = ctx.comments.restore(reassemble(result.chunks))
    ctx.comments.clear()

    logger.debug("%s pass inserted %d link(s)", link.kind.value, result.links)
    acc = get_linkify_accumulator()
    if acc is not None:
        acc.record_pass(link.kind.value, result.links, result.skipped_chunks)
    return output


def run_passes(text: str, patterns: Sequence[LinkPattern], config: LinkifyConfig) -> str:
    """Run every pass in ``patterns`` order on ``text``.

    Args:
        text: HTML fragment
        patterns: Compiled grammars from build_patterns(config)
        config: Configuration for this invocation

    Returns:
        The fragment with anchors inserted.
    """
    ctx = PassContext(config=config)
    for link in patterns:
        text = run_pass(text, link, ctx)
    return text
