"""Comment Validation — rules for listing comments and seller reviews.

Invariants:
    - PURE: no IO, same text -> same Verdict
    - First violation wins, in this order: empty, length, bad words,
      repetition, digit spam, links
    - Any http://, https:// or www. rejects the comment, wherever it appears

Design Decisions:
    - Links banned in comments (unlike descriptions): comment threads are the
      main vector for off-platform scam redirects
"""

import re

from bazaar.core.check_content import check_content
from bazaar.core.domain_types import ReasonCode, Verdict

COMMENT_MIN_LENGTH = 2
COMMENT_MAX_LENGTH = 500
COMMENT_MAX_DIGIT_RATIO = 0.9

_REPEAT_RE = re.compile(r"(.)\1{9,}")
_LINK_RE = re.compile(r"https?://|www\.", re.IGNORECASE)


def validate_comment(text: str | None) -> Verdict:
    """Run the comment rules in order. Returns the first failure or ok."""
    body = (text or "").strip()
    length = len(body)

    if not body:
        return Verdict.fail(ReasonCode.COMMENT_EMPTY)
    if length < COMMENT_MIN_LENGTH:
        return Verdict.fail(ReasonCode.COMMENT_SHORT, min_length=COMMENT_MIN_LENGTH)
    if length > COMMENT_MAX_LENGTH:
        return Verdict.fail(ReasonCode.COMMENT_LONG, max_length=COMMENT_MAX_LENGTH)

    content = check_content(body)
    if not content.safe:
        return Verdict.fail(ReasonCode.COMMENT_BAD_WORDS, flagged=content.flagged)

    if _REPEAT_RE.search(body):
        return Verdict.fail(ReasonCode.COMMENT_REPEATED)

    if length > 20:
        digits = sum(1 for ch in body if ch.isdigit())
        if digits / length > COMMENT_MAX_DIGIT_RATIO:
            return Verdict.fail(ReasonCode.COMMENT_DIGITS)

    if _LINK_RE.search(body):
        return Verdict.fail(ReasonCode.COMMENT_LINKS)

    return Verdict.ok()
