"""Listing Validation — lexical rules for title, description and price.

Invariants:
    - All functions are PURE: no IO, no side effects, same input -> same Verdict
    - Rules run in a fixed order; the first violation wins
    - Expected failures are Verdicts, never exceptions (malformed price included)
    - Text is stripped before any length or ratio is measured

Design Decisions:
    - Return Verdict over raising: the caller maps error_key to a localized
      message and decides whether to block (ADR: uniform verdict shape)
    - Ratio thresholds (60% digits, 40% single symbol, 90% caps) are product
      constants tuned by hand; they are not derived from data
    - Descriptions may contain URLs: sellers put contact links there
"""

import math
import re
from collections import Counter

from bazaar.core.domain_types import ListingType, ReasonCode, Verdict
from bazaar.core.detect_gibberish import detect_gibberish

TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 100
TITLE_MAX_DIGIT_RATIO = 0.6
TITLE_MIN_LETTERS = 2
TITLE_MAX_SYMBOL_RATIO = 0.4
TITLE_MAX_CAPS_RATIO = 0.9

DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 2000

MAX_PRICE: dict[ListingType, int] = {
    ListingType.BUY: 50_000,
    ListingType.SELL: 50_000,
    ListingType.SERVICE: 5_000,
    ListingType.FREE: 0,
}
DEFAULT_MAX_PRICE = 50_000

_URL_RE = re.compile(
    r"https?://|www\.|\b[\w-]+\.(?:com|net|org|ru|ua|by|kz|io|me|info|biz|xyz|site|online|shop)\b",
    re.IGNORECASE,
)
_TITLE_REPEAT_RE = re.compile(r"(.)\1{4,}")
_DESCRIPTION_REPEAT_RE = re.compile(r"(.)\1{9,}")

# Title rejects only these; density/dictionary hits are too noisy for titles
_TITLE_GIBBERISH = (ReasonCode.GIBBERISH_CLUSTER, ReasonCode.GIBBERISH_NO_VOWELS)


def _ratio(count: int, total: int) -> float:
    return count / total if total else 0.0


def validate_title(title: str | None) -> Verdict:
    """Run the title rules in order. Returns the first failure or ok."""
    text = (title or "").strip()
    length = len(text)

    if not text:
        return Verdict.fail(ReasonCode.TITLE_EMPTY)
    if length < TITLE_MIN_LENGTH:
        return Verdict.fail(ReasonCode.TITLE_SHORT, min_length=TITLE_MIN_LENGTH)
    if length > TITLE_MAX_LENGTH:
        return Verdict.fail(ReasonCode.TITLE_LONG, max_length=TITLE_MAX_LENGTH)
    if _URL_RE.search(text):
        return Verdict.fail(ReasonCode.TITLE_URL)
    if _TITLE_REPEAT_RE.search(text):
        return Verdict.fail(ReasonCode.TITLE_REPEATED)

    digits = sum(1 for ch in text if ch.isdigit())
    if _ratio(digits, length) > TITLE_MAX_DIGIT_RATIO:
        return Verdict.fail(ReasonCode.TITLE_DIGITS)

    letters = [ch for ch in text if ch.isalpha()]
    if len(letters) < TITLE_MIN_LETTERS:
        return Verdict.fail(ReasonCode.TITLE_NO_LETTERS)

    if length > 5:
        symbols = Counter(
            ch for ch in text if not ch.isalpha() and not ch.isspace()
        )
        if symbols:
            _, top = symbols.most_common(1)[0]
            if _ratio(top, length) > TITLE_MAX_SYMBOL_RATIO:
                return Verdict.fail(ReasonCode.TITLE_SYMBOLS)

    if length > 10:
        upper = sum(1 for ch in letters if ch.isupper())
        if _ratio(upper, len(letters)) > TITLE_MAX_CAPS_RATIO:
            return Verdict.fail(ReasonCode.TITLE_CAPS)

    gibberish = detect_gibberish(text)
    if gibberish in _TITLE_GIBBERISH:
        return Verdict.fail(gibberish)

    return Verdict.ok()


def validate_description(description: str | None) -> Verdict:
    """Length and repetition only; links are allowed."""
    text = (description or "").strip()

    if not text:
        return Verdict.fail(ReasonCode.DESCRIPTION_EMPTY)
    if len(text) < DESCRIPTION_MIN_LENGTH:
        return Verdict.fail(
            ReasonCode.DESCRIPTION_SHORT, min_length=DESCRIPTION_MIN_LENGTH,
        )
    if len(text) > DESCRIPTION_MAX_LENGTH:
        return Verdict.fail(
            ReasonCode.DESCRIPTION_LONG, max_length=DESCRIPTION_MAX_LENGTH,
        )
    if _DESCRIPTION_REPEAT_RE.search(text):
        return Verdict.fail(ReasonCode.DESCRIPTION_REPEATED)
    return Verdict.ok()


def _coerce_price(price: object) -> float | None:
    """Finite non-negative number, or None. Numeric strings are accepted."""
    if price is None or isinstance(price, bool):
        return None
    if not isinstance(price, (int, float, str)):
        return None
    try:
        value = float(price.strip() if isinstance(price, str) else price)
    except (ValueError, OverflowError):
        # OverflowError: int too large for a float
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def _resolve_listing_type(listing_type: object) -> ListingType | None:
    try:
        return ListingType(listing_type)
    except ValueError:
        return None


def max_price_for(listing_type: object) -> int:
    """Price ceiling for a listing type; unknown types get the default."""
    resolved = _resolve_listing_type(listing_type)
    if resolved is None:
        return DEFAULT_MAX_PRICE
    return MAX_PRICE[resolved]


def validate_price(price: object, listing_type: object) -> Verdict:
    """Validate price against the listing type's rules and ceiling."""
    value = _coerce_price(price)
    if value is None:
        return Verdict.fail(ReasonCode.PRICE_INVALID)

    is_free = _resolve_listing_type(listing_type) == ListingType.FREE
    if is_free and value != 0:
        return Verdict.fail(ReasonCode.PRICE_FREE_NONZERO)
    if not is_free and value == 0:
        return Verdict.fail(ReasonCode.PRICE_REQUIRED)

    ceiling = max_price_for(listing_type)
    if value > ceiling:
        return Verdict.fail(ReasonCode.PRICE_MAX_EXCEEDED, max_price=ceiling)
    return Verdict.ok()
