"""Domain Types — enums and verdict shapes shared by every moderation rule.

Invariants:
    - ReasonCode is a closed set: every rule violation has exactly one code
    - Verdict.valid is True iff error_key is None
    - ContentVerdict.safe is True iff flagged is empty
    - All verdicts are frozen — validators never hand out mutable state

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (ADR: API returns codes as-is)
    - Verdicts as frozen dataclasses over dicts: callers pattern-match on fields,
      and params stay a plain dict for message interpolation
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ─── Enums ───────────────────────────────────────────────────────

class Locale(str, Enum):
    """Message languages supported by the marketplace UI."""
    RU = "ru"
    UA = "ua"
    EN = "en"


class ListingType(str, Enum):
    """Listing kinds — each carries its own price ceiling."""
    BUY = "buy"
    SELL = "sell"
    FREE = "free"
    SERVICE = "service"

    @classmethod
    def _missing_(cls, value: object):
        # The create-listing form posts "services"
        if isinstance(value, str) and value.lower() == "services":
            return cls.SERVICE
        return None


class Subject(str, Enum):
    """What kind of submission a rejection belongs to."""
    LISTING = "listing"
    COMMENT = "comment"


class ReasonCode(str, Enum):
    """Every rule a validator can fail on. Used as i18n message keys."""
    # Title
    TITLE_EMPTY = "validation_title_empty"
    TITLE_SHORT = "validation_title_short"
    TITLE_LONG = "validation_title_long"
    TITLE_URL = "validation_title_url"
    TITLE_REPEATED = "validation_title_repeated"
    TITLE_DIGITS = "validation_title_digits"
    TITLE_NO_LETTERS = "validation_title_no_letters"
    TITLE_SYMBOLS = "validation_title_symbols"
    TITLE_CAPS = "validation_title_caps"
    # Description
    DESCRIPTION_EMPTY = "validation_description_empty"
    DESCRIPTION_SHORT = "validation_description_short"
    DESCRIPTION_LONG = "validation_description_long"
    DESCRIPTION_REPEATED = "validation_description_repeated"
    # Price
    PRICE_INVALID = "validation_price_invalid"
    PRICE_FREE_NONZERO = "validation_price_free_nonzero"
    PRICE_REQUIRED = "validation_price_required"
    PRICE_MAX_EXCEEDED = "validation_price_max_exceeded"
    # Comment
    COMMENT_EMPTY = "validation_comment_empty"
    COMMENT_SHORT = "validation_comment_short"
    COMMENT_LONG = "validation_comment_long"
    COMMENT_BAD_WORDS = "validation_comment_bad_words"
    COMMENT_REPEATED = "validation_comment_repeated"
    COMMENT_DIGITS = "validation_comment_digits"
    COMMENT_LINKS = "validation_comment_links"
    # Listing body as a whole
    CONTENT_FLAGGED = "validation_content_flagged"
    # Gibberish
    GIBBERISH_CLUSTER = "gibberish_cluster"
    GIBBERISH_NO_VOWELS = "gibberish_no_vowels"
    GIBBERISH_DENSITY = "gibberish_density"
    GIBBERISH_UNKNOWN_LONG_WORD = "gibberish_unknown_long_word"
    # Images
    IMAGE_TOO_LARGE = "image_too_large"
    IMAGE_INVALID_TYPE = "image_invalid_type"


# ─── Verdicts ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Verdict:
    """Result of a lexical validator."""
    valid: bool
    error_key: ReasonCode | None = None
    params: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls) -> "Verdict":
        return cls(valid=True)

    @classmethod
    def fail(cls, error_key: ReasonCode, **params: Any) -> "Verdict":
        return cls(valid=False, error_key=error_key, params=params)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "error_key": self.error_key.value if self.error_key else None,
            "params": dict(self.params),
        }


@dataclass(frozen=True)
class ContentVerdict:
    """Result of the bad-word matcher."""
    safe: bool
    flagged: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"safe": self.safe, "flagged": list(self.flagged)}


@dataclass(frozen=True)
class ImageVerdict:
    """Result of the upload metadata check."""
    safe: bool
    error_key: ReasonCode | None = None
    params: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "safe": self.safe,
            "error_key": self.error_key.value if self.error_key else None,
            "params": dict(self.params),
        }
