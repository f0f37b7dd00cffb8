"""Content Checks — bad-word matching, emoji detection, upload metadata.

Invariants:
    - check_content: safe == (no flagged terms); flagged keeps BAD_WORDS order
    - check_image: size checked before MIME type (first failure wins)
    - Empty or None text is always safe and never contains emoji

Design Decisions:
    - Case-insensitive substring search over word-boundary regex: stems must
      match inside inflected and concatenated words (ADR: ru/ua morphology)
    - check_image takes size + MIME type, not a file: the service only ever
      sees upload metadata, bytes go straight to object storage
"""

import re

from bazaar.core.domain_types import ContentVerdict, ImageVerdict, ReasonCode
from bazaar.core.word_lists import BAD_WORDS

MAX_IMAGE_SIZE_MB = 5
MAX_IMAGE_SIZE_BYTES = MAX_IMAGE_SIZE_MB * 1024 * 1024

_EMOJI_RE = re.compile(
    "["
    "\U0001F1E6-\U0001F1FF"  # regional indicators (flags)
    "\U0001F300-\U0001F5FF"  # symbols & pictographs
    "\U0001F600-\U0001F64F"  # emoticons
    "\U0001F680-\U0001F6FF"  # transport & map
    "\U0001F700-\U0001F77F"
    "\U0001F780-\U0001F7FF"
    "\U0001F800-\U0001F8FF"
    "\U0001F900-\U0001F9FF"  # supplemental symbols
    "\U0001FA70-\U0001FAFF"
    "\u2600-\u26FF"  # misc symbols
    "\u2700-\u27BF"  # dingbats
    "\u231A\u231B\u23E9-\u23F3\u23F8-\u23FA"
    "\u2B50\u2B55"
    "]"
)


def check_content(text: str | None) -> ContentVerdict:
    """Flag every BAD_WORDS entry that occurs anywhere in the text."""
    if not text:
        return ContentVerdict(safe=True, flagged=[])

    lowered = text.lower()
    flagged = [word for word in BAD_WORDS if word in lowered]
    return ContentVerdict(safe=not flagged, flagged=flagged)


def has_emoji(text: str | None) -> bool:
    if not text:
        return False
    return bool(_EMOJI_RE.search(text))


def check_image(size_bytes: int, content_type: str | None) -> ImageVerdict:
    """Reject uploads over 5 MB or with a non-image MIME type."""
    if size_bytes > MAX_IMAGE_SIZE_BYTES:
        return ImageVerdict(
            safe=False,
            error_key=ReasonCode.IMAGE_TOO_LARGE,
            params={"max_size_mb": MAX_IMAGE_SIZE_MB},
        )
    if not content_type or not content_type.lower().startswith("image/"):
        return ImageVerdict(safe=False, error_key=ReasonCode.IMAGE_INVALID_TYPE)
    return ImageVerdict(safe=True)
