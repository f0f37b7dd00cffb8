"""Language Detection — picks the message locale from the submitted text.

Invariants:
    - Always returns a valid Locale (never None)
    - Short text (<20 chars) returns the fallback: too little signal
    - Languages outside ru/uk/en return the fallback

Design Decisions:
    - langdetect: pure Python, no binary wheels, distinguishes ru from uk
    - DetectorFactory.seed fixed at import: detection is deterministic, which
      keeps the same submission rendering in the same language every time
"""

import logging

from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException

from bazaar.core.domain_types import Locale

logger = logging.getLogger(__name__)

DetectorFactory.seed = 0  # Deterministic: must be set BEFORE any detect() call

MIN_DETECT_LENGTH = 20

# langdetect code -> Locale mapping ("uk" is ISO 639-1; the UI calls it "ua")
_CODE_TO_LOCALE: dict[str, Locale] = {
    "ru": Locale.RU,
    "uk": Locale.UA,
    "en": Locale.EN,
}


def detect_locale(text: str | None, fallback: Locale = Locale.RU) -> Locale:
    """Best-guess locale for the text, or fallback when unsure."""
    if not text or len(text.strip()) < MIN_DETECT_LENGTH:
        return fallback

    try:
        results = detect_langs(text)
    except LangDetectException:
        logger.debug("langdetect found no features in text")
        return fallback

    if not results:
        return fallback

    return _CODE_TO_LOCALE.get(results[0].lang, fallback)
