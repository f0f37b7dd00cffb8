"""Content Checks — tests for bad-word matching, emoji detection and upload metadata."""

import pytest

from bazaar.core.check_content import (
    MAX_IMAGE_SIZE_BYTES,
    check_content,
    check_image,
    has_emoji,
)
from bazaar.core.domain_types import ReasonCode
from bazaar.core.word_lists import BAD_WORDS


# ─── check_content ───────────────────────────────────────────────

def test_clean_text_is_safe():
    result = check_content("Продам велосипед в хорошем состоянии")
    assert result.safe
    assert result.flagged == []


def test_flags_bad_word_case_insensitively():
    result = check_content("Лучшее КАЗИНО в городе")
    assert not result.safe
    assert result.flagged == ["казино"]


def test_matches_inside_longer_words():
    assert check_content("онлайн-казиноо").flagged == ["казино"]


def test_flagged_keeps_word_list_order():
    result = check_content("sex casino scam")
    assert result.flagged == ["scam", "casino", "sex"]


@pytest.mark.parametrize("text", ["", None])
def test_empty_text_is_safe(text):
    assert check_content(text).safe


def test_safe_iff_nothing_flagged():
    for text in ("hello world", "porn", "крипта и ставки"):
        result = check_content(text)
        assert result.safe == (result.flagged == [])


def test_word_list_entries_are_lowercase():
    assert all(word == word.lower() for word in BAD_WORDS)


# ─── has_emoji ───────────────────────────────────────────────────

@pytest.mark.parametrize("text", [
    "\U0001F525 Hot deal \U0001F525",
    "Продам \U0001F600",
    "❤ love",
    "Flag \U0001F1FA\U0001F1E6",
    "Fast \U0001F680 delivery",
    "⭐ top seller",
])
def test_detects_emoji(text):
    assert has_emoji(text)


@pytest.mark.parametrize("text", ["Regular text", "Просто текст", "Price: 100€ (!)", "", None])
def test_no_emoji(text):
    assert not has_emoji(text)


# ─── check_image ─────────────────────────────────────────────────

def test_image_within_limit_is_safe():
    result = check_image(1024, "image/jpeg")
    assert result.safe
    assert result.error_key is None


def test_image_at_exact_limit_is_safe():
    assert check_image(MAX_IMAGE_SIZE_BYTES, "image/png").safe


def test_image_over_limit_is_too_large():
    result = check_image(MAX_IMAGE_SIZE_BYTES + 1, "image/png")
    assert not result.safe
    assert result.error_key == ReasonCode.IMAGE_TOO_LARGE
    assert result.params == {"max_size_mb": 5}


@pytest.mark.parametrize("content_type", ["application/pdf", "text/html", "", None])
def test_non_image_type_is_rejected(content_type):
    result = check_image(1024, content_type)
    assert result.error_key == ReasonCode.IMAGE_INVALID_TYPE


def test_size_checked_before_type():
    result = check_image(MAX_IMAGE_SIZE_BYTES * 2, "application/pdf")
    assert result.error_key == ReasonCode.IMAGE_TOO_LARGE
