"""Domain Types — verifies enum values and verdict shapes.

Tests:
    - Enums serialize to their wire strings
    - ListingType accepts the "services" alias
    - Verdict.valid is True iff error_key is None
    - Verdicts are frozen
"""

import dataclasses

import pytest

from bazaar.core.domain_types import (
    ContentVerdict, ImageVerdict, ListingType, Locale, ReasonCode, Subject, Verdict,
)


def test_locales():
    assert [loc.value for loc in Locale] == ["ru", "ua", "en"]


def test_listing_type_values():
    assert {t.value for t in ListingType} == {"buy", "sell", "free", "service"}


def test_listing_type_services_alias():
    assert ListingType("services") is ListingType.SERVICE
    assert ListingType("SERVICES") is ListingType.SERVICE


def test_unknown_listing_type_raises():
    with pytest.raises(ValueError):
        ListingType("exchange")


def test_subjects():
    assert Subject("listing") is Subject.LISTING
    assert Subject("comment") is Subject.COMMENT


def test_reason_codes_are_unique_strings():
    values = [code.value for code in ReasonCode]
    assert len(values) == len(set(values))
    assert ReasonCode.PRICE_MAX_EXCEEDED == "validation_price_max_exceeded"


def test_verdict_ok():
    verdict = Verdict.ok()
    assert verdict.valid
    assert verdict.error_key is None
    assert verdict.params == {}


def test_verdict_fail_carries_params():
    verdict = Verdict.fail(ReasonCode.PRICE_MAX_EXCEEDED, max_price=5000)
    assert not verdict.valid
    assert verdict.to_dict() == {
        "valid": False,
        "error_key": "validation_price_max_exceeded",
        "params": {"max_price": 5000},
    }


def test_verdicts_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Verdict.ok().valid = False
    with pytest.raises(dataclasses.FrozenInstanceError):
        ContentVerdict(safe=True).safe = False


def test_image_verdict_to_dict():
    verdict = ImageVerdict(
        safe=False, error_key=ReasonCode.IMAGE_TOO_LARGE, params={"max_size_mb": 5},
    )
    assert verdict.to_dict()["error_key"] == "image_too_large"
