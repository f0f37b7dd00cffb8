"""Listing Quality — completeness score shown to sellers while they edit a listing.

Invariants:
    - score is 0..100 and is the sum of awarded points
    - Every shortfall appears in breakdown exactly once, with the points it
      would award (score) and its ceiling (max)
    - Never raises on missing fields — absent means "not filled in"
"""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class QualityGap:
    key: str
    score: int
    max: int


@dataclass(frozen=True)
class QualityReport:
    score: int
    breakdown: list[QualityGap] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "label": quality_label(self.score),
            "breakdown": [
                {"key": g.key, "score": g.score, "max": g.max}
                for g in self.breakdown
            ],
        }


def _price_is_positive(price: object) -> bool:
    if isinstance(price, bool):
        return False
    try:
        value = float(price)
    except (TypeError, ValueError, OverflowError):
        return False
    return math.isfinite(value) and value > 0


def calculate_quality(listing: dict) -> QualityReport:
    """Score a listing draft on title, description, photos and details."""
    score = 0
    gaps: list[QualityGap] = []

    title = listing.get("title") or ""
    if len(title) >= 10:
        score += 10
    else:
        gaps.append(QualityGap("quality_title_short", 0, 10))

    description = listing.get("description") or ""
    if len(description) >= 50:
        score += 20
    elif len(description) >= 20:
        score += 10
        gaps.append(QualityGap("quality_description_more", 10, 20))
    else:
        gaps.append(QualityGap("quality_description_short", 0, 20))

    photos = len(listing.get("images") or [])
    if photos >= 1:
        score += 20
        if photos >= 3:
            score += 20
        else:
            gaps.append(QualityGap("quality_photos_more", 20, 40))
    else:
        gaps.append(QualityGap("quality_photos_none", 0, 40))

    if _price_is_positive(listing.get("price")):
        score += 10
    else:
        gaps.append(QualityGap("quality_price_missing", 0, 10))

    if listing.get("location"):
        score += 10
    else:
        gaps.append(QualityGap("quality_location_missing", 0, 10))

    if listing.get("contacts"):
        score += 10
    else:
        gaps.append(QualityGap("quality_contacts_missing", 0, 10))

    return QualityReport(score=score, breakdown=gaps)


def quality_label(score: int) -> str:
    if score < 40:
        return "weak"
    if score < 75:
        return "good"
    return "excellent"
