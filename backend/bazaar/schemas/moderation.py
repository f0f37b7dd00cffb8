"""Moderation Schemas — Pydantic models for the moderation API boundary.

Invariants:
    - Request models only cap payload size; content rules live in core/
      (a rule failure is a verdict, not a 400)
    - ListingReviewRequest.listing_type is posted as "type"
    - price is passed through as posted (bool, list, huge int included); the
      price rule decides validity, so JSON true is validation_price_invalid

Design Decisions:
    - Loose request typing for price: the UI posts whatever the input held, and
      "abc" must come back as validation_price_invalid, not a schema error
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bazaar.core.domain_types import Locale

MAX_PAYLOAD_TEXT = 10_000


# --- Requests -----------------------------------------------------------------

class ListingReviewRequest(BaseModel):
    """Listing draft as posted by the create-listing form."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field("", max_length=MAX_PAYLOAD_TEXT)
    description: str = Field("", max_length=MAX_PAYLOAD_TEXT)
    price: Any = None
    listing_type: str = Field("sell", alias="type", max_length=20)
    locale: Locale | None = None


class CommentReviewRequest(BaseModel):
    text: str = Field("", max_length=MAX_PAYLOAD_TEXT)
    locale: Locale | None = None


class ContentCheckRequest(BaseModel):
    text: str = Field("", max_length=MAX_PAYLOAD_TEXT)


class ImageCheckRequest(BaseModel):
    """Upload metadata — the bytes themselves go straight to storage."""
    size_bytes: int = Field(ge=0)
    content_type: str = Field("", max_length=100)
    locale: Locale | None = None


class QualityRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    images: list[str] = Field(default_factory=list)
    price: Any = None
    location: str | None = None
    contacts: str | None = None
    locale: Locale | None = None


# --- Responses ----------------------------------------------------------------

class FieldError(BaseModel):
    field: str
    error_key: str
    params: dict = Field(default_factory=dict)
    message: str


class ReviewResponse(BaseModel):
    """Outcome of a listing or comment review. accepted == (errors == [])."""
    accepted: bool
    locale: Locale
    errors: list[FieldError] = Field(default_factory=list)
    sanitized: dict[str, str] = Field(default_factory=dict)


class ContentCheckResponse(BaseModel):
    safe: bool
    flagged: list[str] = Field(default_factory=list)
    has_emoji: bool = False


class ImageCheckResponse(BaseModel):
    safe: bool
    error_key: str | None = None
    params: dict = Field(default_factory=dict)
    message: str | None = None


class QualityGapResponse(BaseModel):
    key: str
    score: int
    max: int
    hint: str


class QualityResponse(BaseModel):
    score: int = Field(ge=0, le=100)
    label: str
    breakdown: list[QualityGapResponse] = Field(default_factory=list)


class RejectionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    subject: str
    field: str
    error_key: str
    params: dict
    excerpt: str
    locale: str
    created_at: datetime
