"""Moderation Routes — server-side enforcement of the listing and comment rules.

Invariants:
    - A rule failure is a 200 with accepted=false (a verdict, not an error)
    - Listing and comment reviews are rate limited per client address (TCP peer)
    - Routes hold no rule logic; ModerationHandlers does the work

Design Decisions:
    - Same rules the mini-app runs client-side, so a direct API call can no
      longer bypass them (client checks stay as instant feedback only)
"""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bazaar.config import Settings, get_settings
from bazaar.infrastructure.database import get_db
from bazaar.infrastructure.rate_limit import rate_limited
from bazaar.schemas.moderation import (
    CommentReviewRequest,
    ContentCheckRequest,
    ContentCheckResponse,
    ImageCheckRequest,
    ImageCheckResponse,
    ListingReviewRequest,
    QualityRequest,
    QualityResponse,
    ReviewResponse,
)
from bazaar.services.moderation_service import ModerationHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/moderation", tags=["moderation"])


def get_handlers(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ModerationHandlers:
    return ModerationHandlers(db, settings)


@router.post("/listings", response_model=ReviewResponse)
@rate_limited("rate_limit_listings_per_window")
async def review_listing(
    request: Request,
    body: ListingReviewRequest,
    handlers: ModerationHandlers = Depends(get_handlers),
):
    """Validate a listing draft before it is published."""
    return await handlers.review_listing(body)


@router.post("/comments", response_model=ReviewResponse)
@rate_limited("rate_limit_comments_per_window")
async def review_comment(
    request: Request,
    body: CommentReviewRequest,
    handlers: ModerationHandlers = Depends(get_handlers),
):
    """Validate a comment or review before it is posted."""
    return await handlers.review_comment(body)


@router.post("/content", response_model=ContentCheckResponse)
async def check_content(
    body: ContentCheckRequest,
    handlers: ModerationHandlers = Depends(get_handlers),
):
    """Prohibited-word and emoji scan of arbitrary text."""
    return handlers.check_content(body)


@router.post("/images", response_model=ImageCheckResponse)
async def check_image(
    body: ImageCheckRequest,
    handlers: ModerationHandlers = Depends(get_handlers),
):
    """Size and MIME type check for an upload, before it is sent to storage."""
    return handlers.check_image(body)


@router.post("/quality", response_model=QualityResponse)
async def score_quality(
    body: QualityRequest,
    handlers: ModerationHandlers = Depends(get_handlers),
):
    """Completeness score for a listing draft."""
    return handlers.score_quality(body)
