"""Rejection Log Routes — read-only view of what the moderation rules blocked.

Invariants:
    - Newest first, paginated (limit 1..100)
    - Unknown id -> 404 with the standard error envelope
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from bazaar.api.routes.moderation import get_handlers
from bazaar.core.domain_types import Subject
from bazaar.schemas.moderation import RejectionResponse
from bazaar.services.moderation_service import ModerationHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/moderation/rejections", tags=["rejections"])


@router.get("")
async def list_rejections(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    subject: Subject | None = Query(None),
    handlers: ModerationHandlers = Depends(get_handlers),
):
    """List recent rejections, optionally only listings or only comments."""
    rows = await handlers.list_rejections(limit, offset, subject)
    return {
        "rejections": [
            RejectionResponse.model_validate(row).model_dump(mode="json")
            for row in rows
        ],
        "limit": limit,
        "offset": offset,
    }


@router.get("/{rejection_id}", response_model=RejectionResponse)
async def get_rejection(
    rejection_id: UUID,
    handlers: ModerationHandlers = Depends(get_handlers),
):
    """Single rejection by id."""
    return await handlers.get_rejection(rejection_id)
