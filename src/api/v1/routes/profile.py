"""Profile enhancement API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.error_mapper import raise_for_failure
from api.v1.dependencies import get_enhancement_service, get_user_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.enhancement import (
    AcceptEnhancementRequest,
    EnhanceRequest,
    EnhancementDetailResponse,
    EnhancementResponse,
)
from api.v1.schemas.user import UserDetailResponse, UserResponse
from core.config import settings
from core.rate_limit import limiter
from domain.entities.enhancement import EnhancementRequest, EnhancementResult
from domain.services.enhancement_service import EnhancementService
from domain.services.user_service import UserService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.post(
    "/enhance",
    response_model=EnhancementDetailResponse,
    summary="Enhance profile text with AI",
    responses={
        200: {"description": "Enhanced (or unchanged) profile text"},
        400: {
            "model": ErrorResponse,
            "description": "Empty profile or prompt longer than the word limit",
        },
        503: {
            "model": ErrorResponse,
            "description": "Enhancement service temporarily unavailable",
        },
    },
)
@limiter.limit(settings.enhancement_rate_limit)  # type: ignore[untyped-decorator]
async def enhance_profile(
    request: Request,
    body: EnhanceRequest,
    user: CurrentUser,
    service: EnhancementService = Depends(get_enhancement_service),
    user_service: UserService = Depends(get_user_service),
) -> EnhancementDetailResponse:
    """
    Rewrite profile text with the text provider.

    The result is not stored; call `PUT /profile/enhanced` to keep it.
    `source` is `unchanged-fallback` when the provider produced nothing usable.
    """
    await user_service.ensure_not_deactivated(user.id)

    outcome = await service.handle(
        user.id,
        EnhancementRequest(profile=body.profile, prompt=body.prompt),
    )
    if not isinstance(outcome, EnhancementResult):
        raise_for_failure(outcome)

    return EnhancementDetailResponse(
        data=EnhancementResponse(
            enhanced_profile=outcome.enhanced_profile,
            source=outcome.source,
            changed=outcome.changed,
        )
    )


@router.put(
    "/enhanced",
    response_model=UserDetailResponse,
    summary="Save an accepted enhancement",
    responses={
        200: {"description": "Profile updated"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def accept_enhancement(
    request: Request,
    body: AcceptEnhancementRequest,
    user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Store accepted enhanced text as the user's bio."""
    updated = await user_service.apply_enhanced_profile(user.id, body.enhanced_profile)
    return UserDetailResponse(data=UserResponse.from_entity(updated))
