"""User profile API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_user_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.user import UserDetailResponse, UserResponse, UserUpdate
from core.rate_limit import limiter
from domain.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/me/login",
    response_model=UserDetailResponse,
    summary="Record a sign-in",
    responses={
        200: {"description": "User created or login recorded"},
        403: {"model": ErrorResponse, "description": "Account deactivated"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def record_login(
    request: Request,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Create the user on first sign-in, otherwise update `last_login_at`."""
    synced = await service.sync_login(user)
    return UserDetailResponse(data=UserResponse.from_entity(synced))


@router.get(
    "/me",
    response_model=UserDetailResponse,
    summary="Get my profile",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_me(
    request: Request,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Get the authenticated user's profile."""
    found = await service.get_active(user.id)
    return UserDetailResponse(data=UserResponse.from_entity(found))


@router.patch(
    "/me",
    response_model=UserDetailResponse,
    summary="Edit my profile",
    responses={
        200: {"description": "Profile updated"},
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "Username already taken"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_me(
    request: Request,
    body: UserUpdate,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Apply a partial edit to common fields and the active attribute group."""
    changes = body.model_dump(exclude_unset=True, exclude={"user_type", "attributes"})
    updated = await service.update_profile(
        user.id,
        changes,
        user_type=body.user_type,
        attributes=body.attributes,
    )
    return UserDetailResponse(data=UserResponse.from_entity(updated))


@router.delete(
    "/me",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Deactivate my account",
    responses={
        204: {"description": "Account deactivated"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def deactivate_me(
    request: Request,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> None:
    """Soft-disable the account. The record is kept."""
    await service.deactivate(user.id)
    return None
