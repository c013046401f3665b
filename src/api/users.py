"""User profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_current_user, get_user_service
from src.models.user import User
from src.schemas.user import UserResponse, UserUpdate
from src.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Get current user information."""
    return user_service.get_me(current_user.id)


@router.patch("", response_model=UserResponse)
@router.patch("/", response_model=UserResponse, include_in_schema=False)
def edit_user(
    user_data: UserUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user's profile. Omitted fields are left unchanged."""
    return user_service.edit_user(current_user.id, user_data)
