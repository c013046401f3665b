"""Bookmark API endpoints."""

import re
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from pydantic import BeforeValidator

from src.api.dependencies import get_bookmark_service, get_current_user
from src.models.user import User
from src.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from src.services.bookmark_service import BookmarkService

router = APIRouter(prefix="/bookmark", tags=["bookmarks"])

INTEGER_PATTERN = re.compile(r"-?\d+")


def require_integer_string(value):
    """Reject ids such as ``1.0`` that lax int parsing would accept."""
    if isinstance(value, str) and not INTEGER_PATTERN.fullmatch(value):
        raise ValueError("id must be an integer")
    return value


# Bounded to the INTEGER column range
BookmarkId = Annotated[
    int,
    BeforeValidator(require_integer_string),
    Path(ge=-(2**31), le=2**31 - 1),
]


@router.get("", response_model=list[BookmarkResponse])
@router.get("/", response_model=list[BookmarkResponse], include_in_schema=False)
def get_bookmarks(
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Get all bookmarks owned by the current user."""
    return bookmark_service.get_bookmarks(current_user.id)


@router.get("/{bookmark_id}", response_model=BookmarkResponse | None)
def get_bookmark_by_id(
    bookmark_id: BookmarkId,
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Get a bookmark by id.

    Responds with ``null`` rather than 404 when the bookmark does not exist
    or belongs to another user.
    """
    return bookmark_service.get_bookmark_by_id(current_user.id, bookmark_id)


@router.post("", response_model=BookmarkResponse, status_code=status.HTTP_201_CREATED)
@router.post(
    "/",
    response_model=BookmarkResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_bookmark(
    bookmark_data: BookmarkCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Create a new bookmark."""
    return bookmark_service.create_bookmark(current_user.id, bookmark_data)


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
def edit_bookmark_by_id(
    bookmark_id: BookmarkId,
    bookmark_data: BookmarkUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Update a bookmark (owner only)."""
    return bookmark_service.edit_bookmark_by_id(current_user.id, bookmark_id, bookmark_data)


@router.delete("/{bookmark_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_bookmark_by_id(
    bookmark_id: BookmarkId,
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Delete a bookmark (owner only)."""
    bookmark_service.delete_bookmark_by_id(current_user.id, bookmark_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
