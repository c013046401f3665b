"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import Token, UserLogin, UserRegister
from src.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from src.schemas.user import UserResponse, UserUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "Token",
    "UserResponse",
    "UserUpdate",
    "BookmarkCreate",
    "BookmarkUpdate",
    "BookmarkResponse",
]
