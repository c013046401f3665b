"""User profile service."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.user import User
from src.schemas.user import UserUpdate
from src.services.exceptions import ConflictError, UserNotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """Read and update the authenticated user's profile."""

    def __init__(self, db: Session):
        self.db = db

    def get_me(self, user_id: int) -> User:
        """Return the user's row.

        Raises:
            UserNotFoundError: if the user was removed after the token was issued.
        """
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def edit_user(self, user_id: int, data: UserUpdate) -> User:
        """Apply the supplied profile fields and return the updated user.

        Raises:
            UserNotFoundError: if the user does not exist.
            ConflictError: if the new email belongs to another user.
        """
        user = self.get_me(user_id)

        updates = data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in updates.items():
            setattr(user, field, value)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError("Email already registered") from e
        self.db.refresh(user)

        logger.info(f"Updated profile for user {user_id}: {sorted(updates)}")
        return user
