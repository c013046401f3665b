"""Bookmark service scoped to the requesting user."""

import logging
from dataclasses import dataclass
from typing import Literal

from sqlalchemy.orm import Session

from src.models.bookmark import Bookmark
from src.schemas.bookmark import BookmarkCreate, BookmarkUpdate
from src.services.exceptions import OwnershipError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Owned:
    """The record exists and belongs to the requesting user."""

    record: Bookmark


@dataclass(frozen=True)
class NotOwned:
    """The record is missing or belongs to someone else."""

    reason: Literal["missing", "foreign"]


OwnershipCheck = Owned | NotOwned


def assert_owner(record: Bookmark | None, user_id: int) -> OwnershipCheck:
    """Check that ``record`` exists and is owned by ``user_id``."""
    if record is None:
        return NotOwned("missing")
    if record.user_id != user_id:
        return NotOwned("foreign")
    return Owned(record)


class BookmarkService:
    """CRUD over the current user's bookmarks."""

    def __init__(self, db: Session):
        self.db = db

    def get_bookmarks(self, user_id: int) -> list[Bookmark]:
        return (
            self.db.query(Bookmark)
            .filter(Bookmark.user_id == user_id)
            .order_by(Bookmark.id)
            .all()
        )

    def get_bookmark_by_id(self, user_id: int, bookmark_id: int) -> Bookmark | None:
        """Return the bookmark, or None when it is missing or owned by another user."""
        return (
            self.db.query(Bookmark)
            .filter(Bookmark.id == bookmark_id, Bookmark.user_id == user_id)
            .first()
        )

    def create_bookmark(self, user_id: int, data: BookmarkCreate) -> Bookmark:
        bookmark = Bookmark(
            user_id=user_id,
            title=data.title,
            description=data.description,
            link=data.link,
        )
        self.db.add(bookmark)
        self.db.commit()
        self.db.refresh(bookmark)

        logger.info(f"User {user_id} created bookmark {bookmark.id}")
        return bookmark

    def edit_bookmark_by_id(
        self, user_id: int, bookmark_id: int, data: BookmarkUpdate
    ) -> Bookmark:
        """Apply a partial update to a bookmark the user owns.

        Raises:
            OwnershipError: if the bookmark is missing or owned by another user.
        """
        bookmark = self._get_owned(user_id, bookmark_id)

        updates = data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in updates.items():
            setattr(bookmark, field, value)

        self.db.commit()
        self.db.refresh(bookmark)

        logger.info(f"User {user_id} edited bookmark {bookmark_id}: {sorted(updates)}")
        return bookmark

    def delete_bookmark_by_id(self, user_id: int, bookmark_id: int) -> None:
        """Delete a bookmark the user owns.

        Raises:
            OwnershipError: if the bookmark is missing or owned by another user.
        """
        bookmark = self._get_owned(user_id, bookmark_id)
        self.db.delete(bookmark)
        self.db.commit()

        logger.info(f"User {user_id} deleted bookmark {bookmark_id}")

    def _get_owned(self, user_id: int, bookmark_id: int) -> Bookmark:
        record = self.db.query(Bookmark).filter(Bookmark.id == bookmark_id).first()
        check = assert_owner(record, user_id)
        if isinstance(check, NotOwned):
            logger.warning(
                f"User {user_id} denied access to bookmark {bookmark_id} ({check.reason})"
            )
            raise OwnershipError(bookmark_id)
        return check.record
