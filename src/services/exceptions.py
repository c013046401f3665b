"""Shared exceptions for service layer operations."""


class ConflictError(Exception):
    """Raised when a write would violate a uniqueness rule (e.g. a taken email)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidCredentialsError(Exception):
    """Raised when an email/password pair does not match a registered user."""

    def __init__(self, message: str = "Credentials incorrect") -> None:
        super().__init__(message)


class OwnershipError(Exception):
    """
    Raised when a user tries to change a bookmark they do not own.

    A bookmark that does not exist is treated the same way, so the caller
    cannot tell the two cases apart.
    """

    def __init__(self, bookmark_id: int) -> None:
        self.bookmark_id = bookmark_id
        super().__init__("Access to resources denied")


class UserNotFoundError(Exception):
    """Raised when a profile operation targets a user id with no row."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__("User not found")
