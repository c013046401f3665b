"""Authentication service for JWT and password handling."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from fastapi import Request
from fastapi.security.utils import get_authorization_scheme_param
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import Settings
from src.models.user import User
from src.services.exceptions import ConflictError, InvalidCredentialsError

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, email: str, settings: Settings) -> str:
    """Create a JWT access token."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str, settings: Settings) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


@dataclass(frozen=True)
class AuthContext:
    """Identity recovered from a verified bearer token."""

    user_id: int
    email: str | None


@dataclass(frozen=True)
class TokenError:
    """Why a request could not be authenticated."""

    reason: str


def authenticate_request(request: Request, settings: Settings) -> AuthContext | TokenError:
    """Verify the bearer token on a request.

    Returns an AuthContext on success or a TokenError describing the failure.
    Nothing is raised here; the caller decides how to reject the request.
    """
    scheme, token = get_authorization_scheme_param(request.headers.get("Authorization"))
    if not scheme:
        return TokenError("missing authorization header")
    if scheme.lower() != "bearer" or not token:
        return TokenError("authorization header is not a bearer token")

    payload = decode_access_token(token, settings)
    if payload is None:
        return TokenError("invalid or expired token")

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        return TokenError("token has no valid subject")

    return AuthContext(user_id=user_id, email=payload.get("email"))


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


class AuthService:
    """Signup and signin operations."""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def signup(self, email: str, password: str) -> str:
        """Register a new user and return an access token.

        Raises:
            ConflictError: if the email is already registered.
        """
        if get_user_by_email(self.db, email):
            raise ConflictError("Email already registered")

        user = User(email=email, password_hash=get_password_hash(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same email
            self.db.rollback()
            raise ConflictError("Email already registered") from e
        self.db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return create_access_token(user.id, user.email, self.settings)

    def signin(self, email: str, password: str) -> str:
        """Check credentials and return an access token.

        Raises:
            InvalidCredentialsError: if the email is unknown or the password is wrong.
        """
        user = authenticate_user(self.db, email, password)
        if not user:
            logger.warning("Rejected signin with incorrect credentials")
            raise InvalidCredentialsError()

        return create_access_token(user.id, user.email, self.settings)
