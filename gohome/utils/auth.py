"""
Authentication utilities for JWT token management and password hashing.
Provides token issuing and verification plus bcrypt password handling.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from passlib.context import CryptContext
from gohome.config import settings


# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds
)


class TokenPayload:
    """JWT token payload structure."""

    def __init__(self, email: str, exp: datetime, iat: Optional[datetime] = None):
        self.email = email
        self.exp = exp
        self.iat = iat

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenPayload":
        """Create TokenPayload from a decoded claims dictionary."""
        iat = data.get("iat")
        return cls(
            email=data["email"],
            exp=datetime.fromtimestamp(data["exp"], tz=timezone.utc),
            iat=datetime.fromtimestamp(iat, tz=timezone.utc) if iat else None
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "email": self.email,
            "exp": int(self.exp.timestamp()),
            "iat": int(self.iat.timestamp()) if self.iat else None,
        }


def create_access_token(email: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed access token embedding the user's email.

    Args:
        email: User's email address
        expires_delta: Optional custom lifetime, defaults to the configured days

    Returns:
        Encoded JWT token string
    """
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(days=settings.access_token_expire_days)

    to_encode = {
        "email": email,
        "iat": now,
        "exp": now + expires_delta,
    }

    return jwt.encode(
        to_encode,
        settings.access_token_secret,
        algorithm=settings.jwt_algorithm
    )


def verify_token(token: str) -> TokenPayload:
    """
    Verify signature and expiry of a token and decode it.

    Args:
        token: JWT token string

    Returns:
        Decoded TokenPayload

    Raises:
        JWTError: If the token is forged, expired or lacks an email claim
    """
    try:
        payload = jwt.decode(
            token,
            settings.access_token_secret,
            algorithms=[settings.jwt_algorithm]
        )
    except JWTError:
        raise
    except Exception as e:
        raise JWTError(f"Token validation error: {str(e)}")

    if not payload.get("email") or "exp" not in payload:
        raise JWTError("Invalid token payload")

    return TokenPayload.from_dict(payload)


def hash_password(password: str) -> str:
    """
    Hash password using bcrypt.

    Raises:
        ValueError: If the password cannot be hashed
    """
    if password is None:
        raise ValueError("Password is required")
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify password against hash.

    Returns:
        True if password matches, False otherwise

    Raises:
        ValueError: If the stored hash is not a recognised bcrypt hash
    """
    return pwd_context.verify(plain_password, hashed_password)


def extract_token_from_header(authorization: Optional[str]) -> str:
    """
    Extract the token from an Authorization header value.

    Args:
        authorization: Header value, expected as "Bearer <token>"

    Returns:
        JWT token string

    Raises:
        ValueError: If header is missing or has no token part
    """
    if not authorization:
        raise ValueError("Authorization header is required")

    parts = authorization.split(" ")
    if len(parts) < 2 or not parts[1]:
        raise ValueError("Invalid authorization header format")
    return parts[1]
