"""
Utility modules for the go-home API.
"""

from .auth import (
    create_access_token,
    verify_token,
    hash_password,
    verify_password,
    extract_token_from_header,
    TokenPayload
)

from .exceptions import (
    APIException,
    BadRequestError,
    UnauthorizedError,
    InternalServerError,
    ServiceUnavailableError,
    DuplicateUserError,
    LoginFailedError,
    PasswordHashingError,
    InvalidAuthorizationError,
    BookingLimitExceededError,
    InvalidIdentifierError
)

# Dependencies are imported directly where needed to avoid circular imports

__all__ = [
    # Auth utilities
    "create_access_token",
    "verify_token",
    "hash_password",
    "verify_password",
    "extract_token_from_header",
    "TokenPayload",

    # Exceptions
    "APIException",
    "BadRequestError",
    "UnauthorizedError",
    "InternalServerError",
    "ServiceUnavailableError",
    "DuplicateUserError",
    "LoginFailedError",
    "PasswordHashingError",
    "InvalidAuthorizationError",
    "BookingLimitExceededError",
    "InvalidIdentifierError",
]
