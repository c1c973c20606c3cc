"""
Custom exception classes for the go-home API.
Each exception knows its HTTP status code and the JSON body clients receive.
"""

from typing import Any, Dict, Optional
from fastapi import HTTPException, status


class APIException(HTTPException):
    """Base API exception class."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code

    def to_content(self) -> Dict[str, Any]:
        """JSON body sent to the client."""
        return {"message": self.detail}


class BadRequestError(APIException):
    """Bad request exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code="BAD_REQUEST"
        )


class UnauthorizedError(APIException):
    """Authentication required exception."""

    def __init__(self, detail: str = "Authentication required"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code="UNAUTHORIZED",
            headers={"WWW-Authenticate": "Bearer"}
        )


class InternalServerError(APIException):
    """Internal server error exception."""

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code="INTERNAL_SERVER_ERROR"
        )


class ServiceUnavailableError(APIException):
    """Service unavailable exception."""

    def __init__(self, detail: str = "Service temporarily unavailable"):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=detail,
            error_code="SERVICE_UNAVAILABLE"
        )


# User specific exceptions
class DuplicateUserError(BadRequestError):
    """A user with the submitted email already exists."""

    def __init__(self, detail: str = "User already exists"):
        super().__init__(detail)
        self.error_code = "USER_EXISTS"


class LoginFailedError(UnauthorizedError):
    """
    Login failure.
    Raised for both unknown emails and wrong passwords so callers cannot tell them apart.
    """

    def __init__(self, detail: str = "Login failed"):
        super().__init__(detail)
        self.error_code = "LOGIN_FAILED"


class PasswordHashingError(InternalServerError):
    """Password could not be hashed."""

    def __init__(self, detail: str = "Password hashing error"):
        super().__init__(detail)
        self.error_code = "PASSWORD_HASHING_ERROR"


# Token specific exceptions
class InvalidAuthorizationError(UnauthorizedError):
    """Missing, malformed, expired or forged bearer token."""

    def __init__(self, detail: str = "Invalid authorization"):
        super().__init__(detail)
        self.error_code = "INVALID_AUTHORIZATION"

    def to_content(self) -> Dict[str, Any]:
        return {"error": True, "message": self.detail}


# Booking specific exceptions
class BookingLimitExceededError(BadRequestError):
    """The booker already holds the maximum number of bookings."""

    def __init__(self, limit: int):
        super().__init__(
            f"You have already booked {limit} rooms. You cannot book any more rooms."
        )
        self.error_code = "BOOKING_LIMIT_EXCEEDED"
        self.limit = limit

    def to_content(self) -> Dict[str, Any]:
        return {"error": self.detail}


class InvalidIdentifierError(BadRequestError):
    """Path identifier is not a valid ObjectId."""

    def __init__(self, identifier: str):
        super().__init__(f"Invalid identifier: {identifier}")
        self.error_code = "INVALID_IDENTIFIER"
        self.identifier = identifier
