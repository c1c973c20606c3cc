"""
Pydantic schemas for user registration and login.
"""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, EmailStr, Field, validator
from typing import Optional


class UserCreate(BaseModel):
    """Schema for registering a new user."""

    name: Optional[str] = Field(None, description="Display name", example="Jane Doe")
    userName: Optional[str] = Field(None, description="Public handle", example="jane")
    image: Optional[str] = Field(None, description="Profile image URL")
    role: Optional[str] = Field(None, description="Free-form role label", example="renter")
    email: EmailStr = Field(..., description="User's email address", example="jane@example.com")
    password: str = Field(..., min_length=1, description="Plain text password")


class LoginRequest(BaseModel):
    """
    Login request schema.

    The email is not validated as an address: a malformed one is simply an
    unknown user and fails like any other login.
    """

    email: str = Field(..., description="User's email address", example="jane@example.com")
    password: str = Field(..., description="User's password")

    @validator("email")
    def normalize_email(cls, v):
        """Normalize well-formed addresses the same way registration stores them."""
        try:
            return validate_email(v, check_deliverability=False).normalized
        except EmailNotValidError:
            return v


class TokenResponse(BaseModel):
    """Token returned by a successful login."""

    token: str = Field(
        ...,
        description="Signed access token",
        example="eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."
    )
