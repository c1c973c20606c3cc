"""
Pydantic schemas for bookings.
"""

from pydantic import BaseModel, ConfigDict, Field, validator
from typing import Any, Dict, Union


class BookingCreate(BaseModel):
    """Booking submission. Anything besides bookerId is stored as submitted."""

    model_config = ConfigDict(extra="allow")

    bookerId: Union[str, int] = Field(..., description="Identifier of the booking user")

    @validator("bookerId")
    def validate_booker_id(cls, v):
        if isinstance(v, str) and not v:
            raise ValueError("bookerId must not be empty")
        return v

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump()
