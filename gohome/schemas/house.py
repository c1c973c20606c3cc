"""
Pydantic schemas for house listings.
Listings are free-form: unknown fields are kept and every value is stored as submitted.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional

# Fields written by a full replacement
HOUSE_FIELDS = (
    "houseName",
    "address",
    "city",
    "bedrooms",
    "bathrooms",
    "roomSize",
    "availability",
    "rent",
    "phone",
    "description",
)


class HouseBase(BaseModel):
    """Known listing fields. Values are not coerced to any type."""

    houseName: Optional[Any] = Field(None, description="Listing title", example="Sunny loft")
    address: Optional[Any] = Field(None, description="Street address")
    city: Optional[Any] = Field(None, description="City", example="Dhaka")
    bedrooms: Optional[Any] = Field(None, description="Number of bedrooms")
    bathrooms: Optional[Any] = Field(None, description="Number of bathrooms")
    roomSize: Optional[Any] = Field(None, description="Room size")
    availability: Optional[Any] = Field(None, description="Availability date, flag or note")
    rent: Optional[Any] = Field(None, description="Monthly rent")
    phone: Optional[Any] = Field(None, description="Contact phone number")
    description: Optional[Any] = Field(None, description="Free text description")


class HouseCreate(HouseBase):
    """Schema for creating a listing; extra fields are stored too."""

    model_config = ConfigDict(extra="allow")

    def to_document(self) -> Dict[str, Any]:
        """Only the fields the client actually sent, extras included."""
        return self.model_dump(exclude_unset=True)


class HouseUpdate(HouseBase):
    """
    Schema for replacing a listing.
    Every known field is written; omitted ones are stored as null.
    """

    def to_set_fields(self) -> Dict[str, Any]:
        data = self.model_dump()
        return {field: data[field] for field in HOUSE_FIELDS}
