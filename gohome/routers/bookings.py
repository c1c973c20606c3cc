"""
Booking API endpoints.
"""

from fastapi import APIRouter, Depends, Path
from typing import Any, Dict, List, Optional
from gohome.schemas.booking import BookingCreate
from gohome.schemas.result import DeleteResult, InsertResult
from gohome.services.booking import BookingService
from gohome.utils.dependencies import get_booking_service
from gohome.utils.serialization import (
    delete_result_to_dict,
    insert_result_to_dict,
    serialize_document,
    serialize_documents
)


router = APIRouter(prefix="/booked", tags=["Bookings"])


@router.post(
    "",
    response_model=InsertResult,
    summary="Book a room",
    description="Create a booking unless the booker already holds the maximum number of bookings"
)
async def create_booking(
    booking_data: BookingCreate,
    booking_service: BookingService = Depends(get_booking_service)
) -> Dict[str, Any]:
    """
    Create a booking.

    Args:
        booking_data: Submitted booking, must carry bookerId
        booking_service: Booking service instance

    Returns:
        Insert result with the new booking's identifier

    Raises:
        BookingLimitExceededError: If the booker is at the cap
    """
    result = await booking_service.create_booking(booking_data)
    return insert_result_to_dict(result)


@router.get("", summary="List bookings")
async def list_bookings(
    booking_service: BookingService = Depends(get_booking_service)
) -> List[Dict[str, Any]]:
    bookings = await booking_service.list_bookings()
    return serialize_documents(bookings)


@router.get("/{id}", summary="Get booking")
async def get_booking(
    id: str = Path(..., description="Booking identifier"),
    booking_service: BookingService = Depends(get_booking_service)
) -> Optional[Dict[str, Any]]:
    booking = await booking_service.get_booking(id)
    return serialize_document(booking)


@router.delete(
    "/{id}",
    response_model=DeleteResult,
    summary="Delete booking",
    description="Deletes the booking whose bookmark field equals the path value"
)
async def delete_booking(
    id: str = Path(..., description="Bookmark value to match"),
    booking_service: BookingService = Depends(get_booking_service)
) -> Dict[str, Any]:
    result = await booking_service.delete_booking(id)
    return delete_result_to_dict(result)
