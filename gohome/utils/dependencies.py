"""
FastAPI dependency injection utilities for services and token verification.
"""

from typing import Any, Dict
from fastapi import Depends, Request
from jose import JWTError
from gohome.database import Database, get_database
from gohome.services.auth import AuthService
from gohome.services.booking import BookingService
from gohome.services.house import HouseService
from gohome.utils.auth import extract_token_from_header, verify_token
from gohome.utils.exceptions import InvalidAuthorizationError
import logging

logger = logging.getLogger(__name__)


async def get_auth_service(db: Database = Depends(get_database)) -> AuthService:
    return AuthService(db)


async def get_house_service(db: Database = Depends(get_database)) -> HouseService:
    return HouseService(db)


async def get_booking_service(db: Database = Depends(get_database)) -> BookingService:
    return BookingService(db)


async def verify_jwt(request: Request) -> Dict[str, Any]:
    """
    Require a valid `Authorization: Bearer <token>` header.

    The decoded claims are stored on `request.state.decoded` for handlers
    further down. No resource route depends on this yet.

    Args:
        request: Incoming request

    Returns:
        Decoded token claims

    Raises:
        InvalidAuthorizationError: If the header is missing or the token fails verification
    """
    try:
        token = extract_token_from_header(request.headers.get("authorization"))
        payload = verify_token(token)
    except (ValueError, JWTError) as e:
        logger.info(f"Rejected bearer token on {request.url.path}: {e}")
        raise InvalidAuthorizationError()

    decoded = payload.to_dict()
    request.state.decoded = decoded
    return decoded
