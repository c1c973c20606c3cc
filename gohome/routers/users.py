"""
User API endpoints for registration, login, lookup and deletion.
"""

from fastapi import APIRouter, Depends, Path, Query, status
from typing import Any, Dict, List, Optional
from gohome.schemas.result import DeleteResult, InsertResult
from gohome.schemas.user import LoginRequest, TokenResponse, UserCreate
from gohome.services.auth import AuthService
from gohome.utils.dependencies import get_auth_service
from gohome.utils.serialization import (
    delete_result_to_dict,
    insert_result_to_dict,
    serialize_document,
    serialize_documents
)


router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=InsertResult,
    status_code=status.HTTP_200_OK,
    summary="Register user",
    description="Create a user account. Fails with 400 if the email is already registered."
)
async def register_user(
    user_data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service)
) -> Dict[str, Any]:
    """
    Register a new user.

    Args:
        user_data: Registration payload
        auth_service: Authentication service

    Returns:
        Insert result with the new user's identifier

    Raises:
        DuplicateUserError: If the email is already registered
        PasswordHashingError: If the password cannot be hashed
    """
    result = await auth_service.register(user_data)
    return insert_result_to_dict(result)


@router.post(
    "/login",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="User login",
    description="Authenticate with email and password, returns a signed token valid for 30 days"
)
async def login(
    login_data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
) -> TokenResponse:
    """
    Authenticate user and return a token.

    Raises:
        LoginFailedError: For an unknown email or a wrong password alike
    """
    token = await auth_service.login(login_data.email, login_data.password)
    return TokenResponse(token=token)


@router.get(
    "",
    summary="List users",
    description="List users, optionally filtered by a case-insensitive substring of the name"
)
async def list_users(
    name: Optional[str] = Query(None, description="Substring of the user's name"),
    auth_service: AuthService = Depends(get_auth_service)
) -> List[Dict[str, Any]]:
    users = await auth_service.list_users(name)
    return serialize_documents(users)


@router.get(
    "/{userName}",
    summary="Get user by username",
    description="Exact match on userName; returns null when there is no such user"
)
async def get_user(
    userName: str = Path(..., description="Username to look up"),
    auth_service: AuthService = Depends(get_auth_service)
) -> Optional[Dict[str, Any]]:
    user = await auth_service.get_user_by_username(userName)
    return serialize_document(user)


@router.delete(
    "/{id}",
    response_model=DeleteResult,
    summary="Delete user"
)
async def delete_user(
    id: str = Path(..., description="User identifier"),
    auth_service: AuthService = Depends(get_auth_service)
) -> Dict[str, Any]:
    result = await auth_service.delete_user(id)
    return delete_result_to_dict(result)
