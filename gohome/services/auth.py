"""
Authentication service for registration, login and user management.
Handles password hashing, credential checks and token issuing.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pymongo.results import DeleteResult, InsertOneResult
from starlette.concurrency import run_in_threadpool
from gohome.database import Database
from gohome.repositories.user import UserRepository
from gohome.schemas.user import UserCreate
from gohome.utils.auth import create_access_token, hash_password, verify_password
from gohome.utils.exceptions import DuplicateUserError, LoginFailedError, PasswordHashingError
from gohome.utils.serialization import parse_object_id
import logging

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service for managing users and their credentials.
    Password hashing and verification run in the threadpool to keep the event loop free.
    """

    def __init__(self, database: Database):
        self.db = database
        self.user_repo = UserRepository(database.users)

    async def register(self, user_data: UserCreate) -> InsertOneResult:
        """
        Register a new user.

        Args:
            user_data: Registration payload

        Returns:
            Insert result for the new user document

        Raises:
            DuplicateUserError: If a user with the email already exists
            PasswordHashingError: If the password cannot be hashed
        """
        if await self.user_repo.email_exists(user_data.email):
            logger.info(f"Registration rejected, email already registered: {user_data.email}")
            raise DuplicateUserError()

        try:
            password_hash = await run_in_threadpool(hash_password, user_data.password)
        except (ValueError, TypeError) as e:
            logger.error(f"Password hashing failed for {user_data.email}: {e}")
            raise PasswordHashingError()

        new_user = {
            "name": user_data.name,
            "userName": user_data.userName,
            "image": user_data.image,
            "role": user_data.role,
            "email": user_data.email,
            "password": password_hash,
            "createdAt": datetime.now(timezone.utc),
        }

        result = await self.user_repo.insert(new_user)
        logger.info(f"User registered: {user_data.email}")
        return result

    async def authenticate_user(self, email: str, password: str) -> Dict[str, Any]:
        """
        Check credentials against the stored hash.

        Returns:
            The user document

        Raises:
            LoginFailedError: For an unknown email, a wrong password or an unreadable hash
        """
        user = await self.user_repo.get_by_email(email)
        if not user:
            logger.warning(f"Failed login attempt for email: {email}")
            raise LoginFailedError()

        stored_hash = user.get("password")
        try:
            password_match = bool(stored_hash) and await run_in_threadpool(
                verify_password, password, stored_hash
            )
        except (ValueError, TypeError) as e:
            logger.error(f"Password verification error for {email}: {e}")
            password_match = False

        if not password_match:
            logger.warning(f"Failed login attempt for email: {email}")
            raise LoginFailedError()

        return user

    async def login(self, email: str, password: str) -> str:
        """
        Authenticate user and issue an access token.

        Returns:
            Signed token embedding the email
        """
        await self.authenticate_user(email, password)
        token = create_access_token(email)
        logger.info(f"User logged in: {email}")
        return token

    async def list_users(self, name: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self.user_repo.list_users(name)

    async def get_user_by_username(self, user_name: str) -> Optional[Dict[str, Any]]:
        return await self.user_repo.get_by_username(user_name)

    async def delete_user(self, user_id: str) -> DeleteResult:
        return await self.user_repo.delete_by_id(parse_object_id(user_id))
