# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import DuplicateEmail, PersistenceFailure
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise PersistenceFailure(f"Error finding user by email: {str(e)}", operation="find_user") from e

        if document is None:
            return None
        return self._document_to_user(document)

    async def create(self, user: User) -> User:
        """
        Insert a new user

        The inserted ID is taken from the write result, so signup costs one
        read (the duplicate check) and one write.

        Raises:
            DuplicateEmail: If the unique email index rejects the insert
            PersistenceFailure: On any other database error
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError as e:
            logger.warning(f"Concurrent signup rejected by unique index for {user.email}")
            raise DuplicateEmail(user.email) from e
        except PyMongoError as e:
            raise PersistenceFailure(f"Error saving user: {str(e)}", operation="insert_user") from e

        return User(
            id=str(result.inserted_id),
            email=user.email,
            hashed_password=user.hashed_password,
        )

    async def ensure_indexes(self) -> None:
        try:
            await self.user_collection.create_index(UserFields.EMAIL, unique=True)
        except PyMongoError as e:
            raise PersistenceFailure(f"Error creating user indexes: {str(e)}", operation="create_index") from e

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
        )

    def _user_to_dict(self, user: User) -> dict:
        return {
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
        }
