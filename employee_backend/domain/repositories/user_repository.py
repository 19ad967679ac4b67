from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - credential store keyed by email"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address (exact, case-sensitive)"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user; raises DuplicateEmail if the email is taken"""
        pass

    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create the indexes the store relies on (unique email)"""
        pass
