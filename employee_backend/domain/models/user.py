from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    email: str
    hashed_password: str

    def __post_init__(self):
        """Business validations"""
        if not self.email:
            raise ValueError("Email is required")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
