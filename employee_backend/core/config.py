# Standard library imports
import os
from typing import Final, List, Optional


DEFAULT_JWT_SECRET = "change_this_secret_in_production"


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        self.app_env: Final[str] = os.getenv("APP_ENV", "development")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")

        # Database Configuration
        self.mongo_uri: Final[str] = (
            os.getenv("MONGO_URI") or os.getenv("MONGO_URL") or "mongodb://localhost:27017"
        )
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "users")
        self.mongo_timeout_ms: Final[int] = int(os.getenv("MONGO_TIMEOUT_MS", "10000"))

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", DEFAULT_JWT_SECRET)
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        # 0 disables the exp claim
        self.jwt_expire_minutes: Final[int] = int(os.getenv("JWT_EXPIRE_MINUTES", "0"))

        # Password hashing
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # HTTP
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
            if origin.strip()
        ]

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    def validate(self) -> None:
        """
        Refuse to run with unsafe configuration.

        Raises:
            RuntimeError: If the default JWT secret is used in production
        """
        if self.is_production and self.jwt_secret_key == DEFAULT_JWT_SECRET:
            raise RuntimeError("JWT_SECRET_KEY must be set in production.")
        if self.mongo_timeout_ms <= 0:
            raise RuntimeError("MONGO_TIMEOUT_MS must be a positive number of milliseconds.")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
