# Standard library imports
import os
from typing import Final, List, Optional


def _read_int(name: str, default: str) -> int:
    raw_value = os.getenv(name, default)
    try:
        return int(raw_value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw_value!r}") from None


def _read_list(name: str, default: str) -> List[str]:
    raw_value = os.getenv(name, default)
    return [item.strip() for item in raw_value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "auth_api")
        self.mongo_users_collection: Final[str] = os.getenv("MONGO_USERS_COLLECTION", "users")

        # Password hashing Configuration
        self.bcrypt_rounds: Final[int] = _read_int("BCRYPT_ROUNDS", "12")
        if not 4 <= self.bcrypt_rounds <= 31:
            raise ValueError(f"BCRYPT_ROUNDS must be between 4 and 31, got {self.bcrypt_rounds}")

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # HTTP Configuration
        self.cors_allow_origins: Final[List[str]] = _read_list(
            "CORS_ALLOW_ORIGINS",
            "http://localhost:3000"
        )


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
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
