from .config import Settings, get_settings, reset_settings
from .logging_config import configure_logging
from .security import (
    BcryptPasswordHasher,
    hash_password,
    verify_password,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "BcryptPasswordHasher",
    "hash_password",
    "verify_password",
]
