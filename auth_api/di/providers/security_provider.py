from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...core.security import BcryptPasswordHasher
from ...domain.services.password_hasher import PasswordHasher

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the password hasher configured from settings"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()
        container.register_singleton(
            PasswordHasher,
            BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
        )
