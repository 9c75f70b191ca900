from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.services.password_hasher import PasswordHasher
from ...application.use_cases.auth.signup_user import SignupUserUseCase
from ...application.use_cases.auth.signin_user import SigninUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers all auth-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            SignupUserUseCase,
            lambda: SignupUserUseCase(
                user_repository=container.get(UserRepository),
                password_hasher=container.get(PasswordHasher),
            )
        )

        container.register_factory(
            SigninUserUseCase,
            lambda: SigninUserUseCase()
        )
