# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.password_hasher import PasswordHasher
from ....domain.constants import UserFields
from ....domain.exceptions import (
    CredentialsTakenError,
    InvalidInputError,
    PersistenceError,
    StoreError,
    UniqueConstraintViolation,
)
from ...dto.auth_dto import SignupRequest
from ...dto.user_dto import SignupResult

logger = logging.getLogger(__name__)


class SignupUserUseCase:
    """Use case for registering a new user with email and password"""

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, request: SignupRequest) -> SignupResult:
        """
        Register a new user

        The email uniqueness check is left to the store: concurrent signups
        for the same email race on the unique index and exactly one wins.

        Args:
            request: Signup request with email and plaintext password

        Returns:
            SignupResult with the created user (never the hash)

        Raises:
            InvalidInputError: If email is missing or empty
            CredentialsTakenError: If the email is already registered
            PersistenceError: If the store fails for any other reason
        """
        if request.email is None or not request.email.strip():
            raise InvalidInputError("Email is required", field=UserFields.EMAIL)

        # Hashing failures are fatal and propagate unchanged
        password_hash = await self.password_hasher.hash(request.password)

        try:
            stored_user = await self.user_repository.create_user(request.email, password_hash)
        except UniqueConstraintViolation as error:
            if error.field != UserFields.EMAIL:
                logger.error(
                    f"Unique constraint violated on unexpected field {error.field!r}",
                    exc_info=True
                )
                raise PersistenceError(
                    f"Unique constraint violated on field {error.field!r}",
                    details={"operation": error.operation, "field": error.field},
                ) from error
            logger.info(f"Signup rejected, email already registered: {request.email}")
            raise CredentialsTakenError(details={"field": error.field}) from error
        except StoreError as error:
            logger.error(f"User store failed during signup: {error.message}", exc_info=True)
            raise PersistenceError(
                f"User store failed: {error.message}",
                details={"operation": error.operation},
            ) from error

        logger.info(f"User registered: {stored_user.id}")
        return SignupResult.from_stored_user(stored_user)
