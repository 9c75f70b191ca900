# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ..application.dto.auth_dto import SignupRequest, SigninResponse, ErrorResponse
from ..application.dto.user_dto import SignupResult
from ..application.use_cases.auth.signup_user import SignupUserUseCase
from ..application.use_cases.auth.signin_user import SigninUserUseCase
from ..domain.exceptions import CredentialsTakenError, InvalidInputError, PersistenceError
from ..di.container import get_container

logger = logging.getLogger(__name__)


router = APIRouter(tags=["authentication"])


@router.post(
    "/signup",
    response_model=SignupResult,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def signup(request: SignupRequest) -> SignupResult:
    """
    Register a new user

    Args:
        request: Signup request with email and password

    Returns:
        SignupResult with created user information (no password hash)
    """
    logger.info(f"Signup attempt for email={request.email!r}")

    container = get_container()
    signup_use_case = container.get(SignupUserUseCase)

    try:
        return await signup_use_case.execute(request)
    except InvalidInputError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    except CredentialsTakenError as exception:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=exception.user_message
        )
    except PersistenceError as exception:
        # Store diagnostics stay in the logs
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=exception.user_message
        )


@router.post("/signin", response_model=SigninResponse, status_code=status.HTTP_201_CREATED)
async def signin() -> SigninResponse:
    """Acknowledge a signin request"""
    container = get_container()
    signin_use_case = container.get(SigninUserUseCase)
    return await signin_use_case.execute()
