from .auth_dto import SignupRequest, SigninResponse, ErrorResponse
from .user_dto import SignupResult

__all__ = [
    "SignupRequest",
    "SigninResponse",
    "ErrorResponse",
    "SignupResult",
]
