from .signup_user import SignupUserUseCase
from .signin_user import SigninUserUseCase, SIGNIN_ACKNOWLEDGEMENT

__all__ = [
    "SignupUserUseCase",
    "SigninUserUseCase",
    "SIGNIN_ACKNOWLEDGEMENT",
]
