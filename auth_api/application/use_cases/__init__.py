from .auth import (
    SignupUserUseCase,
    SigninUserUseCase,
)

__all__ = [
    "SignupUserUseCase",
    "SigninUserUseCase",
]
