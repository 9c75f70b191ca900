"""
API layer for the authentication backend.

Exposes the HTTP endpoints under /auth (signup, signin).
"""
from .auth_controller import router as auth_router

__all__ = ["auth_router"]
