"""
Authentication backend root package.

This package contains the FastAPI app entry point (main.py), the /auth
routes, the signup/signin use cases, and the MongoDB user store.
"""
