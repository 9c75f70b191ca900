from .user import StoredUser

__all__ = ["StoredUser"]
