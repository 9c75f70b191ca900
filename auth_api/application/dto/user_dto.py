from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ...domain.models.user import StoredUser


class SignupResult(BaseModel):
    """DTO for user response (no password, no hash)"""
    id: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_stored_user(cls, user: StoredUser) -> "SignupResult":
        return cls(
            id=user.id or "",
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
