from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class StoredUser:
    """Persisted user record. The only type that carries the password hash."""
    id: Optional[str]
    email: str
    password_hash: str = field(repr=False)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.email:
            raise ValueError("Email is required")
        if not self.password_hash:
            raise ValueError("Password hash is required")
