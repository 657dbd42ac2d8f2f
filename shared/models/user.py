from enum import Enum
from typing import Optional
from datetime import datetime
from .base import BaseModel, Schema


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    username: str
    email: str
    password: str  # bcrypt hash
    full_name: Optional[str] = None
    role: UserRole = UserRole.USER
    is_verified: bool = False
    wallet_address: Optional[str] = None
    profile_image: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class UserResponse(Schema):
    """User as shown to clients (no password hash)."""

    id: int
    username: str
    email: str
    full_name: Optional[str] = None
    role: UserRole
    is_verified: bool = False
    wallet_address: Optional[str] = None
    profile_image: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls.model_validate(user, from_attributes=True)
