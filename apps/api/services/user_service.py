import logging
from typing import Optional

from shared.exceptions import ConflictError, NotFoundError, UnauthorizedError
from shared.models import User, UserRole
from shared.security import hash_password, verify_password
from shared.storage import MemStorage

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, storage: MemStorage):
        self.storage = storage

    def register(
        self,
        username: str,
        email: str,
        password: str,
        full_name: Optional[str] = None,
    ) -> User:
        if self.storage.get_user_by_username(username):
            raise ConflictError("Username already taken")
        if self.storage.get_user_by_email(email):
            raise ConflictError("Email already in use")

        user = self.storage.create_user(User(
            username=username,
            email=email,
            password=hash_password(password),
            full_name=full_name,
            role=UserRole.USER,
        ))
        logger.info(f"User {user.id} registered: {user.username}")
        return user

    def authenticate(self, username: str, password: str) -> Optional[User]:
        user = self.storage.get_user_by_username(username)
        if not user or not verify_password(password, user.password):
            return None
        return user

    def get_user(self, user_id: int) -> User:
        user = self.storage.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def update_profile(self, user_id: int, updates: dict) -> User:
        email = updates.get("email")
        if email:
            existing = self.storage.get_user_by_email(email)
            if existing and existing.id != user_id:
                raise ConflictError("Email already in use")

        user = self.storage.update_user(user_id, updates)
        if not user:
            raise NotFoundError("User not found")
        return user

    def change_password(self, user_id: int, current_password: str, new_password: str) -> None:
        user = self.get_user(user_id)
        if not verify_password(current_password, user.password):
            raise UnauthorizedError("Current password is incorrect")
        self.storage.update_user(user_id, {"password": hash_password(new_password)})
        logger.info(f"Password changed for user {user_id}")

    def update_wallet(self, user_id: int, wallet_address: str) -> User:
        return self.storage.update_wallet_address(user_id, wallet_address)

    def set_role(self, user_id: int, role: UserRole) -> User:
        user = self.storage.update_user(user_id, {"role": role})
        if not user:
            raise NotFoundError("User not found")
        logger.info(f"User {user_id} role -> {role.value}")
        return user
