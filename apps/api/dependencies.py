from fastapi import Depends, HTTPException, Request, status

from shared.config.database import get_settings, get_storage
from shared.config.settings import Settings
from shared.models import User
from shared.storage import MemStorage
from .services import PaymentGateway

SESSION_USER_KEY = "user_id"


def get_current_user(request: Request, storage: MemStorage = Depends(get_storage)) -> User:
    """User bound to the session cookie"""
    user_id = request.session.get(SESSION_USER_KEY)
    user = storage.get_user(user_id) if user_id is not None else None
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return user


def get_payment_gateway(app_settings: Settings = Depends(get_settings)) -> PaymentGateway:
    return PaymentGateway.from_settings(app_settings)


def page_size_for(app_settings: Settings, page_size) -> int:
    if page_size is None:
        return app_settings.default_page_size
    return min(page_size, app_settings.max_page_size)
