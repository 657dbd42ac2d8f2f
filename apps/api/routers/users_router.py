from fastapi import APIRouter, Depends
from pydantic import EmailStr, Field
from typing import List, Optional

from shared.config.database import get_storage
from shared.models import CryptoTransaction, Schema, SubscriptionDetail, User, UserResponse
from shared.storage import MemStorage
from ..dependencies import get_current_user
from ..services import SubscriptionService, TransactionService, UserService

router = APIRouter()


class ProfileUpdate(Schema):
    full_name: Optional[str] = None
    email: Optional[EmailStr] = None
    profile_image: Optional[str] = None


class PasswordChange(Schema):
    current_password: str
    new_password: str = Field(..., min_length=6)


@router.get("/profile", response_model=UserResponse)
async def get_profile(user: User = Depends(get_current_user)):
    return UserResponse.from_user(user)


@router.patch("/profile", response_model=UserResponse)
async def update_profile(
    payload: ProfileUpdate,
    user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage)
):
    """Update name, email or avatar of the current user"""
    updates = payload.changes(nullable=("full_name", "profile_image"))
    updated = UserService(storage).update_profile(user.id, updates)
    return UserResponse.from_user(updated)


@router.post("/change-password")
async def change_password(
    payload: PasswordChange,
    user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage)
):
    UserService(storage).change_password(user.id, payload.current_password, payload.new_password)
    return {"message": "Password updated successfully"}


@router.get("/subscriptions", response_model=List[SubscriptionDetail])
async def get_user_subscriptions(
    user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage)
):
    """Active subscriptions of the current user with product and plan"""
    return SubscriptionService(storage).get_active_subscriptions(user.id)


@router.get("/transactions", response_model=List[CryptoTransaction])
async def get_user_transactions(
    user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage)
):
    return TransactionService(storage).get_user_transactions(user.id)
