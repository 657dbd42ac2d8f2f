from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from shared.config.database import get_settings, get_storage
from shared.config.settings import Settings
from shared.models import Schema, UserResponse, UserRole
from shared.storage import MemStorage
from ..dependencies import page_size_for
from ..services import StatsService, UserService

router = APIRouter()


class TopProduct(Schema):
    id: int
    name: str
    subscriptions: int
    revenue: float


class StatsResponse(Schema):
    total_users: int
    total_products: int
    active_subscriptions: int
    monthly_revenue: float
    pending_transactions: int
    top_products: List[TopProduct]


class UserListResponse(Schema):
    users: List[UserResponse]
    total: int
    page: int
    page_size: int


class RoleUpdate(Schema):
    role: UserRole


@router.get("/stats", response_model=StatsResponse)
async def get_stats(storage: MemStorage = Depends(get_storage)):
    """Dashboard totals, recomputed on every request"""
    return StatsResponse(**StatsService(storage).compute_stats())


@router.get("/users", response_model=UserListResponse)
async def list_users(
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1),
    storage: MemStorage = Depends(get_storage),
    app_settings: Settings = Depends(get_settings)
):
    page_size = page_size_for(app_settings, page_size)
    users, total = storage.list_users(page, page_size)
    return UserListResponse(
        users=[UserResponse.from_user(user) for user in users],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.patch("/users/{user_id}/role", response_model=UserResponse)
async def update_user_role(user_id: int, payload: RoleUpdate, storage: MemStorage = Depends(get_storage)):
    """Promote or demote a user"""
    user = UserService(storage).set_role(user_id, payload.role)
    return UserResponse.from_user(user)
