from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import EmailStr, Field
from typing import Optional
import logging

from shared.config.database import get_storage
from shared.models import Schema, User, UserResponse
from shared.storage import MemStorage
from ..dependencies import SESSION_USER_KEY, get_current_user
from ..services import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


class LoginRequest(Schema):
    username: str
    password: str


class RegisterRequest(Schema):
    username: str = Field(..., min_length=3, max_length=64)
    email: EmailStr
    password: str = Field(..., min_length=6)
    full_name: Optional[str] = None


class WalletUpdate(Schema):
    wallet_address: Optional[str] = None


@router.post("/login", response_model=UserResponse)
async def login(payload: LoginRequest, request: Request, storage: MemStorage = Depends(get_storage)):
    """Start a session for valid credentials"""
    logger.info(f"Login attempt: {payload.username}")

    user = UserService(storage).authenticate(payload.username, payload.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect username or password")

    request.session[SESSION_USER_KEY] = user.id
    return UserResponse.from_user(user)


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, request: Request, storage: MemStorage = Depends(get_storage)):
    """Create an account and log it in"""
    user = UserService(storage).register(
        username=payload.username,
        email=payload.email,
        password=payload.password,
        full_name=payload.full_name,
    )
    request.session[SESSION_USER_KEY] = user.id
    return UserResponse.from_user(user)


@router.post("/logout")
async def logout(request: Request):
    request.session.clear()
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(get_current_user)):
    return UserResponse.from_user(user)


@router.patch("/update-wallet", response_model=UserResponse)
async def update_wallet(
    payload: WalletUpdate,
    user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage)
):
    """Attach a crypto wallet address to the current user"""
    if not payload.wallet_address or not payload.wallet_address.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Wallet address is required")

    updated = UserService(storage).update_wallet(user.id, payload.wallet_address.strip())
    return UserResponse.from_user(updated)
