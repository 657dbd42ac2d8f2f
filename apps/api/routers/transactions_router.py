from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import Field, StringConstraints
from typing import Annotated, List
import logging

from shared.config.database import get_storage
from shared.models import CryptoTransaction, Schema, TransactionStatus, User
from shared.storage import MemStorage
from ..dependencies import get_current_user
from ..services import TransactionService

logger = logging.getLogger(__name__)

router = APIRouter()


NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class TransactionCreate(Schema):
    tx_hash: NonBlankStr
    amount: float = Field(..., gt=0)
    currency: NonBlankStr
    status: TransactionStatus = TransactionStatus.PENDING


class TransactionStatusUpdate(Schema):
    status: TransactionStatus


@router.get("", response_model=List[CryptoTransaction])
async def list_my_transactions(
    user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage)
):
    """Transactions of the current user, most recent first"""
    return TransactionService(storage).get_user_transactions(user.id)


@router.post("", response_model=CryptoTransaction, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    payload: TransactionCreate,
    user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage)
):
    """Record a claimed on-chain payment"""
    # Only admins may record an already-settled payment
    if payload.status != TransactionStatus.PENDING and not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")

    return TransactionService(storage).create_transaction(
        user_id=user.id,
        tx_hash=payload.tx_hash,
        amount=payload.amount,
        currency=payload.currency,
        status=payload.status,
    )


@router.patch("/{transaction_id}", response_model=CryptoTransaction)
async def update_transaction_status(
    transaction_id: int,
    payload: TransactionStatusUpdate,
    user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage)
):
    """Move a transaction to pending, completed or failed"""
    service = TransactionService(storage)
    transaction = service.get_transaction(transaction_id)

    # Only allow updating your own transactions unless admin
    if transaction.user_id != user.id and not user.is_admin:
        logger.warning(f"User {user.id} tried to update transaction {transaction_id} of user {transaction.user_id}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")

    return service.update_status(transaction_id, payload.status)
