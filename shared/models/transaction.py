from enum import Enum
from typing import Optional
from datetime import datetime
from .base import BaseModel


class TransactionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class CryptoTransaction(BaseModel):
    user_id: int

    # Client-claimed on-chain payment, not verified against the chain
    tx_hash: str
    amount: float
    currency: str  # ETH, BTC, USDT

    status: TransactionStatus = TransactionStatus.PENDING
    confirmed_at: Optional[datetime] = None
