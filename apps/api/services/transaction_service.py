"""
Crypto transaction ledger: records claimed on-chain payments
"""
import logging
from datetime import datetime
from typing import List, Optional

from shared.exceptions import ConflictError, NotFoundError
from shared.models import CryptoTransaction, TransactionStatus, utcnow
from shared.storage import MemStorage

logger = logging.getLogger(__name__)


class TransactionService:
    def __init__(self, storage: MemStorage):
        self.storage = storage

    def create_transaction(
        self,
        user_id: int,
        tx_hash: str,
        amount: float,
        currency: str,
        status: TransactionStatus = TransactionStatus.PENDING,
    ) -> CryptoTransaction:
        """Record a payment; the hash must be unique across all users."""
        if self.storage.get_transaction_by_tx_hash(tx_hash):
            logger.warning(f"Duplicate transaction hash {tx_hash} submitted by user {user_id}")
            raise ConflictError("Transaction with this hash already exists")

        transaction = self.storage.create_crypto_transaction(CryptoTransaction(
            user_id=user_id,
            tx_hash=tx_hash,
            amount=amount,
            currency=currency,
        ))
        logger.info(f"Transaction {transaction.id} recorded for user {user_id}: {amount} {currency}")

        # Settled payments go through the status transition so completion is stamped
        if status != TransactionStatus.PENDING:
            transaction = self.update_status(transaction.id, status)
        return transaction

    def get_transaction(self, transaction_id: int) -> CryptoTransaction:
        transaction = self.storage.get_crypto_transaction(transaction_id)
        if not transaction:
            raise NotFoundError("Transaction not found")
        return transaction

    def update_status(
        self,
        transaction_id: int,
        status: TransactionStatus,
        confirmed_at: Optional[datetime] = None,
    ) -> CryptoTransaction:
        # Completion always carries a confirmation time
        if status == TransactionStatus.COMPLETED and confirmed_at is None:
            confirmed_at = utcnow()

        transaction = self.storage.update_transaction_status(transaction_id, status, confirmed_at)
        logger.info(f"Transaction {transaction_id} status -> {status.value}")
        return transaction

    def get_user_transactions(self, user_id: int) -> List[CryptoTransaction]:
        return self.storage.get_user_transactions(user_id)
