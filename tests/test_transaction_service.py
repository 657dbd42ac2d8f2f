import pytest

from apps.api.services import TransactionService
from shared.exceptions import ConflictError, NotFoundError
from shared.models import TransactionStatus


def test_create_transaction_is_pending(storage, user):
    tx = TransactionService(storage).create_transaction(user.id, "0xabc", 0.25, "ETH")

    assert tx.id == 1
    assert tx.status == TransactionStatus.PENDING
    assert tx.confirmed_at is None
    assert tx.amount == 0.25


def test_created_completed_transaction_is_confirmed(storage, user):
    tx = TransactionService(storage).create_transaction(
        user.id, "0xabc", 1, "ETH", status=TransactionStatus.COMPLETED,
    )

    assert tx.status == TransactionStatus.COMPLETED
    assert tx.confirmed_at is not None
    assert storage.get_crypto_transaction(tx.id).confirmed_at == tx.confirmed_at


def test_duplicate_hash_is_rejected(storage, user, other_user):
    service = TransactionService(storage)
    service.create_transaction(user.id, "0xabc", 1, "ETH")

    with pytest.raises(ConflictError, match="already exists"):
        service.create_transaction(other_user.id, "0xabc", 2, "BTC")

    assert len(storage.crypto_transactions) == 1
    assert service.get_user_transactions(other_user.id) == []


def test_completion_stamps_confirmed_at(storage, user):
    service = TransactionService(storage)
    tx = service.create_transaction(user.id, "0xabc", 1, "ETH")

    completed = service.update_status(tx.id, TransactionStatus.COMPLETED)

    assert completed.status == TransactionStatus.COMPLETED
    assert completed.confirmed_at is not None


def test_failure_leaves_confirmed_at_empty(storage, user):
    service = TransactionService(storage)
    tx = service.create_transaction(user.id, "0xabc", 1, "ETH")

    failed = service.update_status(tx.id, TransactionStatus.FAILED)

    assert failed.status == TransactionStatus.FAILED
    assert failed.confirmed_at is None


def test_unknown_transaction(storage):
    service = TransactionService(storage)
    with pytest.raises(NotFoundError):
        service.get_transaction(7)
    with pytest.raises(NotFoundError):
        service.update_status(7, TransactionStatus.COMPLETED)
