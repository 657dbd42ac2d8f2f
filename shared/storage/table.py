from typing import Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from ..models.base import BaseModel, utcnow

T = TypeVar("T", bound=BaseModel)


def paginate(items: List[T], page: int = 1, page_size: int = 10) -> Tuple[List[T], int]:
    """Slice ``items`` for a 1-based page; out-of-range pages come back empty."""
    total = len(items)
    start = max(page - 1, 0) * page_size
    return items[start:start + page_size], total


class Table(Generic[T]):
    """One entity map plus its monotonic id counter."""

    def __init__(self, name: str):
        self.name = name
        self._rows: Dict[int, T] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._rows)

    def insert(self, record: T) -> T:
        now = utcnow()
        values = {"id": self._next_id, "created_at": now}
        if "updated_at" in type(record).model_fields:
            values["updated_at"] = now
        stored = record.model_copy(update=values)
        self._rows[stored.id] = stored
        self._next_id += 1
        return stored

    def get(self, record_id: int) -> Optional[T]:
        return self._rows.get(record_id)

    def update(self, record_id: int, updates: dict) -> Optional[T]:
        record = self._rows.get(record_id)
        if record is None:
            return None

        # id and created_at are owned by the table
        changes = {k: v for k, v in updates.items() if k not in ("id", "created_at")}
        if "updated_at" in type(record).model_fields:
            changes["updated_at"] = utcnow()

        updated = record.model_copy(update=changes)
        self._rows[record_id] = updated
        return updated

    def delete(self, record_id: int) -> bool:
        return self._rows.pop(record_id, None) is not None

    def all(self) -> List[T]:
        # Insertion order
        return list(self._rows.values())

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [row for row in self._rows.values() if predicate(row)]

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return next((row for row in self._rows.values() if predicate(row)), None)
