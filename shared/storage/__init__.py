from .mem_storage import MemStorage
from .table import Table, paginate

__all__ = ["MemStorage", "Table", "paginate"]
