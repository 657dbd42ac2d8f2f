from fastapi import Request

from ..storage import MemStorage
from ..storage.demo_data import seed_demo_data
from .settings import Settings


def init_storage(app_settings: Settings) -> MemStorage:
    """Build the process-wide entity store, optionally seeded with the demo catalogue."""
    storage = MemStorage()
    if app_settings.seed_demo_data:
        seed_demo_data(storage)
    return storage


def get_storage(request: Request) -> MemStorage:
    return request.app.state.storage


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
