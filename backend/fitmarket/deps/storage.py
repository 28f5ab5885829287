# fitmarket/deps/storage.py
from functools import lru_cache

from fitmarket.settings import get_settings
from fitmarket.storage import ObjectStorage, build_storage

@lru_cache
def get_storage() -> ObjectStorage:
    """Process-wide store; tests swap it through app.dependency_overrides."""
    return build_storage(get_settings())
