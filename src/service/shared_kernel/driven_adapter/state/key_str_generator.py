"""
Key String Generator

Kvrocks keys for the three store collections. Each collection is one hash whose
fields are the record keys of the store paths (``bookings/{id}`` -> field ``id``
of hash ``bookings``).
"""

from src.platform.config.core_setting import settings


def _make_key(key: str) -> str:
    """Add prefix to key for test isolation"""
    return f'{settings.KVROCKS_KEY_PREFIX}{key}'


def make_collection_key(*, collection: str) -> str:
    return _make_key(collection)


def make_updates_channel() -> str:
    return _make_key(settings.STORE_UPDATES_CHANNEL)
