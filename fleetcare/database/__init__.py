from fleetcare.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from fleetcare.database.engine import async_session, engine
from fleetcare.database.session import get_db

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
    "async_session",
    "engine",
    "get_db",
]
