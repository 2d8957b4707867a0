"""
Food Ordering API — Store selection (FastAPI dependency)
"""
from collections.abc import AsyncIterator

from foodorder.core.config import get_settings
from foodorder.db.memory import create_memory_store
from foodorder.db.repositories import Store

settings = get_settings()

_memory_store: Store | None = None


def get_memory_store() -> Store:
    global _memory_store
    if _memory_store is None:
        _memory_store = create_memory_store()
    return _memory_store


async def get_store() -> AsyncIterator[Store]:
    """One Store per request; SQL repositories share the request's session."""
    if settings.use_memory_store:
        yield get_memory_store()
        return

    from foodorder.db.database import AsyncSessionLocal
    from foodorder.db.sql import create_sql_store

    async with AsyncSessionLocal() as session:
        yield create_sql_store(session)
