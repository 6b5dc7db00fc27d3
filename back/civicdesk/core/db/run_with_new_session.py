# Standard library imports
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Local application imports
from civicdesk.core.db.get_async_session import AsyncSessionLocal

T = TypeVar("T")


async def run_with_new_session(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
    **kwargs: Any,
) -> T:
    """
    Call ``func(session, *args, **kwargs)`` with a session of its own,
    closed once ``func`` returns. Used outside request handling (startup
    seeding, scripts) where no request-scoped session exists.
    """
    async with (session_factory or AsyncSessionLocal)() as session:
        return await func(session, *args, **kwargs)
