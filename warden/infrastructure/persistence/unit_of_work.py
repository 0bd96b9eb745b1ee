"""SQLAlchemy unit of work (adapter).

Implements UnitOfWorkProtocol with a SAVEPOINT on the request session.
Repositories flush inside the block; the request session commits the
outer transaction when the request finishes.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession


class SqlAlchemyUnitOfWork:
    """All-or-nothing block over one AsyncSession.

    Usage:
        uow = SqlAlchemyUnitOfWork(session)
        async with uow.atomic():
            await user_repo.update(user)
            await secret_repo.mark_used(secret_id, now)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the request session.

        Args:
            session: Session shared with the repositories of the request.
        """
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Run the block inside a SAVEPOINT.

        The savepoint is released on success and rolled back if the block
        raises; the exception propagates.
        """
        async with self.session.begin_nested():
            yield
