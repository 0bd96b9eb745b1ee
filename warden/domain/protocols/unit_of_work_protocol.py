"""Unit of work protocol (port).

Groups several repository writes into one all-or-nothing block.

Usage:
    async with self._uow.atomic():
        await self._user_repo.update(user)
        await self._secret_repo.mark_used(secret.id, now)
        await self._refresh_token_repo.revoke_all_for_user(...)
    # Either every write above is applied or none is.
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol


class UnitOfWorkProtocol(Protocol):
    """All-or-nothing block over the repositories of one request.

    Implementations:
        - SqlAlchemyUnitOfWork: SAVEPOINT on the request session
        - tests.utils.memory.InMemoryUnitOfWork: snapshot and restore (tests only)
    """

    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic block.

        Any exception raised inside the block undoes every write made
        inside it and is re-raised.

        Returns:
            Async context manager.
        """
        ...
