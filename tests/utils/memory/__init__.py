"""In-memory adapters for tests.

Single-process implementations of the repository, unit of work and audit
protocols. Flow tests wire every handler over them (see tests.utils.engine).
"""

from tests.utils.memory.audit import InMemoryAuditAdapter
from tests.utils.memory.repositories import (
    InMemoryOneTimeSecretRepository,
    InMemoryRefreshTokenRepository,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
)
from tests.utils.memory.store import InMemoryStore

__all__ = [
    "InMemoryAuditAdapter",
    "InMemoryOneTimeSecretRepository",
    "InMemoryRefreshTokenRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
