"""SQLAlchemy repository implementations.

Repositories flush but never commit: the request-scoped session (see
warden.core.container.get_db_session) commits once per request, and
SqlAlchemyUnitOfWork wraps multi-statement changes in a SAVEPOINT.
"""

from warden.infrastructure.persistence.repositories.one_time_secret_repository import (
    OneTimeSecretRepository,
)
from warden.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from warden.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = ["OneTimeSecretRepository", "RefreshTokenRepository", "UserRepository"]
