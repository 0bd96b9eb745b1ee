"""Pytest configuration and shared fixtures.

Fixtures:
    - clock: FixedClock pinned to the current second (advance() for expiry)
    - password_service: bcrypt at the minimum cost factor (fast)
    - token_service: JWTService with distinct test secrets
    - store / engine: every handler wired over the in-memory adapters
    - test_database: real PostgreSQL (integration tests skip without it)
"""

import inspect
from datetime import UTC, datetime
from unittest.mock import Mock

import pytest
import pytest_asyncio

from warden.core.container import get_rate_limit
from warden.infrastructure.clock import FixedClock
from warden.infrastructure.security import (
    BcryptPasswordService,
    JWTService,
    SecretTokenService,
)
from tests.utils.engine import build_engine
from tests.utils.fakes import RecordingSmsService
from tests.utils.memory import InMemoryStore

TEST_ACCESS_SECRET = "test-access-secret-0123456789abcdef0123"
TEST_REFRESH_SECRET = "test-refresh-secret-0123456789abcdef012"


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: API tests with dependency overrides")
    config.addinivalue_line("markers", "smoke: End-to-end flows (in-memory adapters)")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Core collaborators
# =============================================================================


@pytest.fixture(autouse=True)
def fresh_rate_limit_buckets():
    """Every test starts with full token buckets."""
    get_rate_limit.cache_clear()
    yield
    get_rate_limit.cache_clear()


@pytest.fixture
def clock():
    """Manually advanced clock starting at the current second."""
    return FixedClock(datetime.now(UTC).replace(microsecond=0))


@pytest.fixture
def password_service():
    """Bcrypt at cost 4 so hashing stays fast in tests."""
    return BcryptPasswordService(cost_factor=4)


@pytest.fixture
def secret_token_service():
    """Six-digit codes, 64-hex reset tokens."""
    return SecretTokenService(otp_length=6)


@pytest.fixture
def token_service():
    """JWT service with distinct access/refresh secrets."""
    return JWTService(
        access_secret=TEST_ACCESS_SECRET,
        refresh_secret=TEST_REFRESH_SECRET,
        access_expiration_minutes=15,
        refresh_expiration_days=7,
    )


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Usage:
        def test_something(mock_logger):
            service = MyService(logger=mock_logger)
            service.do_something()
            mock_logger.info.assert_called_once()
    """
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    return logger


# =============================================================================
# In-memory engine
# =============================================================================


@pytest.fixture
def store():
    """Empty in-memory tables."""
    return InMemoryStore()


@pytest.fixture
def sms():
    """Notification double that records every message."""
    return RecordingSmsService()


@pytest.fixture
def engine(
    clock,
    password_service,
    secret_token_service,
    token_service,
    mock_logger,
    store,
    sms,
):
    """Every handler wired over the in-memory adapters."""
    return build_engine(
        clock=clock,
        password_service=password_service,
        secret_token_service=secret_token_service,
        token_service=token_service,
        logger=mock_logger,
        store=store,
        sms=sms,
    )


# =============================================================================
# Real database (integration)
# =============================================================================


@pytest_asyncio.fixture
async def test_database():
    """Provide a Database with fresh tables, or skip if PostgreSQL is unreachable.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                ...
    """
    from warden.core.config import settings
    from warden.infrastructure.persistence.database import Database

    db = Database(database_url=settings.database_url, echo=settings.db_echo)
    if not await db.check_connection():
        await db.close()
        pytest.skip("PostgreSQL not reachable at DATABASE_URL")

    await db.drop_all()
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()
