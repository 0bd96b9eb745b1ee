"""Clock adapters implementing ClockProtocol."""

from datetime import UTC, datetime, timedelta


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        """Return the current UTC time."""
        return datetime.now(UTC)


class FixedClock:
    """Manually advanced clock for deterministic expiry tests.

    Example:
        >>> clock = FixedClock(datetime(2024, 1, 1, tzinfo=UTC))
        >>> clock.advance(minutes=11)
        >>> clock.now()
        datetime.datetime(2024, 1, 1, 0, 11, tzinfo=datetime.timezone.utc)
    """

    def __init__(self, current: datetime) -> None:
        """Initialize with a timezone-aware starting time.

        Args:
            current: Starting time.
        """
        if current.tzinfo is None:
            msg = "FixedClock requires a timezone-aware datetime"
            raise ValueError(msg)
        self._current = current

    def now(self) -> datetime:
        """Return the pinned time."""
        return self._current

    def advance(self, **delta: float) -> None:
        """Move the clock forward.

        Args:
            **delta: timedelta keyword arguments (minutes=10, hours=2, ...).
        """
        self._current = self._current + timedelta(**delta)
