"""Clock adapters."""

from warden.infrastructure.clock.system_clock import FixedClock, SystemClock

__all__ = ["FixedClock", "SystemClock"]
