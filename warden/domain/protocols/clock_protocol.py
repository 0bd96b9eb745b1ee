"""Clock protocol.

Every expiry computation and comparison in the application layer reads
time through this port so tests can pin it.
"""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current time.

        Returns:
            Timezone-aware UTC datetime.
        """
        ...
