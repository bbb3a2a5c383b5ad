from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    def now(self) -> datetime:
        """Return current local time."""
        ...

    def now_utc(self) -> datetime:
        """Return current UTC time."""
        ...
