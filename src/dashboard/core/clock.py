"""Clock abstraction used for cache staleness checks."""

import time
from typing import Protocol


class Clock(Protocol):
    """Source of monotonic seconds."""

    def now(self) -> float:
        ...


class SystemClock:
    """Clock backed by ``time.monotonic``."""

    def now(self) -> float:
        return time.monotonic()
