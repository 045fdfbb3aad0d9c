"""System clock adapter.

Implements the core ClockPort with a monotonic clock so vault TTLs are not
affected by wall-clock adjustments.
"""

from __future__ import annotations

import time


class SystemClock:
    """Monotonic milliseconds that satisfy the ClockPort contract."""

    def now_ms(self) -> float:
        return time.monotonic() * 1000
