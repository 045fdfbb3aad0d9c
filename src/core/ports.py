"""Ports (interfaces) used by the core engine.

Ports define the minimal contracts the core needs from its environment so
that it can be driven by a real clock in the app and a fake one in tests.
"""

from __future__ import annotations

from typing import Protocol


class ClockPort(Protocol):
    """Time source for vault TTL arithmetic."""

    def now_ms(self) -> float:
        ...
