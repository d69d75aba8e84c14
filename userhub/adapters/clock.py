"""
Clock and UUID adapters - Implement ClockHolder and UuidHolder protocols.

System implementations read the real clock and uuid4; fixed
implementations return a preset value so service behavior is
deterministic under test.
"""

import time
import uuid


class SystemClockHolder:
    """Implements ClockHolder using the wall clock."""

    def millis(self) -> int:
        return time.time_ns() // 1_000_000


class SystemUuidHolder:
    """Implements UuidHolder with random (version 4) UUIDs."""

    def random(self) -> str:
        return str(uuid.uuid4())


class FixedClockHolder:
    """Implements ClockHolder returning a preset epoch-millisecond value."""

    def __init__(self, millis: int) -> None:
        self._millis = millis

    def millis(self) -> int:
        return self._millis


class FixedUuidHolder:
    """Implements UuidHolder returning a preset token."""

    def __init__(self, value: str) -> None:
        self._value = value

    def random(self) -> str:
        return self._value
