"""
Time-boxed single-value cache.

Holds one value with the time it was stored. The clock is injectable so
expiry can be driven from tests without sleeping.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Entry(Generic[T]):
    value: T
    stored_at: float


@dataclass
class TTLCache(Generic[T]):
    """Single value plus timestamp, valid for ``ttl_seconds``.

    Reads and writes swap one immutable entry reference, so concurrent
    readers see either the old or the new entry, never a mix.
    """

    ttl_seconds: float
    clock: Callable[[], float] = time.monotonic
    _entry: Optional[_Entry[T]] = field(default=None, init=False, repr=False)

    def get(self) -> Optional[T]:
        entry = self._entry
        if entry is None:
            return None
        if self.clock() - entry.stored_at >= self.ttl_seconds:
            return None
        return entry.value

    def set(self, value: T) -> None:
        self._entry = _Entry(value=value, stored_at=self.clock())

    def clear(self) -> None:
        self._entry = None

    @property
    def age(self) -> Optional[float]:
        entry = self._entry
        return None if entry is None else self.clock() - entry.stored_at
