"""Process-wide request hit counter."""

from __future__ import annotations

from threading import Lock


class HitCounter:
    """Counter safe to increment from concurrent request threads."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._hits = 0

    def increment(self) -> int:
        with self._lock:
            self._hits += 1
            return self._hits

    @property
    def value(self) -> int:
        with self._lock:
            return self._hits

    def reset(self) -> None:
        with self._lock:
            self._hits = 0


_HIT_COUNTER = HitCounter()


def get_hit_counter() -> HitCounter:
    """Return the shared hit counter instance."""
    return _HIT_COUNTER
