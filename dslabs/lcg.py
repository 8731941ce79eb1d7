"""A small linear congruential generator with shared and per-instance state.

Both generators step a 32-bit seed as ``seed = 214013 * seed + 2531011`` and
return bits 16..30 of the new seed, so every value lies in [0, 32767].
"""

from __future__ import annotations

import time
from typing import Optional

_MASK32 = 0xFFFFFFFF
_UNSEEDED = 0xFFFFFFFF
_KEEP_SEED = 0xFFFFFFFE
_MULTIPLIER = 214013
_INCREMENT = 2531011


def _time_seed() -> int:
    """Seed taken from the wall clock: seconds XOR microseconds."""
    seconds, microseconds = divmod(time.time_ns() // 1000, 1_000_000)
    return (seconds ^ microseconds) & _MASK32


def _step(seed: int) -> tuple[int, int]:
    """Advance seed once; return the new seed and the value it yields."""
    seed = (_MULTIPLIER * seed + _INCREMENT) & _MASK32
    return seed, (seed >> 16) & 0x7FFF


def _bounded(value: int, n: int) -> int:
    """value % n with the sign rules of truncating division (value >= 0)."""
    if n == 0:
        raise ZeroDivisionError("random bound must be non-zero")
    return value % abs(n)


class _SharedGenerator:
    """State behind urand(), urandn() and usrand()."""

    def __init__(self) -> None:
        self.seed = _UNSEEDED

    def next(self, set_seed: int = _KEEP_SEED) -> int:
        if set_seed != _KEEP_SEED:
            self.seed = set_seed
        if self.seed == _UNSEEDED:
            self.seed = _time_seed()
        self.seed, value = _step(self.seed)
        return value


_shared = _SharedGenerator()


def urand() -> int:
    """Return the next value of the shared generator, seeding it from the clock if needed."""
    return _shared.next()


def urandn(n: int) -> int:
    """Return urand() reduced modulo n."""
    return _bounded(urand(), n)


def usrand(seed: int) -> None:
    """Seed the shared generator (truncated to 32 bits) and advance it once."""
    _shared.next(seed & _MASK32)


class Random:
    """An independent generator.

    Without a seed, each new instance draws its seed from a shared
    auto-seed that is itself re-mixed after every construction.
    """

    _auto_seed = 0

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self._seed = seed & _MASK32
            return
        if Random._auto_seed == 0:
            Random._set_auto_seed(_time_seed())
        self._seed = Random._auto_seed
        high = self.rand() << 16
        low = self.rand()
        Random._set_auto_seed((high ^ low ^ _time_seed()) & _MASK32)

    @classmethod
    def _set_auto_seed(cls, value: int) -> None:
        # A zero value only queries the auto-seed, so it never replaces it.
        if value != 0:
            cls._auto_seed = value

    def rand(self, n: Optional[int] = None) -> int:
        """Return the next value, reduced modulo n when n is given."""
        self._seed, value = _step(self._seed)
        if n is None:
            return value
        return _bounded(value, n)

    def srand(self, seed: int) -> None:
        """Reset this generator to seed (truncated to 32 bits)."""
        self._seed = seed & _MASK32

    def __call__(self, n: Optional[int] = None) -> int:
        return self.rand(n)