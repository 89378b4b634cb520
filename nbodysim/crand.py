"""A pseudo-random generator that reproduces the C library's ``rand``.

The sequence matches the additive feedback generator used by the GNU C
library, so that seeded initial conditions are reproducible bit for bit.
"""

from __future__ import annotations

from collections import deque

__all__ = ["CRandom", "RAND_MAX"]

RAND_MAX = 2147483647

_MASK = 0xFFFFFFFF
_DEGREE = 34
_LAG_FAR = 3
_LAG_NEAR = 31
_WARMUP = 310


def _trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero, as in C."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class CRandom:
    """Seedable generator yielding integers in ``[0, RAND_MAX]``."""

    def __init__(self, seed: int = 1) -> None:
        self._state: deque[int] = deque(maxlen=_DEGREE)
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the generator; a seed of 0 behaves like 1."""
        value = (seed & _MASK) or 1
        word = value - (1 << 32) if value >= 1 << 31 else value
        state = [value]
        for _ in range(30):
            hi = _trunc_div(word, 127773)
            lo = word - hi * 127773
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += 2147483647
            state.append(word)
        state.extend(state[:3])
        self._state = deque((v & _MASK for v in state), maxlen=_DEGREE)
        for _ in range(_WARMUP):
            self._step()

    def _step(self) -> int:
        value = (self._state[_LAG_FAR] + self._state[_LAG_NEAR]) & _MASK
        self._state.append(value)
        return value >> 1

    def rand(self) -> int:
        """Return the next number of the sequence."""
        return self._step()

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self._step()