"""Permuted congruential generator with 128-bit state (PCG XSL RR 128/64).

The state advances as a 128-bit linear congruential generator; each output
folds the state's two 64-bit halves together (XSL) and rotates the result by
the top six bits of the state (RR).

References:
    - O'Neill: "PCG: A Family of Simple Fast Space-Efficient Statistically
      Good Algorithms for Random Number Generation" (HMC-CS-2014-0905)
"""

from __future__ import annotations

import secrets
from collections.abc import Iterator

_STATE_BITS = 128
_STATE_MASK = (1 << _STATE_BITS) - 1
_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1

MULTIPLIER = (2549297995355413924 << 64) | 4865540595714422341
INCREMENT = (6364136223846793005 << 64) | 1442695040888963407


def _rotate_right(word: int, count: int) -> int:
    count %= _WORD_BITS
    return ((word >> count) | (word << (_WORD_BITS - count))) & _WORD_MASK


class PCG128Random:
    """PCG random number generator producing unsigned 64-bit integers.

    Seeded generators are reproducible across platforms; an unseeded
    generator draws its state from the operating system.

    Example:
        >>> a = PCG128Random(1, 2)
        >>> b = PCG128Random(1, 2)
        >>> a.next() == b.next()
        True
    """

    __slots__ = ("_state",)

    def __init__(self, seed_low: int | None = None, seed_high: int | None = None) -> None:
        """Initialize the generator.

        Args:
            seed_low: Low 64 bits of the seed (random state if both seeds are None).
            seed_high: High 64 bits of the seed (defaults to 0 when seed_low is given).

        Raises:
            ValueError: If a seed is outside [0, 2**64).
        """
        if seed_low is None and seed_high is None:
            self._state = secrets.randbits(_STATE_BITS)
            return

        seed_low = seed_low or 0
        seed_high = seed_high or 0
        for seed in (seed_low, seed_high):
            if not 0 <= seed <= _WORD_MASK:
                raise ValueError(f"Seed must be an unsigned 64-bit integer, got {seed}")

        self._state = 0
        self._step()
        self._state = (self._state + ((seed_high << _WORD_BITS) | seed_low)) & _STATE_MASK
        self._step()

    @property
    def state(self) -> int:
        """Current 128-bit state."""
        return self._state

    def _step(self) -> None:
        self._state = (self._state * MULTIPLIER + INCREMENT) & _STATE_MASK

    def _output(self) -> int:
        low = self._state & _WORD_MASK
        high = self._state >> _WORD_BITS
        return _rotate_right(low ^ high, high >> 58)

    def next(self) -> int:
        """Return the next unsigned 64-bit value."""
        result = self._output()
        self._step()
        return result

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()


__all__ = ["INCREMENT", "MULTIPLIER", "PCG128Random"]
