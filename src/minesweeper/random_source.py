"""
Deterministic random source for board generation.

Mulberry32 in pure integer arithmetic, so a seed yields the same
sequence on every platform:

    rng = Mulberry32(184254)
    value = rng.random()        # float in [0, 1)
    order = rng.shuffled(items) # Fisher-Yates copy
"""
from typing import Iterator, List, Sequence, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
INCREMENT = 0x6D2B79F5
TWO_POW_32 = 4294967296


def _imul32(a: int, b: int) -> int:
    """Low 32 bits of a 32-bit integer product."""
    return (a * b) & MASK32


class Mulberry32:
    """Seeded stream of floats in [0, 1) with 32-bit wraparound."""

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._state = seed & MASK32

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self) -> None:
        """Restart the sequence from the seed."""
        self._state = self._seed & MASK32

    def next_uint32(self) -> int:
        self._state = (self._state + INCREMENT) & MASK32
        state = self._state
        t = _imul32(state ^ (state >> 15), state | 1)
        t = ((t + _imul32(t ^ (t >> 7), t | 61)) & MASK32) ^ t
        return t ^ (t >> 14)

    def random(self) -> float:
        return self.next_uint32() / TWO_POW_32

    def randbelow(self, n: int) -> int:
        """Random integer in [0, n), scaled from ``random()``."""
        return int(self.random() * n)

    def shuffled(self, items: Sequence[T]) -> List[T]:
        """
        Return a shuffled copy of ``items``.

        Fisher-Yates from the last index down to 1, swapping each slot
        with a random slot in [0, i].
        """
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.randbelow(i + 1)
            result[i], result[j] = result[j], result[i]
        return result

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        return self.random()
