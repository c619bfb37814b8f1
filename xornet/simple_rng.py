"""
simple_rng.py
~~~~~~~~~~~~~

Deterministic pseudo-random source used for weight initialization.

A linear congruential generator whose sequence is reproducible bit for bit
on any platform with identical integer arithmetic.
"""

from typing import Iterator

MULTIPLIER = 1664525
INCREMENT = 1013904223
MODULUS = 2 ** 32

# Outputs are normalized by the largest 32-bit unsigned value, not MODULUS.
U32_MAX = MODULUS - 1


class SimpleRng:
    """
    Linear congruential generator over a 32-bit state.

    The only way to restart the sequence is to build a new generator
    with the same seed.
    """

    def __init__(self, seed: int):
        self.seed = seed

    def next_float(self) -> float:
        """
        Advance the state and return it normalized to [0, 1].

        Returns:
            float: The new state divided by ``2**32 - 1``
        """
        self.seed = (MULTIPLIER * self.seed + INCREMENT) % MODULUS
        return self.seed / U32_MAX

    def gen_range(self, low: float, high: float) -> float:
        """Draw a value in the closed range [low, high]."""
        return low + (high - low) * self.next_float()

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.next_float()
