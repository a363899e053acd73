"""Tiny deterministic RNG: a 16-bit Galois LFSR.

Same sequence every run for the same seed, which keeps ghost decisions reproducible.
"""

from __future__ import annotations

from . import constants as c


class Lfsr:
    __slots__ = ("state",)

    def __init__(self, seed: int = c.RNG_SEED) -> None:
        seed &= 0xFFFF
        # The all-zero register never leaves zero.
        self.state = seed if seed else c.RNG_SEED

    def next(self) -> int:
        lsb = self.state & 1
        self.state >>= 1
        if lsb:
            self.state ^= c.RNG_TAPS
        return self.state

    def range(self, lo: int, hi: int) -> int:
        """Draw from the inclusive range [lo, hi]."""
        if hi < lo:
            raise ValueError(f"range() needs hi >= lo, got lo={lo} hi={hi}")
        return lo + self.next() % (hi - lo + 1)
