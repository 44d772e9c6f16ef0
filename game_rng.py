from __future__ import annotations

"""Seedable random stream used by level generation.

Every sampling call goes through one :class:`GameRNG` instance backed by a
numpy ``Generator`` so a run never touches process-wide random state.  Two
instances built from the same seed produce identical sequences.
"""

import random
from typing import Optional

import numpy as np


class GameRNG:
    def __init__(self, seed: Optional[int] = None) -> None:
        self.initial_seed = seed if seed is not None else random.randint(0, 2**32 - 1)
        self.rng = np.random.default_rng(self.initial_seed)

    def get_range(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high)``; ``low`` when the range is empty."""
        if high <= low:
            return low
        return int(self.rng.integers(low, high))


__all__ = ["GameRNG"]
