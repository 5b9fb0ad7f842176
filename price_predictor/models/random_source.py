import random
from typing import Optional

from .base import RandomSource
from ..core.config import settings


class SystemRandomSource(RandomSource):
    """
    OS entropy. Used in production so two identical submissions can get
    slightly different estimates.
    """
    def __init__(self):
        self._rng = random.SystemRandom()

    def next(self) -> float:
        return self._rng.random()


class SeededRandomSource(RandomSource):
    """
    Reproducible stream: same seed -> same sequence of estimates.
    """
    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)

    def next(self) -> float:
        return self._rng.random()


class FixedRandomSource(RandomSource):
    """Always returns the same value. Meant for tests and demos."""

    NEUTRAL = 0.5  # maps to a perturbation factor of exactly 1.0

    def __init__(self, value: float):
        if not 0.0 <= value < 1.0:
            raise ValueError(f"fixed random value must be in [0, 1), got {value!r}")
        self.value = value

    @classmethod
    def neutral(cls) -> "FixedRandomSource":
        return cls(cls.NEUTRAL)

    def next(self) -> float:
        return self.value


def random_source(seed: Optional[int] = None) -> RandomSource:
    """
    Factory picks a seeded or system source based on RANDOM_SEED.
    """
    seed = seed if seed is not None else settings.RANDOM_SEED
    if seed is not None:
        return SeededRandomSource(seed)
    return SystemRandomSource()
