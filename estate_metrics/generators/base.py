"""Seeded Faker base for synthetic listing data."""

from __future__ import annotations

import random
from abc import ABC
from typing import Sequence, TypeVar

from faker import Faker

T = TypeVar("T")


class BaseGenerator(ABC):
    """Base class for listing data generators.

    Owns the Faker instance and seeds both Faker and ``random`` so a
    generator built with the same seed yields the same records.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_IN`` for Indian names and streets).
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_IN",
    ) -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    @staticmethod
    def weighted(options: Sequence[T], weights: Sequence[float]) -> T:
        """Pick one option with the given relative weights."""
        return random.choices(options, weights=weights, k=1)[0]

    @staticmethod
    def rupees(low: float, high: float, step: int = 1000) -> float:
        """Uniform amount between ``low`` and ``high``, rounded down to ``step``."""
        return float(int(random.uniform(low, high)) // step * step)
