"""
array.py — Array Generation
============================
Fresh arrays are built here on every visualization reset: random values,
sequential identities, every element in the DEFAULT state.

Size and value range are shell policy; the constants below are the
defaults the web shell exposes on its sliders.
"""

import random
from typing import Iterable, List, Optional, Sequence

from elements.element import Element


# ---------------------------------------------------------------------------
# Slider bounds
# ---------------------------------------------------------------------------
DEFAULT_SIZE = 50
MIN_SIZE     = 10
MAX_SIZE     = 100
SIZE_STEP    = 5

MIN_VALUE    = 10
MAX_VALUE    = 409      # inclusive


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------
def generate_array(
    size: int = DEFAULT_SIZE,
    min_value: int = MIN_VALUE,
    max_value: int = MAX_VALUE,
    seed: Optional[int] = None,
) -> List[Element]:
    """
    Random integer values in [min_value, max_value], ids 0..size-1.

    Args:
        size      : Number of bars.
        min_value : Smallest value (inclusive, must be >= 0).
        max_value : Largest value (inclusive).
        seed      : RNG seed for reproducible arrays.
    """
    if size < 0:
        raise ValueError(f"Array size must be >= 0, got {size}")
    if min_value < 0 or max_value < min_value:
        raise ValueError(f"Invalid value range [{min_value}, {max_value}]")

    rng = random.Random(seed)
    return [Element(rng.randint(min_value, max_value), i) for i in range(size)]


def from_values(values: Iterable[float]) -> List[Element]:
    """Wrap plain numbers as Elements with sequential ids."""
    return [Element(v, i) for i, v in enumerate(values)]


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------
def values_of(elements: Sequence[Element]) -> List[float]:
    return [e.value for e in elements]
