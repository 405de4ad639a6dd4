"""
elements/
---------
Core data layer.  Public API:

    from elements import Element, VisualState
    from elements import generate_array, from_values, values_of
"""

from elements.element import Element, VisualState
from elements.array   import (
    generate_array,
    from_values,
    values_of,
    DEFAULT_SIZE,
    MIN_SIZE,
    MAX_SIZE,
    SIZE_STEP,
    MIN_VALUE,
    MAX_VALUE,
)

__all__ = [
    "Element",   "VisualState",
    "generate_array",
    "from_values",
    "values_of",
    "DEFAULT_SIZE", "MIN_SIZE", "MAX_SIZE", "SIZE_STEP",
    "MIN_VALUE",    "MAX_VALUE",
]
