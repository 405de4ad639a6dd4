from enum import Enum
from typing import Dict, Any


# ---------------------------------------------------------------------------
# Visual State Enum — maps 1-to-1 with the bar colour palette
# ---------------------------------------------------------------------------
class VisualState(Enum):
    DEFAULT    = "default"     # neutral bar
    COMPARING  = "comparing"   # highlight A — two bars being compared
    SWAPPING   = "swapping"    # highlight B — bars being exchanged / written
    SORTED     = "sorted"      # success colour — in final position
    PIVOT      = "pivot"       # highlight C — pivot / current candidate


# ---------------------------------------------------------------------------
# Element
# ---------------------------------------------------------------------------
class Element:
    """
    Immutable identity (id), mutable value position and visual state.

    Attributes:
        value : Non-negative number that determines the bar height.
        id    : Stable integer identity, assigned once at generation.  Lets the
                renderer follow a bar across reorderings.
        state : Current VisualState.  Advisory only; no algorithm reads it.
    """

    __slots__ = ("value", "id", "state")

    def __init__(
        self,
        value: float,
        element_id: int,
        state: VisualState = VisualState.DEFAULT,
    ):
        if value < 0:
            raise ValueError(f"Element value must be >= 0, got {value}")
        self.value: float        = value
        self.id: int             = element_id
        self.state: VisualState  = state

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def copy(self) -> "Element":
        return Element(self.value, self.id, self.state)

    def reset(self) -> None:
        self.state = VisualState.DEFAULT

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "id": self.id, "state": self.state.value}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return (self.value, self.id, self.state) == (other.value, other.id, other.state)

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Element(id={self.id}, value={self.value}, state={self.state.value})"
