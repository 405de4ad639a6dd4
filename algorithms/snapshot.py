"""
snapshot.py — Run Snapshot
===========================
Every primitive in a sorting run yields a Snapshot.  A Snapshot is a
frozen-in-time picture of everything the visualizer needs to render one
frame:

    • The full bar sequence (value, identity, visual state) in array order
    • Cumulative comparisons / swaps / memory accesses
    • Wall-clock time since the run started

Design decisions:
  - Snapshot is a frozen dataclass holding a TUPLE of Element copies.
    It never aliases the live array, so the renderer can read it later
    from another thread while the algorithm keeps mutating.
  - The algorithm generator is the only writer of the live array; the
    run driver and the renderer are pure readers of Snapshots.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from elements import Element


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        step_number     : 0-based index of this emission in the run.
        elements        : Copies of every Element, in array order.
        comparisons     : Running comparison count.
        swaps           : Running swap / shift count.
        memory_accesses : Running array-access count.
        elapsed_ms      : Milliseconds since the run started (monotonic).
    """

    step_number:      int                    = 0
    elements:         Tuple[Element, ...]    = field(default_factory=tuple)
    comparisons:      int                    = 0
    swaps:            int                    = 0
    memory_accesses:  int                    = 0
    elapsed_ms:       float                  = 0.0

    @property
    def values(self) -> List[float]:
        return [e.value for e in self.elements]

    @property
    def ids(self) -> List[int]:
        return [e.id for e in self.elements]

    @property
    def states(self) -> List[str]:
        return [e.state.value for e in self.elements]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":     self.step_number,
            "elements":        [e.to_dict() for e in self.elements],
            "comparisons":     self.comparisons,
            "swaps":           self.swaps,
            "memory_accesses": self.memory_accesses,
            "elapsed_ms":      round(self.elapsed_ms, 2),
        }
