"""
context.py — Instrumentation Primitives
=========================================
SortContext is the shared object every algorithm is composed with.  It
owns the live array and the performance counters, and exposes the
instrumented primitives an algorithm is built from:

    compare(i, j)        – +1 comparison, +2 accesses, two bars COMPARING
    swap(i, j)           – +1 swap, +4 accesses, emits before AND after the exchange
    mark_pivot(i)        – PIVOT, no counters
    mark_sorted(indices) – SORTED, no counters
    emit()               – the single emission point everything funnels through

Every primitive is a generator.  Algorithms call them with ``yield from``:

    if (yield from ctx.compare(j, j + 1)):
        yield from ctx.swap(j, j + 1)

Each ``yield`` hands one Snapshot to the run driver (engine.SortRun),
which checks cancellation, forwards the snapshot to the observer and
waits out the pacing interval before resuming the generator.  If the
run has been stopped the driver simply never resumes it, so the
algorithm unwinds without doing further work and without emitting.

Suspension happens ONLY inside emit().  Pure index arithmetic and
recursion setup in the algorithms never yield, so counters in a
snapshot always match the mutations already applied.
"""

import time
from typing import Generator, Iterable, List, Optional

from elements import Element, VisualState
from algorithms.snapshot import Snapshot


# An algorithm or primitive: yields Snapshots, receives nothing, may return a value.
SortGenerator = Generator[Snapshot, None, None]


class SortContext:
    """
    Attributes:
        elements        : The live array.  Owned by the run; mutated in place.
        comparisons     : Running comparison count.
        swaps           : Running swap / shift count.
        memory_accesses : Running array-access count.
    """

    def __init__(self, elements: List[Element]):
        self.elements:        List[Element]    = elements
        self.comparisons:     int              = 0
        self.swaps:           int              = 0
        self.memory_accesses: int              = 0

        self._step_no:    int               = 0
        self._started_at: Optional[float]   = None

    def __len__(self) -> int:
        return len(self.elements)

    # ------------------------------------------------------------------
    # Clock & counters
    # ------------------------------------------------------------------
    def start_clock(self) -> None:
        self._started_at = time.monotonic()

    @property
    def elapsed_ms(self) -> float:
        if self._started_at is None:
            return 0.0
        return (time.monotonic() - self._started_at) * 1000

    def count(self, comparisons: int = 0, swaps: int = 0, accesses: int = 0) -> None:
        """Bump counters for an algorithm-specific instrumented step."""
        self.comparisons     += comparisons
        self.swaps           += swaps
        self.memory_accesses += accesses

    def set_state(self, index: int, state: VisualState) -> None:
        """Retag one bar without emitting."""
        self.elements[index].state = state

    # ------------------------------------------------------------------
    # Emission point
    # ------------------------------------------------------------------
    def snapshot(self) -> Snapshot:
        return Snapshot(
            step_number=self._step_no,
            elements=tuple(e.copy() for e in self.elements),
            comparisons=self.comparisons,
            swaps=self.swaps,
            memory_accesses=self.memory_accesses,
            elapsed_ms=self.elapsed_ms,
        )

    def emit(self) -> SortGenerator:
        snap = self.snapshot()
        self._step_no += 1
        yield snap

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------
    def compare(self, i: int, j: int) -> Generator[Snapshot, None, bool]:
        """True if value[i] > value[j].  Does not reorder anything."""
        self.count(comparisons=1, accesses=2)
        a = self.elements
        a[i].state = VisualState.COMPARING
        a[j].state = VisualState.COMPARING
        yield from self.emit()

        result = a[i].value > a[j].value

        a[i].state = VisualState.DEFAULT
        a[j].state = VisualState.DEFAULT
        return result

    def swap(self, i: int, j: int) -> SortGenerator:
        self.count(swaps=1, accesses=4)
        a = self.elements
        a[i].state = VisualState.SWAPPING
        a[j].state = VisualState.SWAPPING
        yield from self.emit()

        a[i], a[j] = a[j], a[i]
        yield from self.emit()

        a[i].state = VisualState.DEFAULT
        a[j].state = VisualState.DEFAULT

    def mark_pivot(self, index: int) -> SortGenerator:
        self.elements[index].state = VisualState.PIVOT
        yield from self.emit()

    def mark_sorted(self, indices: Iterable[int]) -> SortGenerator:
        for index in indices:
            self.elements[index].state = VisualState.SORTED
        yield from self.emit()

    def mark_all_sorted(self) -> SortGenerator:
        """The closing batch emission every algorithm ends with."""
        yield from self.mark_sorted(range(len(self.elements)))
