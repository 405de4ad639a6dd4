"""
quick.py — Quick Sort
======================
Recursive quick sort with the Lomuto partition scheme:

  • the LAST element of the range is the pivot (shown as PIVOT)
  • the boundary starts at low - 1
  • every element strictly less than the pivot is swapped to the left
    of the boundary (skipped when it is already there)
  • the pivot is swapped into boundary + 1 only if that slot differs
    from its current index

Not stable.  An all-equal range performs no swaps besides pivot placement.
"""

from typing import Generator, List

from elements import VisualState
from algorithms.context import SortContext, SortGenerator
from algorithms.snapshot import Snapshot


PSEUDOCODE: List[str] = [
    "def quick_sort(a, low, high):",                    # 0
    "    if low < high:",                               # 1
    "        p ← partition(a, low, high)",              # 2
    "        quick_sort(a, low, p - 1)",                # 3
    "        quick_sort(a, p + 1, high)",               # 4
    "",                                                 # 5
    "def partition(a, low, high):",                     # 6
    "    pivot ← a[high];  i ← low - 1",                # 7
    "    for j in low .. high-1:",                      # 8
    "        if a[j] < pivot:",                         # 9
    "            i ← i + 1;  swap(a[i], a[j])",         # 10
    "    swap(a[i+1], a[high])",                        # 11
    "    return i + 1",                                 # 12
]


def quick_sort(ctx: SortContext) -> SortGenerator:
    yield from _quick_sort(ctx, 0, len(ctx) - 1)
    yield from ctx.mark_all_sorted()


def _quick_sort(ctx: SortContext, low: int, high: int) -> SortGenerator:
    if low < high:
        p = yield from _partition(ctx, low, high)
        yield from _quick_sort(ctx, low, p - 1)
        yield from _quick_sort(ctx, p + 1, high)


def _partition(ctx: SortContext, low: int, high: int) -> Generator[Snapshot, None, int]:
    yield from ctx.mark_pivot(high)

    i = low - 1
    for j in range(low, high):
        # value[pivot] > value[j]  <=>  a[j] < pivot
        less = yield from ctx.compare(high, j)
        ctx.set_state(high, VisualState.PIVOT)
        if less:
            i += 1
            if i != j:
                yield from ctx.swap(i, j)

    ctx.set_state(high, VisualState.DEFAULT)
    if i + 1 != high:
        yield from ctx.swap(i + 1, high)

    return i + 1
