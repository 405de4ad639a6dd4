"""
selection.py — Selection Sort
==============================
For each position i, scan the unsorted suffix for the true minimum.
The running minimum is shown as PIVOT and re-marked every time a smaller
value is found; the single swap happens at the end of the scan.

When the minimum is already at position i the swap primitive is skipped
entirely, so the swap counter only counts real exchanges.

Not stable.
"""

from typing import List

from elements import VisualState
from algorithms.context import SortContext, SortGenerator


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                           # 0
    "    for i in 0 .. n-2:",                           # 1
    "        min ← i",                                  # 2
    "        for j in i+1 .. n-1:",                     # 3
    "            if a[j] < a[min]:",                    # 4
    "                min ← j",                          # 5
    "        if min ≠ i: swap(a[i], a[min])",           # 6
    "        mark a[i] sorted",                         # 7
]


def selection_sort(ctx: SortContext) -> SortGenerator:
    n = len(ctx)

    for i in range(n - 1):
        min_idx = i
        yield from ctx.mark_pivot(min_idx)

        for j in range(i + 1, n):
            # value[min] > value[j]  <=>  a[j] is a new minimum
            if (yield from ctx.compare(min_idx, j)):
                min_idx = j
                yield from ctx.mark_pivot(min_idx)
            else:
                ctx.set_state(min_idx, VisualState.PIVOT)

        ctx.set_state(min_idx, VisualState.DEFAULT)
        if min_idx != i:
            yield from ctx.swap(i, min_idx)

        yield from ctx.mark_sorted([i])

    if n > 0:
        yield from ctx.mark_sorted([n - 1])

    yield from ctx.mark_all_sorted()
