"""
bubble.py — Bubble Sort
========================
Repeated adjacent compare/swap passes.  Each pass bubbles the largest
remaining value to the end of the unsorted suffix, which is then marked
SORTED.  A pass that performs no swap ends the sort early.

Stable: equal neighbours are never exchanged (compare is strict ">").
"""

from typing import List

from algorithms.context import SortContext, SortGenerator


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                              # 0
    "    for i in 0 .. n-2:",                           # 1
    "        swapped ← false",                          # 2
    "        for j in 0 .. n-i-2:",                     # 3
    "            if a[j] > a[j+1]:",                    # 4
    "                swap(a[j], a[j+1])",               # 5
    "                swapped ← true",                   # 6
    "        mark a[n-i-1] sorted",                     # 7
    "        if not swapped: break",                    # 8
]


def bubble_sort(ctx: SortContext) -> SortGenerator:
    """
    Yields Snapshots for every compare, swap and sorted-mark.

    Only the trailing element of each pass is marked as it settles; an
    early exit leaves the rest to the closing batch mark.
    """
    n = len(ctx)

    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if (yield from ctx.compare(j, j + 1)):
                yield from ctx.swap(j, j + 1)
                swapped = True

        yield from ctx.mark_sorted([n - i - 1])

        if not swapped:
            break

    yield from ctx.mark_all_sorted()
