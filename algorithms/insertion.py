"""
insertion.py — Insertion Sort
==============================
Grows a sorted prefix one key at a time.  The key (shown as PIVOT) walks
left while its predecessor is strictly greater; each step compares the
pair and then shifts the predecessor one slot right.

The shift is not the generic swap primitive: the key is held out, so a
shift costs one swap and two accesses instead of four.  The array stays
a permutation at every emitted snapshot.

Stable: the walk stops at the first predecessor that is <= the key.
The prefix is marked SORTED as it grows, so no closing batch is needed.
"""

from typing import List

from elements import VisualState
from algorithms.context import SortContext, SortGenerator


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                           # 0
    "    mark a[0] sorted",                             # 1
    "    for i in 1 .. n-1:",                           # 2
    "        key ← a[i]",                               # 3
    "        j ← i - 1",                                # 4
    "        while j ≥ 0 and a[j] > key:",              # 5
    "            a[j+1] ← a[j]",                        # 6
    "            j ← j - 1",                            # 7
    "        a[j+1] ← key",                             # 8
    "        mark a[0..i] sorted",                      # 9
]


def insertion_sort(ctx: SortContext) -> SortGenerator:
    a = ctx.elements
    n = len(a)

    if n == 0:
        return
    yield from ctx.mark_sorted([0])

    for i in range(1, n):
        yield from ctx.mark_pivot(i)

        # the key always sits at j + 1
        j = i - 1
        while j >= 0:
            greater = yield from ctx.compare(j, j + 1)
            ctx.set_state(j + 1, VisualState.PIVOT)
            if not greater:
                ctx.set_state(j, VisualState.SORTED)
                break

            yield from _shift(ctx, j)
            j -= 1

        yield from ctx.mark_sorted([j + 1])


def _shift(ctx: SortContext, j: int) -> SortGenerator:
    """Move a[j] one slot right; the held key drops into slot j."""
    a = ctx.elements
    ctx.count(swaps=1, accesses=2)

    key = a[j + 1]
    a[j + 1] = a[j]
    a[j] = key
    a[j + 1].state = VisualState.SWAPPING
    a[j].state = VisualState.PIVOT
    yield from ctx.emit()

    a[j + 1].state = VisualState.SORTED
