"""
heap.py — Heap Sort
====================
Builds a max-heap bottom-up, starting from the last parent (n // 2 - 1),
then repeatedly swaps the root with the end of the shrinking heap, marks
that slot SORTED and sifts the new root down.

heapify always marks the candidate root as PIVOT before looking at its
children, even when it ends up not moving.

Not stable.
"""

from typing import List

from elements import VisualState
from algorithms.context import SortContext, SortGenerator


PSEUDOCODE: List[str] = [
    "def heap_sort(a):",                                # 0
    "    for i in n/2-1 .. 0:  heapify(a, n, i)",       # 1
    "    for end in n-1 .. 1:",                         # 2
    "        swap(a[0], a[end])",                       # 3
    "        heapify(a, end, 0)",                       # 4
    "",                                                 # 5
    "def heapify(a, size, i):",                         # 6
    "    largest ← i",                                  # 7
    "    if left < size and a[left] > a[largest]:",     # 8
    "        largest ← left",                           # 9
    "    if right < size and a[right] > a[largest]:",   # 10
    "        largest ← right",                          # 11
    "    if largest ≠ i:",                              # 12
    "        swap(a[i], a[largest]);  heapify(a, size, largest)",  # 13
]


def heap_sort(ctx: SortContext) -> SortGenerator:
    n = len(ctx)

    for i in range(n // 2 - 1, -1, -1):
        yield from _heapify(ctx, n, i)

    for end in range(n - 1, 0, -1):
        yield from ctx.swap(0, end)
        yield from ctx.mark_sorted([end])
        yield from _heapify(ctx, end, 0)

    if n > 0:
        yield from ctx.mark_sorted([0])

    yield from ctx.mark_all_sorted()


def _heapify(ctx: SortContext, size: int, i: int) -> SortGenerator:
    largest = i
    yield from ctx.mark_pivot(largest)

    for child in (2 * i + 1, 2 * i + 2):
        if child >= size:
            continue
        if (yield from ctx.compare(child, largest)):
            largest = child
            yield from ctx.mark_pivot(largest)
        else:
            ctx.set_state(largest, VisualState.PIVOT)

    ctx.set_state(largest, VisualState.DEFAULT)
    if largest != i:
        yield from ctx.swap(i, largest)
        yield from _heapify(ctx, size, largest)
