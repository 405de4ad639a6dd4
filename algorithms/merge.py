"""
merge.py — Merge Sort
======================
Top-down merge sort.  Splits at floor((left + right) / 2), sorts both
halves, then merges them back in place.

During a merge the range [left, right] is always laid out as

    merged-so-far | rest of left half | rest of right half

so every snapshot is still a permutation of the input and the two heads
being compared are real array positions.  Ties go to the left half
(``<=``), which keeps the sort stable.

Each of the three drain loops emits once per placed element, so a stop
request is honoured in whichever loop is running.
"""

from typing import List

from elements import Element, VisualState
from algorithms.context import SortContext, SortGenerator


PSEUDOCODE: List[str] = [
    "def merge_sort(a, left, right):",                  # 0
    "    if left ≥ right: return",                      # 1
    "    mid ← ⌊(left + right) / 2⌋",                   # 2
    "    merge_sort(a, left, mid)",                     # 3
    "    merge_sort(a, mid + 1, right)",                # 4
    "    merge(a, left, mid, right)",                   # 5
    "",                                                 # 6
    "def merge(a, left, mid, right):",                  # 7
    "    while both halves non-empty:",                 # 8
    "        take left head if L ≤ R else right head",  # 9
    "    copy remaining left half",                     # 10
    "    copy remaining right half",                    # 11
]


def merge_sort(ctx: SortContext) -> SortGenerator:
    yield from _merge_sort(ctx, 0, len(ctx) - 1)
    yield from ctx.mark_all_sorted()


def _merge_sort(ctx: SortContext, left: int, right: int) -> SortGenerator:
    if left >= right:
        return
    mid = (left + right) // 2
    yield from _merge_sort(ctx, left, mid)
    yield from _merge_sort(ctx, mid + 1, right)
    yield from _merge(ctx, left, mid, right)


def _merge(ctx: SortContext, left: int, mid: int, right: int) -> SortGenerator:
    a = ctx.elements
    left_run:  List[Element] = a[left:mid + 1]
    right_run: List[Element] = a[mid + 1:right + 1]
    merged:    List[Element] = []
    i = j = 0

    def lay_out() -> None:
        a[left:right + 1] = merged + left_run[i:] + right_run[j:]

    while i < len(left_run) and j < len(right_run):
        k = left + len(merged)
        right_head = k + (len(left_run) - i)

        if (yield from ctx.compare(k, right_head)):
            merged.append(right_run[j])
            j += 1
        else:
            merged.append(left_run[i])
            i += 1
        lay_out()
        yield from _write(ctx, k)

    while i < len(left_run):
        k = left + len(merged)
        merged.append(left_run[i])
        i += 1
        yield from _write(ctx, k)

    while j < len(right_run):
        k = left + len(merged)
        merged.append(right_run[j])
        j += 1
        yield from _write(ctx, k)


def _write(ctx: SortContext, k: int) -> SortGenerator:
    """One instrumented write of the merged element at slot k."""
    ctx.count(accesses=1)
    ctx.set_state(k, VisualState.SWAPPING)
    yield from ctx.emit()
    ctx.set_state(k, VisualState.DEFAULT)
