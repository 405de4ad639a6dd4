"""
Tests for the six sorting strategies, driven through the run controller
with zero pacing on the calling thread.

Checks the properties every run must have (sorted result, permutation,
all bars SORTED, monotonic counters) plus the exact counts each
algorithm produces on small inputs.
"""

import random
import unittest

from elements import from_values
from algorithms import REGISTRY, algorithms_by_tag, get_algorithm, list_algorithms
from engine import Outcome, start_run


STABLE = {"bubble", "insertion", "merge"}

INPUTS = [
    [],
    [7],
    [2, 1],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [5, 3, 8, 1],
    [2, 2, 2],
    [3, 1, 2, 3, 1, 2, 0, 0],
    [0, 100, 50, 50, 0, 25],
]


def run_sync(values, key):
    """Run `key` to completion on `values`; return (run, snapshots)."""
    snapshots = []
    run = start_run(from_values(values), snapshots.append, 0, key, background=False)
    return run, snapshots


def random_inputs(count=15, seed=1234):
    rng = random.Random(seed)
    return [[rng.randint(0, 20) for _ in range(rng.randint(0, 40))] for _ in range(count)]


class TestAllAlgorithms(unittest.TestCase):

    def test_stable_flags_and_tags(self):
        self.assertEqual({a.key for a in list_algorithms() if a.stable}, STABLE)
        self.assertEqual(
            [a.key for a in algorithms_by_tag("divide-and-conquer")], ["merge", "quick"]
        )

    def test_snapshot_to_dict(self):
        _, snaps = run_sync([2, 1], "bubble")
        d = snaps[0].to_dict()
        self.assertEqual(d["step_number"], 0)
        self.assertEqual(d["comparisons"], 1)
        self.assertEqual(d["elements"][0], {"value": 2, "id": 0, "state": "comparing"})

    def test_registry_has_six_algorithms(self):
        self.assertEqual(
            [a.key for a in list_algorithms()],
            ["bubble", "selection", "insertion", "merge", "quick", "heap"],
        )
        self.assertIsNone(get_algorithm("bogo"))

    def test_sorted_permutation_of_input(self):
        for key in REGISTRY:
            for values in INPUTS + random_inputs():
                with self.subTest(algo=key, values=values):
                    run, snaps = run_sync(values, key)
                    self.assertEqual(run.outcome, Outcome.FINISHED)
                    self.assertEqual([e.value for e in run.elements], sorted(values))
                    self.assertEqual(sorted(e.id for e in run.elements), list(range(len(values))))
                    if snaps:
                        self.assertEqual(snaps[-1].values, sorted(values))

    def test_final_snapshot_all_sorted(self):
        for key in REGISTRY:
            for values in INPUTS[1:] + random_inputs(5):
                if not values:
                    continue
                with self.subTest(algo=key, values=values):
                    _, snaps = run_sync(values, key)
                    self.assertTrue(all(s == "sorted" for s in snaps[-1].states))

    def test_every_snapshot_is_a_permutation(self):
        for key in REGISTRY:
            values = [9, 4, 7, 1, 1, 8, 3, 0, 6]
            with self.subTest(algo=key):
                _, snaps = run_sync(values, key)
                for snap in snaps:
                    self.assertEqual(sorted(snap.ids), list(range(len(values))))

    def test_stability(self):
        values = [3, 1, 2, 3, 1, 2, 1, 3, 2, 2, 1]
        for key in STABLE:
            with self.subTest(algo=key):
                run, _ = run_sync(values, key)
                for v in set(values):
                    ids = [e.id for e in run.elements if e.value == v]
                    self.assertEqual(ids, sorted(ids))

    def test_counters_monotonic_and_elapsed_non_decreasing(self):
        for key in REGISTRY:
            with self.subTest(algo=key):
                _, snaps = run_sync([6, 2, 9, 4, 4, 1, 7, 3], key)
                for prev, cur in zip(snaps, snaps[1:]):
                    self.assertLessEqual(prev.comparisons, cur.comparisons)
                    self.assertLessEqual(prev.swaps, cur.swaps)
                    self.assertLessEqual(prev.memory_accesses, cur.memory_accesses)
                    self.assertLessEqual(prev.elapsed_ms, cur.elapsed_ms)
                    self.assertEqual(prev.step_number + 1, cur.step_number)

    def test_counters_reset_between_runs(self):
        for key in REGISTRY:
            with self.subTest(algo=key):
                first, _ = run_sync([4, 3, 2, 1], key)
                second, snaps = run_sync([4, 3, 2, 1], key)
                self.assertEqual(first.context.comparisons, second.context.comparisons)
                self.assertEqual(snaps[-1].comparisons, second.context.comparisons)

    def test_empty_input_finishes_with_zero_counters(self):
        for key in REGISTRY:
            with self.subTest(algo=key):
                run, snaps = run_sync([], key)
                self.assertEqual(run.outcome, Outcome.FINISHED)
                self.assertEqual(run.context.comparisons, 0)
                self.assertEqual(run.context.swaps, 0)
                self.assertEqual(run.context.memory_accesses, 0)
                self.assertLessEqual(len(snaps), 1)

    def test_snapshots_do_not_alias_live_array(self):
        run, snaps = run_sync([5, 3, 8, 1], "bubble")
        # first emission is the compare of positions 0 and 1, before any swap
        self.assertEqual(snaps[0].values, [5, 3, 8, 1])
        self.assertEqual(snaps[0].states[:2], ["comparing", "comparing"])
        for e in run.elements:
            self.assertFalse(any(x is e for x in snaps[0].elements))


class TestBubbleSort(unittest.TestCase):

    def test_reference_scenario(self):
        run, snaps = run_sync([5, 3, 8, 1], "bubble")
        self.assertEqual(snaps[-1].values, [1, 3, 5, 8])
        self.assertEqual(run.context.comparisons, 6)
        self.assertEqual(run.context.swaps, 4)
        self.assertEqual(run.context.memory_accesses, 6 * 2 + 4 * 4)

    def test_early_exit_on_sorted_input(self):
        run, _ = run_sync([1, 2, 3, 4, 5], "bubble")
        self.assertEqual(run.context.comparisons, 4)
        self.assertEqual(run.context.swaps, 0)

    def test_swap_emits_before_and_after_exchange(self):
        _, snaps = run_sync([2, 1], "bubble")
        swapping = [s for s in snaps if "swapping" in s.states]
        self.assertEqual(len(swapping), 2)
        self.assertEqual(swapping[0].values, [2, 1])
        self.assertEqual(swapping[1].values, [1, 2])


class TestSelectionSort(unittest.TestCase):

    def test_no_swap_when_minimum_in_place(self):
        run, _ = run_sync([1, 2, 3, 4], "selection")
        self.assertEqual(run.context.swaps, 0)
        self.assertEqual(run.context.comparisons, 6)

    def test_one_swap_per_pass_at_most(self):
        run, _ = run_sync([4, 3, 2, 1], "selection")
        self.assertEqual(run.context.comparisons, 6)
        self.assertEqual(run.context.swaps, 2)

    def test_new_minimum_marked_pivot(self):
        _, snaps = run_sync([3, 1, 2], "selection")
        pivots = [s.states.index("pivot") for s in snaps if s.states.count("pivot") == 1
                  and "comparing" not in s.states]
        self.assertEqual(pivots[:2], [0, 1])


class TestInsertionSort(unittest.TestCase):

    def test_first_element_marked_sorted_first(self):
        _, snaps = run_sync([3, 1, 2], "insertion")
        self.assertEqual(snaps[0].states, ["sorted", "default", "default"])

    def test_shift_counts(self):
        run, _ = run_sync([3, 1, 2], "insertion")
        self.assertEqual(run.context.comparisons, 3)
        self.assertEqual(run.context.swaps, 2)
        self.assertEqual(run.context.memory_accesses, 3 * 2 + 2 * 2)

    def test_sorted_input_never_shifts(self):
        run, _ = run_sync([1, 2, 3, 4, 5], "insertion")
        self.assertEqual(run.context.comparisons, 4)
        self.assertEqual(run.context.swaps, 0)


class TestMergeSort(unittest.TestCase):

    def test_two_element_counts(self):
        run, _ = run_sync([2, 1], "merge")
        self.assertEqual(run.context.comparisons, 1)
        self.assertEqual(run.context.swaps, 0)
        self.assertEqual(run.context.memory_accesses, 2 + 1 + 1)

    def test_ties_favour_left_half(self):
        run, _ = run_sync([1, 1], "merge")
        self.assertEqual([e.id for e in run.elements], [0, 1])


class TestQuickSort(unittest.TestCase):

    def test_all_equal_only_pivot_placement_swaps(self):
        run, snaps = run_sync([2, 2, 2], "quick")
        self.assertEqual(run.outcome, Outcome.FINISHED)
        self.assertEqual(snaps[-1].values, [2, 2, 2])
        # one placement per partition of size >= 2: [0..2] then [1..2]
        self.assertEqual(run.context.swaps, 2)
        self.assertEqual(run.context.comparisons, 3)

    def test_pivot_already_in_place_not_swapped(self):
        run, _ = run_sync([1, 2, 3], "quick")
        self.assertEqual(run.context.swaps, 0)

    def test_last_element_is_first_pivot(self):
        _, snaps = run_sync([3, 1, 2], "quick")
        self.assertEqual(snaps[0].states, ["default", "default", "pivot"])


class TestHeapSort(unittest.TestCase):

    def test_root_marked_pivot_even_if_it_stays(self):
        _, snaps = run_sync([3, 1, 2], "heap")
        self.assertEqual(snaps[0].states, ["pivot", "default", "default"])
        # root is already the max: no swap before the extraction phase
        self.assertEqual(snaps[3].values, [3, 1, 2])

    def test_reverse_sorted(self):
        run, _ = run_sync(list(range(10, 0, -1)), "heap")
        self.assertEqual([e.value for e in run.elements], list(range(1, 11)))


if __name__ == "__main__":
    unittest.main()
