"""
Tests for the Flask shell: routes forward user intent into the engine
and refuse structural changes while a run is active.
"""

import unittest

import main
from main import Visualizer, app


class TestApp(unittest.TestCase):

    def setUp(self):
        main.visualizer = Visualizer(size=10, seed=7)
        main.visualizer.set_speed(100)
        self.vis = main.visualizer
        self.client = app.test_client()

    def tearDown(self):
        self.vis.stop()

    def test_index_renders(self):
        res = self.client.get("/")
        self.assertEqual(res.status_code, 200)
        self.assertIn(b"Sorting Algorithm Visualizer", res.data)
        self.assertEqual(res.data.count(b'class="bar '), 10)

    def test_unknown_algorithm_rejected(self):
        res = self.client.post("/api/config/algo", json={"algo_key": "bogo"})
        self.assertEqual(res.status_code, 400)
        self.assertEqual(self.vis.algo_key, "bubble")

    def test_select_algorithm(self):
        res = self.client.post("/api/config/algo", json={"algo_key": "heap"})
        self.assertEqual(res.status_code, 200)
        data = res.get_json()
        self.assertIn("Heap Sort", data["pseudocode"])
        self.assertIn("max-heap", data["pseudocode"])
        self.assertEqual(data["algo_key"], "heap")
        self.assertNotIn("algo_selector", data)
        self.assertEqual(self.vis.algo_key, "heap")

    def test_size_bounds(self):
        self.assertEqual(self.client.post("/api/config/size", json={"size": 5}).status_code, 400)
        res = self.client.post("/api/config/size", json={"size": 20})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(len(self.vis.elements), 20)

    def test_run_to_completion(self):
        self.client.post("/api/config/algo", json={"algo_key": "merge"})
        res = self.client.post("/api/run")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(self.vis.run.wait(10), main.Outcome.FINISHED)

        state = self.client.get("/api/state").get_json()
        self.assertFalse(state["is_playing"])
        self.assertTrue(state["is_sorted"])
        self.assertEqual(state["outcome"], "finished")
        values = [e.value for e in self.vis.elements]
        self.assertEqual(values, sorted(values))

        # play on a sorted array generates a fresh one
        self.client.post("/api/run")
        self.assertFalse(self.vis.is_sorted)
        self.assertIsNone(self.vis.run)

    def test_structural_controls_locked_while_running(self):
        self.vis.set_speed(1)
        self.client.post("/api/run")
        self.assertTrue(self.vis.is_playing)

        self.assertEqual(self.client.post("/api/config/algo", json={"algo_key": "quick"}).status_code, 400)
        self.assertEqual(self.client.post("/api/config/size", json={"size": 20}).status_code, 400)

        state = self.client.post("/api/stop").get_json()
        self.assertFalse(state["is_playing"])
        self.assertEqual(state["outcome"], "stopped")
        self.assertFalse(state["is_sorted"])

    def test_speed_change_applies_to_live_run(self):
        self.vis.set_speed(1)
        self.client.post("/api/run")
        res = self.client.post("/api/config/speed", json={"speed": 90})
        self.assertEqual(res.get_json()["pacing_ms"], 11.0)
        self.assertEqual(self.vis.run.pacing_ms, 11.0)

    def test_bad_speed(self):
        res = self.client.post("/api/config/speed", json={"speed": "fast"})
        self.assertEqual(res.status_code, 400)


if __name__ == "__main__":
    unittest.main()
