"""
main.py — Sorting Visualizer Flask App
========================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  POST /api/array/generate     – generate a new random array
  POST /api/run                – start / pause / new-array (the play button)
  POST /api/stop               – stop the active run
  GET  /api/state              – current frame + metrics (polled by the page)
  POST /api/config/algo        – choose algorithm
  POST /api/config/size        – choose array size (regenerates)
  POST /api/config/speed       – choose speed (applies to the live run too)

State management:
  One Visualizer instance per server.  A live SortRun cannot be kept in
  the cookie session, so the shell state sits on the module-level
  Visualizer:
    • elements        – the shell's array (never mutated by a run)
    • run             – the active / last SortRun
    • latest          – newest Snapshot delivered by on_step
    • size / speed / algo_key
"""

from flask import Flask, render_template_string, request, jsonify
import logging
import os
import sys
import threading
from typing import List, Optional

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from elements import Element, generate_array, DEFAULT_SIZE, MIN_SIZE, MAX_SIZE
from algorithms import Snapshot, get_algorithm, list_algorithms
from engine import (
    SortRun,
    Outcome,
    RunConfigError,
    RunMetrics,
    start_run,
    speed_to_pacing,
    DEFAULT_SPEED,
    MIN_SPEED,
    MAX_SPEED,
)
from ui import (
    render_bars,
    playback_controls,
    algorithm_selector,
    array_controls,
    metrics_panel,
    pseudocode_viewer,
)


logger = logging.getLogger(__name__)

app = Flask(__name__)


# ---------------------------------------------------------------------------
# Shell State
# ---------------------------------------------------------------------------
class Visualizer:
    """
    The one visualization instance.  Forwards user intent into the engine
    and keeps the newest Snapshot for the page to poll.
    """

    def __init__(self, size: int = DEFAULT_SIZE, seed: Optional[int] = None):
        self.size:      int                 = size
        self.speed:     int                 = DEFAULT_SPEED
        self.algo_key:  str                 = "bubble"
        self.elements:  List[Element]       = generate_array(size, seed=seed)
        self.run:       Optional[SortRun]   = None
        self.latest:    Optional[Snapshot]  = None
        self.is_sorted: bool                = False
        self._lock = threading.Lock()

    # -- queries --
    @property
    def is_playing(self) -> bool:
        return self.run is not None and self.run.is_running

    def frame(self) -> List[Element]:
        """What the canvas should show right now."""
        self.sync()
        with self._lock:
            if self.is_playing and self.latest is not None:
                return list(self.latest.elements)
            return list(self.elements)

    def metrics(self) -> Optional[RunMetrics]:
        return RunMetrics.from_run(self.run) if self.run else None

    # -- commands --
    def reset(self, seed: Optional[int] = None) -> None:
        self.stop()
        with self._lock:
            self.elements  = generate_array(self.size, seed=seed)
            self.run       = None
            self.latest    = None
            self.is_sorted = False

    def start(self) -> SortRun:
        self.sync()
        with self._lock:
            self.latest = None
            self.run = start_run(
                self.elements, self._on_step, speed_to_pacing(self.speed), self.algo_key
            )
        return self.run

    def stop(self) -> None:
        if self.run is not None:
            self.run.stop()
            self.run.wait(timeout=1.0)
            self.sync()

    def set_speed(self, speed: int) -> None:
        self.speed = max(MIN_SPEED, min(MAX_SPEED, int(speed)))
        if self.is_playing:
            self.run.pacing_ms = speed_to_pacing(self.speed)

    def sync(self) -> None:
        """Once a run settles, its last frame becomes the shell's array."""
        run = self.run
        if run is None or run.is_running:
            return
        with self._lock:
            if run.last_snapshot is not None and self.latest is run.last_snapshot:
                self.elements = list(run.last_snapshot.elements)
                self.latest = None
                logger.debug("Adopted final frame of %s run (%s)", run.algo.key, run.outcome.value)
            self.is_sorted = run.outcome == Outcome.FINISHED

    # -- internal --
    def _on_step(self, snapshot: Snapshot) -> None:
        with self._lock:
            self.latest = snapshot


visualizer = Visualizer()


def get_visualizer() -> Visualizer:
    return visualizer


def get_state() -> dict:
    """Return current app state as a dict."""
    vis = get_visualizer()
    vis.sync()
    run = vis.run
    metrics = vis.metrics()
    return {
        "selected_algo": vis.algo_key,
        "size":          vis.size,
        "speed":         vis.speed,
        "is_playing":    vis.is_playing,
        "is_sorted":     vis.is_sorted,
        "outcome":       run.outcome.value if run and run.outcome else None,
        "error":         str(run.error) if run and run.error else None,
        "metrics":       metrics.to_dict() if metrics else None,
    }


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    vis = get_visualizer()
    locked = vis.is_playing
    html = render_template_string(INDEX_TEMPLATE,
        svg=render_bars(vis.frame()),
        playback=playback_controls(is_playing=locked, is_sorted=vis.is_sorted),
        algo_selector=algorithm_selector(list_algorithms(), vis.algo_key, locked=locked),
        array_controls=array_controls(vis.size, vis.speed, locked=locked),
        metrics=metrics_panel(vis.metrics()),
        pseudocode=pseudocode_viewer(get_algorithm(vis.algo_key)),
    )
    return html


# ---------------------------------------------------------------------------
# API: Array & Run
# ---------------------------------------------------------------------------
@app.route("/api/array/generate", methods=["POST"])
def api_array_generate():
    vis = get_visualizer()
    data = request.get_json(silent=True) or {}
    vis.reset(seed=data.get("seed"))
    return jsonify({"svg": render_bars(vis.frame()), **get_state()})


@app.route("/api/run", methods=["POST"])
def api_run():
    vis = get_visualizer()
    vis.sync()

    if vis.is_playing:
        vis.stop()
    elif vis.is_sorted:
        vis.reset()
    else:
        try:
            vis.start()
        except RunConfigError as e:
            return jsonify({"error": str(e)}), 400

    return jsonify(get_state())


@app.route("/api/stop", methods=["POST"])
def api_stop():
    get_visualizer().stop()
    return jsonify(get_state())


@app.route("/api/state")
def api_state():
    vis = get_visualizer()
    svg = render_bars(vis.frame())
    state = get_state()
    return jsonify({
        "svg":      svg,
        "metrics_html": metrics_panel(vis.metrics()),
        "playback": playback_controls(is_playing=state["is_playing"], is_sorted=state["is_sorted"]),
        **state,
    })


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    vis = get_visualizer()
    algo_key = (request.get_json(silent=True) or {}).get("algo_key", "bubble")

    if vis.is_playing:
        return jsonify({"error": "Stop the current run first"}), 400
    algo_info = get_algorithm(algo_key)
    if algo_info is None:
        return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 400

    vis.algo_key = algo_key
    return jsonify({"algo_key": algo_key, "pseudocode": pseudocode_viewer(algo_info)})


@app.route("/api/config/size", methods=["POST"])
def api_config_size():
    vis = get_visualizer()
    size = (request.get_json(silent=True) or {}).get("size", DEFAULT_SIZE)

    if vis.is_playing:
        return jsonify({"error": "Stop the current run first"}), 400
    if not isinstance(size, int) or not (MIN_SIZE <= size <= MAX_SIZE):
        return jsonify({"error": f"Size must be an integer in [{MIN_SIZE}, {MAX_SIZE}]"}), 400

    vis.size = size
    vis.reset()
    return jsonify({"svg": render_bars(vis.frame()), **get_state()})


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    vis = get_visualizer()
    speed = (request.get_json(silent=True) or {}).get("speed", DEFAULT_SPEED)
    try:
        vis.set_speed(speed)
    except (TypeError, ValueError):
        return jsonify({"error": "Speed must be a number"}), 400
    return jsonify({"speed": vis.speed, "pacing_ms": speed_to_pacing(vis.speed)})


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Algorithm Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-emerald: #10b981;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      padding: 24px;
    }

    h1 { text-align: center; margin-bottom: 24px; }
    h3 { font-size: 14px; margin-bottom: 8px; color: var(--text-secondary); }

    #controls {
      display: grid;
      grid-template-columns: repeat(3, 1fr);
      gap: 16px;
      margin-bottom: 24px;
    }

    .panel, .code-block {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 16px;
    }

    .metrics-panel {
      display: grid;
      grid-template-columns: repeat(4, 1fr);
      text-align: center;
      margin-bottom: 24px;
    }
    .metric-value { font-size: 24px; font-weight: 700; color: var(--accent-cyan); }
    .metric-label { font-size: 12px; color: var(--text-secondary); text-transform: uppercase; }

    #canvas-container { display: flex; justify-content: center; margin-bottom: 24px; }

    .code-line { font-family: monospace; white-space: pre; font-size: 13px; }

    button, select, input { font-size: 14px; margin: 4px 0; width: 100%; }
    .btn-primary { background: var(--accent-emerald); color: white; border: 0; padding: 8px; border-radius: 8px; }
  </style>
</head>
<body>
  <h1>Sorting Algorithm Visualizer</h1>

  <div id="controls">
    <div id="algo">{{ algo_selector|safe }}</div>
    <div id="array">{{ array_controls|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
  </div>

  <div id="metrics">{{ metrics|safe }}</div>
  <div id="canvas-container"><div id="canvas-svg">{{ svg|safe }}</div></div>
  <div id="pseudocode">{{ pseudocode|safe }}</div>

  <script>
    async function post(url, body) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(body || {}),
      });
      return res.json();
    }

    let polling = null;

    function setLocked(locked) {
      ['algo-selector', 'size-slider'].forEach(id => {
        const el = document.getElementById(id);
        if (el) el.disabled = locked;
      });
    }

    async function refresh() {
      const data = await (await fetch('/api/state')).json();
      document.getElementById('canvas-svg').innerHTML = data.svg;
      document.getElementById('metrics').innerHTML = data.metrics_html;
      document.getElementById('playback').innerHTML = data.playback;
      bindPlayback();
      setLocked(data.is_playing);
      if (!data.is_playing && polling) {
        clearInterval(polling);
        polling = null;
      }
    }

    function bindPlayback() {
      document.getElementById('btn-play')?.addEventListener('click', async () => {
        const data = await post('/api/run');
        if (data.error) { alert(data.error); return; }
        if (data.is_playing && !polling) polling = setInterval(refresh, 50);
        refresh();
      });
      document.getElementById('btn-reset')?.addEventListener('click', async () => {
        await post('/api/array/generate');
        refresh();
      });
    }
    bindPlayback();

    document.getElementById('algo-selector')?.addEventListener('change', async (e) => {
      const data = await post('/api/config/algo', {algo_key: e.target.value});
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
    });

    document.getElementById('size-slider')?.addEventListener('change', async (e) => {
      document.getElementById('size-val').textContent = e.target.value;
      await post('/api/config/size', {size: +e.target.value});
      refresh();
    });

    document.getElementById('speed-slider')?.addEventListener('input', async (e) => {
      document.getElementById('speed-val').textContent = e.target.value;
      await post('/api/config/speed', {speed: +e.target.value});
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("=" * 60)
    print("  Sorting Algorithm Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=False, threaded=True)
