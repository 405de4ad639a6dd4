"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – start / stop / new-array button
  • algorithm_selector  – dropdown with complexity labels
  • array_controls      – array-size and speed sliders
  • metrics_panel       – comparisons, swaps, accesses, time elapsed
  • pseudocode_viewer   – the selected algorithm's pseudocode

Design:
  - All panels are stateless render functions.
  - Structural controls (size, algorithm) render disabled while a run is active.
  - Output is raw HTML strings (no templating engine).
"""

from html import escape
from typing import List, Optional

from algorithms import AlgoInfo
from elements import MIN_SIZE, MAX_SIZE, SIZE_STEP
from engine import RunMetrics, MIN_SPEED, MAX_SPEED


def _disabled(flag: bool) -> str:
    return "disabled" if flag else ""


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(is_playing: bool = False, is_sorted: bool = False) -> str:
    if is_playing:
        icon, label = "⏸", "Pause"
    elif is_sorted:
        icon, label = "🔀", "Generate New Array"
    else:
        icon, label = "▶", "Start Sorting"

    return f"""
    <div class="panel playback-controls">
      <button id="btn-play" class="btn-primary">{icon} {label}</button>
      <button id="btn-reset" title="New random array">↺ Reset</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bubble",
    locked: bool = False,
) -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(
            f'<option value="{algo.key}" title="{escape(algo.description)}" {sel}>{algo.label} — {algo.complexity_time}</option>'
        )

    return f"""
    <div class="panel algorithm-selector">
      <h3>Algorithm</h3>
      <select id="algo-selector" {_disabled(locked)}>
        {''.join(options)}
      </select>
    </div>
    """


# ---------------------------------------------------------------------------
# Array Size & Speed
# ---------------------------------------------------------------------------
def array_controls(size: int, speed: int, locked: bool = False) -> str:
    return f"""
    <div class="panel array-controls">
      <label>Array Size: <span id="size-val">{size}</span></label>
      <input type="range" id="size-slider" min="{MIN_SIZE}" max="{MAX_SIZE}"
             step="{SIZE_STEP}" value="{size}" {_disabled(locked)}>
      <label>Speed: <span id="speed-val">{speed}</span></label>
      <input type="range" id="speed-slider" min="{MIN_SPEED}" max="{MAX_SPEED}"
             step="1" value="{speed}">
    </div>
    """


# ---------------------------------------------------------------------------
# Metrics Panel
# ---------------------------------------------------------------------------
def metrics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        metrics = RunMetrics()
    display = metrics.to_dict()["display"]

    return f"""
    <div class="panel metrics-panel">
      <div class="metric"><div class="metric-value">{display['comparisons']}</div><div class="metric-label">Comparisons</div></div>
      <div class="metric"><div class="metric-value">{display['swaps']}</div><div class="metric-label">Swaps</div></div>
      <div class="metric"><div class="metric-value">{display['memory_accesses']}</div><div class="metric-label">Array Accesses</div></div>
      <div class="metric"><div class="metric-value">{display['elapsed']}</div><div class="metric-label">Time Elapsed</div></div>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(algo: Optional[AlgoInfo]) -> str:
    if algo is None:
        return """
        <div class="code-block">
          <div class="placeholder">Select an algorithm to view pseudocode</div>
        </div>
        """

    lines_html = [
        f'<div class="code-line" data-line="{i}">{escape(line)}</div>'
        for i, line in enumerate(algo.pseudocode)
    ]
    stable = "stable" if algo.stable else "not stable"
    return f"""
    <div class="code-block">
      <h3>{algo.label} <small>{algo.complexity_time} time · {algo.complexity_space} space · {stable}</small></h3>
      <p class="algo-description">{escape(algo.description)}</p>
      {''.join(lines_html)}
    </div>
    """
