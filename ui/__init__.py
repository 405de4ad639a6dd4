"""
ui/
---
Presentation layer.

    from ui import render_bars
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_bars, bar_height, CanvasConfig

from ui.controls import (
    playback_controls,
    algorithm_selector,
    array_controls,
    metrics_panel,
    pseudocode_viewer,
)

__all__ = [
    "render_bars",
    "bar_height",
    "CanvasConfig",
    "playback_controls",
    "algorithm_selector",
    "array_controls",
    "metrics_panel",
    "pseudocode_viewer",
]
