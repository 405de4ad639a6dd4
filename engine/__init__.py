"""
engine/
-------
Run control & metrics layer.

    from engine import start_run, SortRun, Outcome
"""

from engine.runner  import (
    SortRun,
    RunState,
    Outcome,
    RunConfigError,
    start_run,
    speed_to_pacing,
    MIN_SPEED,
    MAX_SPEED,
    DEFAULT_SPEED,
)
from engine.metrics import RunMetrics, format_number, format_time

__all__ = [
    "SortRun",
    "RunState",
    "Outcome",
    "RunConfigError",
    "start_run",
    "speed_to_pacing",
    "MIN_SPEED",
    "MAX_SPEED",
    "DEFAULT_SPEED",
    "RunMetrics",
    "format_number",
    "format_time",
]
