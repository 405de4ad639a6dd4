"""
metrics.py — Performance Metrics
==================================
Turns a run (or any Snapshot) into the four numbers the metrics card
shows, plus the compact formatting the card uses:

    comparisons   1.2K
    swaps         845
    accesses      3.4M
    time elapsed  850ms / 1.2s
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from algorithms import Snapshot


# ---------------------------------------------------------------------------
# Metrics dataclass — what the metrics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:         str   = ""
    algo_label:       str   = ""
    size:             int   = 0
    comparisons:      int   = 0
    swaps:            int   = 0
    memory_accesses:  int   = 0
    elapsed_ms:       float = 0.0
    total_steps:      int   = 0
    outcome:          str   = ""      # "" while running

    @classmethod
    def from_run(cls, run) -> "RunMetrics":
        """Metrics of a SortRun, settled or still in flight."""
        snap: Optional[Snapshot] = run.last_snapshot
        ctx = run.context
        return cls(
            algo_key=run.algo.key,
            algo_label=run.algo.label,
            size=len(run.elements),
            comparisons=ctx.comparisons,
            swaps=ctx.swaps,
            memory_accesses=ctx.memory_accesses,
            elapsed_ms=snap.elapsed_ms if snap else 0.0,
            total_steps=run.steps_emitted,
            outcome=run.outcome.value if run.outcome else "",
        )

    def to_dict(self) -> Dict[str, Any]:
        d = dict(self.__dict__)
        d["display"] = {
            "comparisons":     format_number(self.comparisons),
            "swaps":           format_number(self.swaps),
            "memory_accesses": format_number(self.memory_accesses),
            "elapsed":         format_time(self.elapsed_ms),
        }
        return d


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------
def format_number(n: int) -> str:
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1000:
        return f"{n / 1000:.1f}K"
    return f"{n:,}"


def format_time(ms: float) -> str:
    if ms < 1000:
        return f"{int(ms)}ms"
    return f"{ms / 1000:.1f}s"
