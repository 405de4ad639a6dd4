"""
runner.py — Run Controller
===========================
A SortRun owns exactly one sorting run: the private copy of the array,
the algorithm generator, the cancellation flag and the outcome.  It is
the ONLY object the shell talks to while a run is in flight.

Lifecycle:
    start_run()  →  RUNNING
    RUNNING      →  (generator exhausted)    →  FINISHED
    RUNNING      →  stop() + next checkpoint →  STOPPED
    RUNNING      →  (exception in algorithm / callback) → FAILED

Every value the algorithm yields is one checkpoint.  At each checkpoint
the driver:

    1. checks the cancellation flag          (fail fast, no new work)
    2. resumes the generator up to its next Snapshot
    3. checks the flag again                 (no emission after a stop)
    4. hands the Snapshot to on_step
    5. sleeps for the pacing interval        (a stop cuts the sleep short)

Stopping is not an error.  It settles the run as STOPPED and the
generator is closed without ever being resumed.

Threading:
  start() runs the driver loop on one background worker; step() and
  run() drive it on the caller's thread instead.  Only stop(), wait()
  and the read-only properties are safe to call from another thread.
  on_step is invoked on whichever thread drives the run.
"""

import logging
import threading
from enum import Enum
from typing import Callable, List, Optional, Sequence

from elements import Element
from algorithms import AlgoInfo, Snapshot, SortContext, get_algorithm


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------
class Outcome(Enum):
    FINISHED = "finished"
    STOPPED  = "stopped"
    FAILED   = "failed"


# ---------------------------------------------------------------------------
# Speed (slider value 1..100 → pacing in ms)
# ---------------------------------------------------------------------------
MIN_SPEED     = 1
MAX_SPEED     = 100
DEFAULT_SPEED = 50


def speed_to_pacing(speed: int) -> float:
    """Higher speed = shorter pause.  100 → 1 ms, 1 → 100 ms."""
    speed = max(MIN_SPEED, min(MAX_SPEED, int(speed)))
    return float(MAX_SPEED + 1 - speed)


OnStep = Callable[[Snapshot], None]


class RunConfigError(ValueError):
    """Raised synchronously by start_run() before anything is touched."""


# ---------------------------------------------------------------------------
# Run State
# ---------------------------------------------------------------------------
class RunState:
    """The cancellation flag.  Set once, never reset."""

    def __init__(self):
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def pause(self, seconds: float) -> None:
        """Sleep for the pacing interval; returns early on cancel."""
        if seconds > 0:
            self._cancelled.wait(seconds)


# ---------------------------------------------------------------------------
# SortRun
# ---------------------------------------------------------------------------
class SortRun:
    """
    Attributes:
        algo          : AlgoInfo of the algorithm being run.
        elements      : The run's private live array (never the caller's list).
        context       : SortContext holding counters and primitives.
        state         : RunState (cancellation flag).
        pacing_ms     : Pause after each emitted Snapshot.
        on_step       : Optional callback(Snapshot), fired once per emission.
        last_snapshot : Most recent Snapshot handed to on_step.
        steps_emitted : How many Snapshots were handed to on_step.
        error         : The exception behind a FAILED outcome.
    """

    def __init__(
        self,
        algo: AlgoInfo,
        elements: Sequence[Element],
        on_step: Optional[OnStep] = None,
        pacing_ms: float = 0.0,
    ):
        self.algo:       AlgoInfo          = algo
        self.elements:   List[Element]     = [e.copy() for e in elements]
        for e in self.elements:
            e.reset()
        self.context:    SortContext       = SortContext(self.elements)
        self.state:      RunState          = RunState()
        self.pacing_ms:  float             = pacing_ms
        self.on_step:    Optional[OnStep]  = on_step

        self.last_snapshot: Optional[Snapshot]   = None
        self.steps_emitted: int                  = 0
        self.error:         Optional[BaseException] = None

        self._generator = algo.fn(self.context)
        self._outcome:  Optional[Outcome]          = None
        self._started:  bool                       = False
        self._done:     threading.Event            = threading.Event()
        self._thread:   Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> "SortRun":
        """Drive the run on a background worker and return immediately."""
        self._thread = threading.Thread(
            target=self.run, name=f"sort-run-{self.algo.key}", daemon=True
        )
        self._thread.start()
        return self

    def run(self) -> Outcome:
        """Drive the run to settlement on the calling thread."""
        while self.step():
            if self.state.cancelled:
                continue
            self.state.pause(self.pacing_ms / 1000)
        return self._outcome

    def stop(self) -> None:
        """Request cancellation.  Idempotent, never blocks."""
        if not self.state.cancelled and self._outcome is None:
            logger.info("Stop requested for %s run", self.algo.key)
        self.state.cancel()

    def wait(self, timeout: Optional[float] = None) -> Optional[Outcome]:
        """Block until the run settles (or timeout).  None if still running."""
        self._done.wait(timeout)
        return self._outcome

    # ------------------------------------------------------------------
    # Stepping  (call this from your own loop for externally driven runs)
    # ------------------------------------------------------------------
    def step(self) -> bool:
        """
        Advance to the next Snapshot and hand it to on_step.  Returns
        False once the run has settled; no pacing is applied here.
        """
        if self._outcome is not None:
            return False
        if self.state.cancelled:
            self._settle(Outcome.STOPPED)
            return False

        if not self._started:
            self._started = True
            self.context.start_clock()
            logger.info(
                "Starting %s on %d elements (pacing %.1f ms)",
                self.algo.key, len(self.elements), self.pacing_ms,
            )

        try:
            snapshot = next(self._generator)
        except StopIteration:
            self._settle(Outcome.FINISHED)
            return False
        except Exception as exc:
            logger.exception("%s run failed inside the algorithm", self.algo.key)
            self._settle(Outcome.FAILED, exc)
            return False

        if self.state.cancelled:
            self._settle(Outcome.STOPPED)
            return False

        self.last_snapshot = snapshot
        self.steps_emitted += 1
        if self.on_step is not None:
            try:
                self.on_step(snapshot)
            except Exception as exc:
                logger.exception("%s run failed inside on_step", self.algo.key)
                self._settle(Outcome.FAILED, exc)
                return False
        return True

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def outcome(self) -> Optional[Outcome]:
        return self._outcome

    @property
    def is_running(self) -> bool:
        return self._outcome is None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _settle(self, outcome: Outcome, error: Optional[BaseException] = None) -> None:
        self._outcome = outcome
        self.error = error
        self._generator.close()

        if outcome != Outcome.FAILED:
            logger.info(
                "%s run %s after %d steps (%d comparisons, %d swaps, %d accesses)",
                self.algo.key, outcome.value, self.steps_emitted,
                self.context.comparisons, self.context.swaps, self.context.memory_accesses,
            )
        self._done.set()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def start_run(
    elements: Sequence[Element],
    on_step: Optional[OnStep],
    pacing_ms: float,
    algo_key: str,
    background: bool = True,
) -> SortRun:
    """
    Validate the request, then start a run on a private copy of `elements`.

    Args:
        elements   : The caller's array.  Never mutated.
        on_step    : Callback(Snapshot), once per primitive emission.
        pacing_ms  : Pause after each emission (>= 0).
        algo_key   : Registry key, e.g. "quick".
        background : Drive on a worker thread (True) or block until settled.

    Raises:
        RunConfigError: unknown algo_key or negative pacing_ms.
    """
    info = get_algorithm(algo_key)
    if info is None:
        raise RunConfigError(f"Unknown algorithm: {algo_key}")
    if pacing_ms < 0:
        raise RunConfigError(f"Pacing interval must be >= 0 ms, got {pacing_ms}")

    run = SortRun(info, elements, on_step, pacing_ms)
    if background:
        run.start()
    else:
        run.run()
    return run
