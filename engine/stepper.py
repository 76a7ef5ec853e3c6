"""
stepper.py — Step-by-Step Replay Engine
=========================================
The Stepper is a pull-based cursor over a finished run's steps.  The step
sequence is fully materialised and immutable before replay starts, so the
Stepper only owns an index: forward, backward and jumps are all O(1).

State machine:
    IDLE  →  start()  →  PAUSED
    PAUSED  →  play()   →  PLAYING
    PLAYING →  pause()  →  PAUSED
    PLAYING →  (last step reached) → FINISHED
    any     →  reset()  →  IDLE

Thread safety:
  This class is NOT thread-safe.  Drive it from a single thread (or an
  async event loop).
"""

import time
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from algorithms.step import Step


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.0,
    "medium": 0.5,
    "fast":   0.15,
    "turbo":  0.05,
}


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : The immutable step sequence being replayed.
        current_idx : Index into `steps` that is currently displayed (-1 when idle).
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(Step) fired every time current step changes.
    """

    def __init__(
        self,
        on_step: Optional[Callable[[Step], None]] = None,
        speed: str = "medium",
    ):
        self.steps:       Tuple[Step, ...] = ()
        self.current_idx: int              = -1
        self.state:       StepperState     = StepperState.IDLE
        self.speed:       float            = SPEED_PRESETS.get(speed, SPEED_PRESETS["medium"])
        self.on_step:     Optional[Callable[[Step], None]] = on_step

        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, steps: Sequence[Step], index: int = 0) -> None:
        """Load a step sequence and show step `index` (clamped)."""
        self.steps = tuple(steps)
        if not self.steps:
            self.current_idx = -1
            self.state       = StepperState.FINISHED
            return
        self.state = StepperState.PAUSED
        self._goto(max(0, min(index, len(self.steps) - 1)))
        if self.at_end:
            self.state = StepperState.FINISHED

    def reset(self) -> None:
        """Back to IDLE; caller must call start() again."""
        self.steps       = ()
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        if self.current_idx + 1 >= len(self.steps):
            self.state = StepperState.FINISHED
            return False
        self._goto(self.current_idx + 1)
        if self.at_end:
            self.state = StepperState.FINISHED
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index."""
        if not 0 <= idx < len(self.steps):
            return False
        self._goto(idx)
        if self.at_end:
            self.state = StepperState.FINISHED
        elif self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def rewind(self) -> None:
        """Jump back to step 0."""
        self.goto_step(0)

    def jump_to_end(self) -> None:
        """Jump to the final step."""
        if self.steps:
            self._goto(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self, now: Optional[float] = None) -> None:
        """Start auto-advance.  `now` resumes from an earlier tick time."""
        if self.state in (StepperState.FINISHED, StepperState.IDLE):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic() if now is None else now

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically (e.g. every 50 ms).  If playing and enough
        time has elapsed, advances one step.  Returns True if a step
        was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        return self.next_step()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(0.02, seconds)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def at_end(self) -> bool:
        return bool(self.steps) and self.current_idx == len(self.steps) - 1

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    @property
    def last_tick(self) -> float:
        """Clock reading of the last auto-advance (or of play())."""
        return self._last_tick

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.steps[idx])
