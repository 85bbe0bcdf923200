"""State behind the debug overlay: which panels are shown and frame timing."""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field

FRAME_HISTORY = 100


@dataclass
class DebugUIState:
    """Panel visibility toggles and a rolling window of recent frame times.

    ``clock`` returns the current time in seconds; it defaults to a
    monotonic high-resolution timer.
    """

    show_window: bool = __debug__
    show_fps: bool = True
    show_world_state: bool = True
    show_debug_info: bool = True
    show_system_info: bool = True
    show_mouse_info: bool = True
    show_input_system: bool = True
    clock: Callable[[], float] = field(default=time.perf_counter, repr=False)
    _frame_times: deque[float] = field(
        default_factory=lambda: deque(maxlen=FRAME_HISTORY), init=False, repr=False
    )
    _last_frame_time: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        self._last_frame_time = self.clock()

    @property
    def frame_times(self) -> tuple[float, ...]:
        """Recent frame durations in seconds, oldest first."""
        return tuple(self._frame_times)

    def toggle_window(self) -> None:
        """Show the debug window if hidden, hide it if shown."""
        self.show_window = not self.show_window

    def update_frame_time(self) -> None:
        """Record the time elapsed since the previous call (or since creation)."""
        now = self.clock()
        self._frame_times.append(now - self._last_frame_time)
        self._last_frame_time = now

    def fps(self) -> float:
        """Frames per second averaged over the recorded frames; 0 if unknown."""
        if not self._frame_times:
            return 0.0
        average = sum(self._frame_times) / len(self._frame_times)
        return 1.0 / average if average > 0.0 else 0.0

    def last_frame_time_ms(self) -> float:
        """Duration of the most recent frame in milliseconds; 0 if none recorded."""
        if not self._frame_times:
            return 0.0
        return self._frame_times[-1] * 1000.0