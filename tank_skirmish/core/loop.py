"""Frame-driven scheduling decoupled from any particular clock."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

TickFn = Callable[[float], Optional[bool]]


class FrameLoop:
    """Turn successive frame timestamps into elapsed-time ticks.

    The first frame measures from timestamp zero. A tick may return
    ``False`` to ask the driver to stop scheduling frames.
    """

    def __init__(self, tick: TickFn, start_time: float = 0.0) -> None:
        self.tick = tick
        self.last_time = start_time
        self.frames = 0

    def step(self, timestamp: float) -> bool:
        dt = timestamp - self.last_time
        self.last_time = timestamp
        self.frames += 1
        return self.tick(dt) is not False


def run_loop(tick: TickFn, frames: Iterable[float]) -> int:
    """Invoke ``tick`` once per frame timestamp; return the number of ticks run."""

    loop = FrameLoop(tick)
    for timestamp in frames:
        if not loop.step(timestamp):
            break
    return loop.frames


__all__ = ["FrameLoop", "TickFn", "run_loop"]
