"""
Wall-clock timing for the iterative solvers.

Root finders run inside timed() and store timer.result() in the timing
field of their Result, so callers can compare methods on the same
function without wrapping calls themselves.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Stopwatch with optional named sub-sections.

        timer = Timer()
        timer.start()
        with timer.section('bracket'):
            f_left, f_right = f(a), f(b)
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'bracket': ...}

    A section entered more than once accumulates its time.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._started_at: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent inside the block to section `name`."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - began
            )

    def result(self) -> dict[str, float]:
        """
        Elapsed seconds: 'total_seconds' plus one entry per section.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a block; the timer is stopped even if the block raises.

        with timed() as timer:
            x = g(x)
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
