"""
Per-phase timing for factorizations.

A factorization is a short driver around one or more kernel phases. Some
phases run once (Gram-Schmidt, Crout), others once per deflation step
(the eigenpair search and the reflector update in Schur). Timer keeps the
accumulated seconds and the number of entries for every named phase so a
Result can report both.
"""

import time
from contextlib import contextmanager
from typing import Callable, Iterator


class Timer:
    """
    Accumulating wall-clock timer with per-section call counts.

    Usage:
        timer = Timer()
        timer.start()
        for k in range(n - 1):
            with timer.section('eigenpair'):
                ...
            with timer.section('reflect'):
                ...
        timer.stop()

        timer.result()   # {'total_seconds': ..., 'eigenpair': ..., 'reflect': ...}
        timer.calls()    # {'eigenpair': n - 1, 'reflect': n - 1}

    The clock is injectable; it must return monotonically increasing seconds.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._sections: dict[str, float] = {}
        self._calls: dict[str, int] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    @property
    def running(self) -> bool:
        return self._start_time is not None and self._total is None

    def start(self) -> None:
        if self._start_time is not None:
            raise RuntimeError("Timer.start() called twice")
        self._start_time = self._clock()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = self._clock() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time one entry into the phase ``name``.

        Repeated entries add to the same total. The entry is recorded even
        when the body raises.
        """
        begin = self._clock()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + (self._clock() - begin)
            self._calls[name] = self._calls.get(name, 0) + 1

    def result(self) -> dict[str, float]:
        """
        Seconds per phase, plus 'total_seconds'.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}

    def calls(self) -> dict[str, int]:
        """Number of entries per phase."""
        return dict(self._calls)


@contextmanager
def timed(clock: Callable[[], float] = time.perf_counter) -> Iterator[Timer]:
    """
    Timer that is started on entry and stopped on exit.

        with timed() as timer:
            solution = schur_decompose(m)
        timer.result()['total_seconds']
    """
    timer = Timer(clock)
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
