"""
Execution timing utilities.

Used by the checked operations to attach the wall-clock duration of
each call to its Result.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer for a single operation.
    
    Usage:
        timer = Timer()
        timer.start()
        det = determinant(A)
        timer.stop()
        timer.result()
        # {'total_seconds': 0.05}
    """
    
    def __init__(self):
        self._start_time: float | None = None
        self._total: float | None = None
    
    def start(self) -> None:
        """Start the timer."""
        self._start_time = time.perf_counter()
        
    def stop(self) -> None:
        """Stop the timer."""
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time
    
    def result(self) -> dict[str, float]:
        """
        Get timing results.
        
        Returns:
            Dictionary with 'total_seconds'
            
        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Context manager for simple timing.
    
    The timer is stopped on exit, including when the body raises.
    
    Usage:
        with timed() as timer:
            inv = inverse(A)
        print(f"Took {timer.result()['total_seconds']:.3f}s")
    
    Yields:
        Timer instance
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
