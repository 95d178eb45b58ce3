"""Self-feeding queue of directories to scan, shared by the worker pool.

Directories are only discovered by scanning other directories, so the
traversal is finished exactly when the queue is empty while every worker
is idle. Both the pending units and the idle count are guarded by the
same condition, and the all-idle check only happens while holding it.
"""

import logging
import threading
from collections import deque
from typing import Deque, Optional

from .utils.types import TraversalUnit


class WorkQueue:
    """FIFO of `TraversalUnit`s with quiescence detection."""

    def __init__(self, pool_size: int):
        if pool_size < 1:
            raise ValueError(f"pool size must be at least 1 (got {pool_size})")
        self.pool_size = pool_size
        self._units: Deque[TraversalUnit] = deque()
        self._idle = 0
        self._closed = False
        self._cond = threading.Condition()

    def __len__(self) -> int:
        with self._cond:
            return len(self._units)

    @property
    def closed(self) -> bool:
        """Return whether the queue has shut down."""
        with self._cond:
            return self._closed

    def push(self, unit: TraversalUnit) -> None:
        """Append `unit` and wake one parked worker."""
        with self._cond:
            if self._closed:
                raise RuntimeError(f"Cannot push {unit.path}, the queue is closed.")
            self._units.append(unit)
            self._cond.notify()

    def pop_or_park(self) -> Optional[TraversalUnit]:
        """Remove and return the next unit, parking while there is none.

        Return `None` once the traversal is complete (or aborted), which
        tells the calling worker to exit.
        """
        with self._cond:
            while True:
                if self._closed:
                    return None
                if self._units:
                    return self._units.popleft()

                self._idle += 1
                if self._idle == self.pool_size:
                    logging.debug("All workers idle, queue empty. Shutting down.")
                    self._closed = True
                    self._cond.notify_all()
                    return None
                self._cond.wait()
                self._idle -= 1

    def abort(self) -> None:
        """Close the queue early and wake every parked worker."""
        with self._cond:
            if not self._closed:
                logging.debug(f"Aborting with {len(self._units)} unit(s) pending.")
            self._closed = True
            self._cond.notify_all()
