"""Data-parallel grid engine using a worker pool."""

import logging
import math
import multiprocessing as mp
import weakref
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from itertools import repeat
from typing import List, Optional, Sequence, Tuple

from .grid import Grid, step_range
from .rules import Cell, RuleSet

logger = logging.getLogger(__name__)


class ParallelGrid(Grid):
    """Grid engine that spreads each step across a worker pool.

    The index range is split into contiguous chunks. Every worker reads
    the same immutable previous generation and returns the new values for
    its own chunk, so no locking is needed and the result is identical to
    :class:`Grid` for any deterministic rule.

    With ``use_processes=True`` (default) the rule and its cell values must
    be picklable. The pool is created on first use and kept until
    :meth:`close` is called; the grid can also be used as a context manager.
    """

    def __init__(
        self,
        rule: RuleSet,
        width: int,
        height: int,
        workers: Optional[int] = None,
        chunk_size: Optional[int] = None,
        use_processes: bool = True,
        min_parallel_cells: int = 0,
    ) -> None:
        """Initialize a parallel grid.

        Args:
            rule: Transition rule for every cell
            width: Number of columns
            height: Number of rows
            workers: Number of workers (None for CPU count)
            chunk_size: Cells per task (None to split evenly across workers)
            use_processes: Use a process pool instead of a thread pool
            min_parallel_cells: Grids with fewer cells step sequentially

        Raises:
            ValueError: If dimensions, workers or chunk_size are not positive
        """
        super().__init__(rule, width, height)

        if workers is not None and workers <= 0:
            raise ValueError(f"Worker count must be positive, got {workers}")
        if chunk_size is not None and chunk_size <= 0:
            raise ValueError(f"Chunk size must be positive, got {chunk_size}")

        self.workers = workers or mp.cpu_count()
        self.chunk_size = chunk_size
        self.use_processes = use_processes
        self.min_parallel_cells = min_parallel_cells
        self._executor: Optional[Executor] = None
        self._finalizer: Optional[weakref.finalize] = None

    def chunks(self) -> List[Tuple[int, int]]:
        """Get the (start, stop) index ranges handed to workers."""
        length = self.width * self.height
        size = self.chunk_size or math.ceil(length / self.workers)
        return [(start, min(start + size, length)) for start in range(0, length, size)]

    def _get_executor(self) -> Executor:
        if self._executor is None:
            pool = ProcessPoolExecutor if self.use_processes else ThreadPoolExecutor
            self._executor = pool(max_workers=self.workers)
            # Shut the pool down when the grid is garbage collected without close()
            self._finalizer = weakref.finalize(self, self._executor.shutdown, wait=False)
            logger.debug("Started %s with %d workers", pool.__name__, self.workers)
        return self._executor

    def _compute_next(self, data: Sequence[Cell]) -> List[Cell]:
        if len(data) < self.min_parallel_cells:
            return super()._compute_next(data)

        starts, stops = zip(*self.chunks())
        results = self._get_executor().map(
            step_range,
            repeat(self.rule),
            repeat(data),
            repeat(self.width),
            starts,
            stops,
        )

        next_data: List[Cell] = []
        for chunk in results:
            next_data.extend(chunk)
        return next_data

    def close(self) -> None:
        """Shut down the worker pool, if one was started."""
        if self._executor is not None:
            self._finalizer.detach()
            self._executor.shutdown(wait=True)
            self._executor = None
            self._finalizer = None
            logger.debug("Worker pool shut down")
