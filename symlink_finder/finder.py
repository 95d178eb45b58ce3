"""Drive a pool of worker threads over the work queue."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional

from . import defaults
from .scanner import MatchCallback, report_match, scan_directory
from .utils.types import Target, TraversalStats, TraversalUnit
from .work_queue import WorkQueue


def _work(work_queue: WorkQueue, on_match: MatchCallback) -> TraversalStats:
    """Scan units until the queue shuts down."""
    stats: TraversalStats = {"directories": 0, "matches": 0}
    try:
        while True:
            unit = work_queue.pop_or_park()
            if unit is None:
                return stats
            stats["matches"] += scan_directory(unit, work_queue, on_match)
            stats["directories"] += 1
    except BaseException:
        # peers would otherwise park forever waiting on this worker
        work_queue.abort()
        raise


def find_links(
    target: Target,
    search_dir: str,
    n_workers: Optional[int] = None,
    on_match: MatchCallback = report_match,
) -> TraversalStats:
    """Report every symbolic link under `search_dir` that resolves to `target`.

    `target` must already be canonical (see `file_utils.get_canonical_path`)
    and `search_dir` absolute. Matches are handed to `on_match` from whichever
    worker finds them, in no particular order.
    """
    if not n_workers:
        n_workers = defaults.N_WORKERS
    logging.debug(
        f"Searching {search_dir} for links to {target} ({n_workers} workers)"
    )

    work_queue = WorkQueue(n_workers)
    work_queue.push(TraversalUnit(target, search_dir))

    futures: List[Future[TraversalStats]] = []
    with ThreadPoolExecutor(
        max_workers=n_workers, thread_name_prefix="symlink-finder"
    ) as pool:
        for _ in range(n_workers):
            futures.append(pool.submit(_work, work_queue, on_match))

    total: TraversalStats = {"directories": 0, "matches": 0}
    for future in futures:
        result = future.result()
        total["directories"] += result["directories"]
        total["matches"] += result["matches"]

    logging.info(
        f"Scanned {total['directories']} directories,"
        f" found {total['matches']} matching links."
    )
    return total
