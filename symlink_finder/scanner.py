"""Scan one directory for links to the target, and queue its sub-directories."""

import logging
import os
import sys
import threading
from typing import Callable

from .utils import file_utils
from .utils.types import TraversalUnit
from .work_queue import WorkQueue

MatchCallback = Callable[[str], None]

_PRINT_LOCK = threading.Lock()


def report_match(path: str) -> None:
    """Print a matching link's path, one whole line at a time.

    The path is written as the raw bytes the filesystem gave, so a name that
    is not valid in the stdout encoding is still printed as-is.
    """
    with _PRINT_LOCK:
        sys.stdout.flush()
        sys.stdout.buffer.write(os.fsencode(path) + b"\n")
        sys.stdout.buffer.flush()


def _points_at(link: str, target: str) -> bool:
    return file_utils.resolve_link_target(link) == target


def scan_directory(
    unit: TraversalUnit, work_queue: WorkQueue, on_match: MatchCallback = report_match
) -> int:
    """Report links under `unit.path` pointing at `unit.target`.

    Every real sub-directory is pushed onto `work_queue` as a new unit.
    Symbolic links are never descended into. Filesystem errors are logged
    and skipped; errors raised by `on_match` propagate.

    Return the number of matches reported.
    """
    target, path = unit
    logging.debug(f"Scanning directory: {path}...")

    # only the seed can be a link; a child link is never queued
    try:
        root_hit = os.path.islink(path) and _points_at(path, target)
    except OSError as e:
        logging.warning(f"Skipping {path}, {e.__class__.__name__}: {e}")
        return 0
    if root_hit:
        on_match(path)
        return 1
    if os.path.exists(path) and not os.path.isdir(path):
        logging.info(f"Skipping {path}, not a directory.")
        return 0

    hits = []
    try:
        with os.scandir(path) as scan:
            for dir_entry in scan:
                try:
                    if dir_entry.is_symlink():
                        if _points_at(dir_entry.path, target):
                            hits.append(dir_entry.path)
                    elif dir_entry.is_dir(follow_symlinks=False):
                        work_queue.push(TraversalUnit(target, dir_entry.path))
                except OSError as e:
                    logging.warning(
                        f"Skipping {dir_entry.path}, {e.__class__.__name__}: {e}"
                    )
    except OSError as e:
        logging.warning(f"Cannot list {path}, {e.__class__.__name__}: {e}")

    for hit in hits:
        on_match(hit)

    logging.debug(f"Scan finished, directory: {path}")
    return len(hits)
