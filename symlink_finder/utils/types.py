"""Type hints."""

from typing import NamedTuple, TypedDict

Target = str


class TraversalUnit(NamedTuple):
    """One directory to scan for links to `target`."""

    target: Target
    path: str


class TraversalStats(TypedDict):
    """Counts gathered by the workers."""

    directories: int
    matches: int
