"""Find symbolic links that point to a given target."""

from .finder import find_links

__all__ = ["find_links"]
