"""Path-resolution helpers."""

import os


def get_full_path(path: str) -> str:
    """Check that the path exists and return the full path.

    The path is made absolute and normalized, but symbolic links are left
    in place, so a search root that is itself a link is still seen as one.
    """
    full_path = os.path.abspath(path)
    if not os.path.exists(full_path):
        raise FileNotFoundError(full_path)

    return full_path


def get_canonical_path(path: str) -> str:
    """Return the absolute path with every symbolic link resolved.

    The path does not need to exist; any missing tail is kept as-is, so
    links left dangling by a removed target can still be matched.
    """
    return os.path.realpath(path)


def resolve_link_target(link: str) -> str:
    """Return the canonical path that the symbolic link `link` points to.

    A relative link target is taken relative to the directory holding the
    link, not the current working directory.

    Raises `OSError` if the link cannot be read (e.g. it was removed).
    """
    dest = os.readlink(link)
    return get_canonical_path(os.path.join(os.path.dirname(link), dest))
