"""Search a directory tree for symbolic links that point to a target."""

import argparse
import logging
import os
import sys
from typing import List, Optional

import coloredlogs  # type: ignore[import]

from . import defaults
from .finder import find_links
from .utils import file_utils


def _get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        usage="%(prog)s TARGET SEARCH_DIR\n       %(prog)s -h",
        description="Search symbolic links that point to the target.",
        epilog="Notes: (1) symbolic links are never followed.",
    )
    parser.add_argument(
        "paths",
        metavar="TARGET SEARCH_DIR",
        nargs="*",
        help="target of the links, and the directory to search.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, search, and return the exit code."""
    coloredlogs.install(
        level=os.getenv(defaults.LOG_LEVEL_ENV_VAR, defaults.LOG_LEVEL).upper()
    )

    parser = _get_parser()
    args, unknown = parser.parse_known_intermixed_args(argv)

    unknown_opts = [arg for arg in unknown if arg.startswith("-")]
    if unknown_opts:
        logging.error(f"Unknown option: {' '.join(unknown_opts)}")
        parser.print_help()
        return 0
    args.paths.extend(unknown)

    if len(args.paths) < 2:
        missing = "TARGET" if not args.paths else "SEARCH_DIR"
        logging.error(f'Missing argument "{missing}".')
        parser.print_help(sys.stderr)
        return 1
    if len(args.paths) > 2:
        logging.error("Too many arguments.")
        parser.print_help(sys.stderr)
        return 1

    target = file_utils.get_canonical_path(args.paths[0])
    try:
        search_dir = file_utils.get_full_path(args.paths[1])
    except FileNotFoundError as e:
        logging.error(f'"{e}" does not exist.')
        return 1

    try:
        find_links(target, search_dir)
    except BrokenPipeError:
        # stdout was closed early, e.g. piped into `head`
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
