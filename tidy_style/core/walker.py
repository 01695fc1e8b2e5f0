"""
Directory walker used to enumerate candidate files.
"""

import os
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional
import logging

logger = logging.getLogger(__name__)

DEFAULT_SKIPPED_DIRS = frozenset([
    '.git', '.hg', '.svn',
    'target', 'build', 'node_modules',
    '__pycache__', '.tox', '.venv', 'venv',
    '.mypy_cache', '.pytest_cache',
])


def filter_dirs(path: Path, extra: Iterable[str] = ()) -> bool:
    """Return True if the directory at ``path`` should not be descended into."""
    return path.name in DEFAULT_SKIPPED_DIRS or path.name in set(extra)


def make_filter(exclude: Iterable[str] = ()) -> Callable[[Path], bool]:
    """Build a directory filter skipping the defaults plus ``exclude`` names."""
    exclude = frozenset(exclude)
    return lambda path: filter_dirs(path, exclude)


def _raise(error: OSError):
    raise error


def walk(root, skip: Optional[Callable[[Path], bool]] = None) -> Iterator[Path]:
    """
    Yield every file below ``root`` in a stable, sorted order.

    Args:
        root: File or directory to walk
        skip: Predicate deciding whether a directory is pruned

    Yields:
        Paths of regular files

    Raises:
        OSError: If a directory cannot be listed
    """
    skip = skip or filter_dirs
    root = Path(root)

    if root.is_file():
        yield root
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        current = Path(dirpath)
        kept = []
        for name in sorted(dirnames):
            if skip(current / name):
                logger.debug(f"Skipping directory: {current / name}")
            else:
                kept.append(name)
        dirnames[:] = kept

        for name in sorted(filenames):
            yield current / name
