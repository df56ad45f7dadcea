"""Recursive deletion of app directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import DeletionFailed

logger = logging.getLogger(__name__)


def delete_tree(path: Path) -> list[Path]:
    """Delete `path` and everything below it, children before parents.

    Symlinks are unlinked, never followed. A missing path is a no-op.
    The first entry that cannot be removed raises DeletionFailed; entries
    removed before that stay removed.

    Returns:
        The removed paths in removal order
    """
    path = Path(path)
    removed: list[Path] = []

    if not os.path.lexists(path):
        return removed

    if path.is_symlink() or not path.is_dir():
        _remove(path, removed)
        return removed

    for root, dirnames, filenames in os.walk(path, topdown=False, onerror=_walk_error):
        base = Path(root)
        for name in filenames:
            _remove(base / name, removed)
        for name in dirnames:
            _remove(base / name, removed)

    _remove(path, removed)
    return removed


def _remove(entry: Path, removed: list[Path]) -> None:
    logger.debug(f"Deleting: {entry}")
    try:
        if entry.is_dir() and not entry.is_symlink():
            entry.rmdir()
        else:
            entry.unlink()
    except OSError as e:
        logger.warning(f"Could not delete {entry}: {e}")
        raise DeletionFailed(entry) from e
    removed.append(entry)


def _walk_error(error: OSError) -> None:
    target = Path(error.filename) if error.filename else Path()
    logger.warning(f"Could not list {target}: {error}")
    raise DeletionFailed(target) from error
