"""
walk.py - Recursive Directory Traversal

Yields every file and directory below a root, depth-first. A directory's
descendants come before the directory itself, so callers may rename the
directory after its contents have been handled.

Usage:
    from slugren.lib.fs.walk import walk_dir

    for entry in walk_dir(Path(".")):
        print(entry.path, entry.is_dir)
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Tuple

from slugren.errors import FilesystemError
from slugren.lib.log import get_logger
from slugren.models import Entry

log = get_logger("walk")


def _list_dir(directory: Path) -> List[os.DirEntry]:
    """Read a full directory listing (OS order)."""
    log.debug("listing dir=%s", directory)
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError as e:
        raise FilesystemError.from_oserror(e, directory) from e


def walk_dir(root: os.PathLike | str) -> Iterator[Entry]:
    """
    Walk root depth-first.

    Args:
        root: Directory to walk (relative paths resolve against the cwd)

    Yields:
        Entry: Absolute path + directory flag, children before their parent

    Raises:
        FilesystemError: If root or any subdirectory cannot be listed.
            Entries already yielded stay yielded.

    Notes:
        - Each listing is read completely before its entries are yielded,
          so renaming yielded entries does not disturb the traversal
        - A subdirectory is listed when it is reached in its parent's listing
        - Uses an explicit stack, so depth is not bounded by the recursion limit
        - Symlinks are reported but never followed
        - Order follows the OS listing order (not sorted)
        - The root itself is not yielded
    """
    directory = Path(os.path.abspath(root))
    # (directory, remaining listing) per open level; the top is being walked
    stack: List[Tuple[Path, Iterator[os.DirEntry]]] = [
        (directory, iter(_list_dir(directory)))
    ]

    while stack:
        directory, remaining = stack[-1]
        for dirent in remaining:
            path = directory / dirent.name
            try:
                is_dir = dirent.is_dir(follow_symlinks=False)
            except OSError as e:
                raise FilesystemError.from_oserror(e, path) from e

            if is_dir:
                stack.append((path, iter(_list_dir(path))))
                break
            yield Entry(path=path, is_dir=False)
        else:
            stack.pop()
            if stack:
                yield Entry(path=directory, is_dir=True)
