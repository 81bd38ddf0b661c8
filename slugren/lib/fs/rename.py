"""
rename.py - Rename Without Clobbering

os.rename() silently replaces an existing file on POSIX. rename_entry()
refuses instead, so two names that slugify to the same target fail on the
second rename with EEXIST.
"""
from __future__ import annotations

import errno
import os

from slugren.errors import FilesystemError


def _same_entry(a: os.stat_result, b: os.stat_result) -> bool:
    return (a.st_dev, a.st_ino) == (b.st_dev, b.st_ino)


def _case_only_change(src: os.PathLike | str, dst: os.PathLike | str) -> bool:
    return os.path.basename(os.fspath(src)).lower() == os.path.basename(os.fspath(dst)).lower()


def rename_entry(src: os.PathLike | str, dst: os.PathLike | str) -> None:
    """
    Rename src to dst.

    Raises:
        FilesystemError: dst exists (EEXIST), src vanished (ENOENT),
            permission denied, cross-device, ...

    Notes:
        - An existing dst only counts as src itself when it is the same
          inode and the names differ in case alone (case-insensitive
          filesystems). Hard links under other names are collisions,
          since rename() between two links of one file is a no-op.
        - The existence check and the rename are not atomic
    """
    try:
        dst_stat = os.lstat(dst)
    except FileNotFoundError:
        dst_stat = None
    except OSError as e:
        raise FilesystemError.from_oserror(e, src, dst) from e

    try:
        if dst_stat is not None and not (
            _case_only_change(src, dst) and _same_entry(os.lstat(src), dst_stat)
        ):
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(dst))
        os.rename(src, dst)
    except OSError as e:
        raise FilesystemError.from_oserror(e, src, dst) from e
