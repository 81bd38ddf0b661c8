"""Error types for slugren"""

from __future__ import annotations

import os
from typing import Optional


class FilesystemError(OSError):
    """
    Listing or rename failure.

    Carries the offending path (filename), the rename target (filename2, if
    any) and the underlying OS errno/message.
    """

    @classmethod
    def from_oserror(
        cls,
        exc: OSError,
        path: os.PathLike | str,
        target: Optional[os.PathLike | str] = None,
    ) -> "FilesystemError":
        strerror = exc.strerror or str(exc)
        if target is None:
            return cls(exc.errno, strerror, str(path))
        return cls(exc.errno, strerror, str(path), None, str(target))
