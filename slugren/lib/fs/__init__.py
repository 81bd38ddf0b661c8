"""Filesystem helpers: traversal, slug transform, rename"""

from .walk import walk_dir
from .slug import slugify_chunk, slugify_name
from .rename import rename_entry

__all__ = [
    "walk_dir",
    "slugify_chunk",
    "slugify_name",
    "rename_entry",
]
