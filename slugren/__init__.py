"""
slugren - Slugify file and directory names in place

Walks the current directory tree and renames every entry whose name is not
already in slug form (chunk by chunk, split on ".").

Usage:
    slugren            # rename everything below the current directory
    slugren --dry-run  # only print what would be renamed
"""

__version__ = "0.0.1"
