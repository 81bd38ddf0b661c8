"""
slug.py - Chunk-wise Slug Generation for Filenames

A name is split on "." and every chunk is slugified on its own, so
extensions and multi-part suffixes keep their position.

Example transformations (maintain_case=True):
    "My_File.TXT"        → "My-File.TXT"
    "foo_bar.txt"        → "foo-bar.txt"
    "Über Café.tar.gz"   → "Uber-Cafe.tar.gz"
    ".bashrc"            → ".bashrc"     # empty first chunk stays empty
    "README"             → "README"      # single chunk
"""
from slugify import slugify as _slugify

DEFAULT_SEPARATOR = "-"


def slugify_chunk(chunk: str, maintain_case: bool = True, separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Slugify one "."-delimited chunk.

    Underscores become spaces first, so they end up as separators.

    Example:
        >>> slugify_chunk("My_File")
        'My-File'
        >>> slugify_chunk("My_File", maintain_case=False)
        'my-file'
    """
    return _slugify(chunk.replace("_", " "), lowercase=not maintain_case, separator=separator)


def slugify_name(name: str, maintain_case: bool = True, separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Slugify a base filename chunk by chunk.

    Example:
        >>> slugify_name("archive_2024.tar.gz")
        'archive-2024.tar.gz'
        >>> slugify_name(".hidden file")
        '.hidden-file'
    """
    return ".".join(
        slugify_chunk(chunk, maintain_case=maintain_case, separator=separator)
        for chunk in name.split(".")
    )
