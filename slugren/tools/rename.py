"""
rename.py - Slugify File and Directory Names

Workflow:
1. Walk the tree below the current directory (children before parents)
2. Split each base name on "." and slugify every chunk
3. Skip entries whose name is already a slug
4. Dry run: print "<old> -> <new>"; otherwise rename in place

Design:
- The first failing listing or rename aborts the run (exit code 1)
- Renames already performed are kept, nothing is rolled back
- Collisions are not checked ahead of time; they fail at rename time
- Defaults can come from .slugren.toml or SLUGREN_* env vars

Usage:
    slugren
    slugren --dry-run
    python -m slugren.tools.rename -n
"""

from __future__ import annotations

import sys
import argparse
from pathlib import Path
from typing import Optional, Sequence, TextIO

from slugren import __version__
from slugren.errors import FilesystemError
from slugren.lib.config import build_settings
from slugren.lib.fs import walk_dir, slugify_name, rename_entry
from slugren.lib.fs.slug import DEFAULT_SEPARATOR
from slugren.lib.log import get_logger, setup_logging
from slugren.models import RenameSettings

log = get_logger("rename")


def renamed_path(
    path: Path,
    maintain_case: bool = True,
    separator: str = DEFAULT_SEPARATOR,
) -> Path:
    """
    Candidate path for an entry: same parent, slugified base name.

    Example:
        >>> renamed_path(Path("/data/My_File.TXT"))
        PosixPath('/data/My-File.TXT')
    """
    name = slugify_name(path.name, maintain_case=maintain_case, separator=separator)
    return path.parent / name


def rename_tree(settings: RenameSettings, out: Optional[TextIO] = None) -> None:
    """
    Slugify every entry below settings.root.

    Args:
        settings: Root, dry-run flag and slug options
        out: Stream for dry-run lines (default: sys.stdout)

    Raises:
        FilesystemError: First listing or rename failure (not caught here)
    """
    if out is None:
        out = sys.stdout

    for entry in walk_dir(settings.root):
        candidate = renamed_path(
            entry.path,
            maintain_case=settings.maintain_case,
            separator=settings.separator,
        )
        if str(candidate) == str(entry.path):
            continue

        if settings.dry_run:
            print(f"{entry.path} -> {candidate}", file=out)
        else:
            rename_entry(entry.path, candidate)
            log.info("renamed %s -> %s", entry.path, candidate)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slugren",
        description="Rename files and directories below the current directory to slug form",
    )
    parser.add_argument(
        "-n", "--dry-run",
        action="store_true",
        default=None,
        help="Show what would be renamed without renaming anything"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every rename to stderr"
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=__version__,
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("INFO" if args.verbose else None)

    # undecodable filenames carry surrogate escapes; print them as raw bytes
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="surrogateescape")

    try:
        settings = build_settings(Path.cwd(), dry_run=args.dry_run)
        log.debug("settings %s", settings.model_dump(mode="json"))
        rename_tree(settings)
    except (FilesystemError, ValueError) as e:
        print(f"[rename] ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
