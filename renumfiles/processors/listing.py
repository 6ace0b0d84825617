"""Resolve a target pattern into the directory entries it matches."""

import fnmatch
import os
from pathlib import Path

from renumfiles.models.invocation import DirectoryListing


# Pattern used when no target is given: every entry in the working directory
DEFAULT_PATTERN = "*"


class DirectoryAccessError(OSError):
    """Raised when the directory part of a target pattern cannot be listed."""


def split_target_pattern(pattern: str | None, cwd: Path | None = None) -> tuple[Path, str]:
    """Split a target pattern into an absolute directory and a name pattern.

    Args:
        pattern: Target path such as ``photos/*.png``. Blank means every
            entry of the working directory.
        cwd: Directory relative patterns are resolved against. Defaults to
            the process working directory.

    Returns:
        Tuple of (absolute directory, filename pattern). The filename pattern
        is empty when the target ends with a path separator.
    """
    base = Path.cwd() if cwd is None else cwd

    if pattern is None or not pattern.strip():
        return base, DEFAULT_PATTERN

    head, tail = os.path.split(pattern)
    directory = Path(os.path.normpath(base / head)) if head else base
    return directory, tail


def resolve_listing(pattern: str | None, cwd: Path | None = None) -> DirectoryListing:
    """List entries directly inside the pattern's directory matching its name part.

    Files and subdirectories are both listed. The order is whatever the
    filesystem enumerates.

    Raises:
        DirectoryAccessError: If the directory is missing, is not a directory
            or cannot be read.
    """
    directory, name_pattern = split_target_pattern(pattern, cwd)

    try:
        with os.scandir(directory) as entries:
            all_names = [entry.name for entry in entries]
    except OSError as e:
        raise DirectoryAccessError(e.errno, f"Cannot list directory: {e.strerror}", str(directory)) from e

    names = []
    if name_pattern:
        names = [name for name in all_names if fnmatch.fnmatch(name, name_pattern)]

    return DirectoryListing(directory=directory, names=names)
