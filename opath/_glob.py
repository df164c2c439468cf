from __future__ import annotations

import fnmatch
import os
from collections.abc import Iterator
from typing import TYPE_CHECKING

from ._exceptions import OPathInvalidOperationError
from ._wildcard import match

if TYPE_CHECKING:
    from ._path import Path


def _require_directory(directory: Path) -> None:
    if not directory.is_dir():
        raise OPathInvalidOperationError(
            f"Not a directory: '{directory}'", str(directory)
        )


def _reraise(error: OSError) -> None:
    raise error


def iter_directory(directory: Path) -> Iterator[Path]:
    """Return a lazy iterator over the immediate children of *directory*."""
    _require_directory(directory)
    return _scan(directory)


def _scan(directory: Path) -> Iterator[Path]:
    with os.scandir(directory) as it:
        for entry in it:
            yield directory / entry.name


def glob_directory(directory: Path, pattern: str) -> Iterator[Path]:
    """Return a lazy iterator over entries below *directory* matching *pattern*.

    Without ``**`` the pattern is matched segment by segment with
    :func:`fnmatch.fnmatch`, each ``*``/``?`` confined to one level.

    With ``**`` the whole tree is enumerated and every entry whose *name*
    matches the last segment of the pattern (``**`` collapsed to ``*``) is
    produced.  The depth at which an entry sits is not taken into account,
    so ``"**/*.txt"`` and ``"a/**/*.txt"`` select the same entries.
    """
    if not pattern:
        raise ValueError(f"Unacceptable pattern: {pattern!r}")
    _require_directory(directory)
    flavour = directory._flavour
    if "**" in pattern:
        name_pattern = flavour.basename(flavour.normalize(pattern.replace("**", "*")))
        return _glob_recursive(directory, name_pattern)
    return _glob_segments(directory, flavour.split(pattern), 0)


def _glob_segments(current: Path, segments: list[str], idx: int) -> Iterator[Path]:
    if idx >= len(segments):
        return
    part = segments[idx]
    is_last = idx == len(segments) - 1

    files: list[Path] = []
    dirs: list[Path] = []
    with os.scandir(current) as it:
        for entry in it:
            if not fnmatch.fnmatch(entry.name, part):
                continue
            child = current / entry.name
            if entry.is_dir():
                dirs.append(child)
            else:
                files.append(child)

    if is_last:
        yield from files
        yield from dirs
    else:
        for child in dirs:
            yield from _glob_segments(child, segments, idx + 1)


def _glob_recursive(directory: Path, name_pattern: str) -> Iterator[Path]:
    cls = type(directory)
    # All matching files come out before any matching directory
    dirs: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(directory, onerror=_reraise):
        for name in filenames:
            if match(name_pattern, name):
                yield cls(dirpath, name)
        for name in dirnames:
            if match(name_pattern, name):
                dirs.append(cls(dirpath, name))
    yield from dirs
