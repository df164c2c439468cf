from __future__ import annotations

import os
from collections.abc import Iterator

from ._exceptions import OPathInvalidOperationError
from ._flavour import PathFlavour, host_flavour, posix_flavour, windows_flavour
from ._typing import StrPath


class PurePath:
    """Immutable value object over a single path string.

    The raw string is stored as given, except that alternate separators are
    replaced by the flavour's canonical separator and an empty path becomes
    ``"."``.  Redundant separators, trailing separators and ``.``/``..``
    segments are kept verbatim.  Every component is derived lexically from
    the raw string; no property touches the filesystem.

    Parameters
    ----------
    *segments:
        ``str`` or ``os.PathLike[str]`` values combined left to right.  A
        rooted segment discards everything accumulated before it.  ``None``
        and empty segments are skipped.

    Example
    -------
    >>> p = PurePosixPath("src", "archive.tar.gz")
    >>> p.stem, p.suffix, p.suffixes
    ('archive.tar', '.gz', ['.tar', '.gz'])
    """

    __slots__ = ("_raw",)
    _flavour: PathFlavour = host_flavour

    def __init__(self, *segments: StrPath | None) -> None:
        if (
            len(segments) == 1
            and isinstance(segments[0], PurePath)
            and segments[0]._flavour is self._flavour
        ):
            self._raw: str = segments[0]._raw
            return
        strs = [self._coerce(s) for s in segments if s is not None]
        self._raw = self._flavour.normalize(self._flavour.combine(strs))

    @staticmethod
    def _coerce(segment: StrPath) -> str:
        value = os.fspath(segment)
        if not isinstance(value, str):
            raise TypeError(
                f"expected str or os.PathLike[str], got {type(value).__name__!r}"
            )
        return value

    # -- string conversion --

    def __str__(self) -> str:
        return self._raw

    def __fspath__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw!r})"

    # -- comparison --

    @property
    def _key(self) -> str:
        return self._flavour.casefold(self._raw)

    def _comparable(self, other: object) -> bool:
        return isinstance(other, PurePath) and other._flavour is self._flavour

    def __eq__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._key == other._key  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self._key)

    def __lt__(self, other: PurePath) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._key < other._key

    def __le__(self, other: PurePath) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._key <= other._key

    def __gt__(self, other: PurePath) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._key > other._key

    def __ge__(self, other: PurePath) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._key >= other._key

    # -- components --

    @property
    def parts(self) -> tuple[str, ...]:
        if self._raw == ".":
            return (".",)
        drive, root, tail = self._flavour.splitroot(self._raw)
        anchor = drive + root
        if anchor:
            return (anchor, *self._flavour.split(tail))
        return tuple(self._flavour.split(self._raw))

    @property
    def drive(self) -> str:
        return self._flavour.splitroot(self._raw)[0]

    @property
    def root(self) -> str:
        return self._flavour.splitroot(self._raw)[1]

    @property
    def anchor(self) -> str:
        drive, root, _ = self._flavour.splitroot(self._raw)
        return drive + root

    @property
    def name(self) -> str:
        """Final path segment, or ``""`` for roots and trailing separators."""
        return self._flavour.basename(self._raw)

    @property
    def suffix(self) -> str:
        name = self.name
        i = name.rfind(".")
        if 0 < i < len(name) - 1:
            return name[i:]
        return ""

    @property
    def suffixes(self) -> list[str]:
        """All trailing extensions of the name, e.g. ``['.tar', '.gz']``.

        A dot at position 0 belongs to the stem.  A name ending in a dot has
        no suffixes, no suffix, and keeps the trailing dot in its stem
        (``"file."`` has stem ``"file."``, not ``"file"`` as some platform
        APIs report).
        """
        name = self.name
        if name.endswith("."):
            return []
        result: list[str] = []
        dot = name.find(".", 1)
        while dot >= 0:
            end = name.find(".", dot + 1)
            result.append(name[dot:end] if end >= 0 else name[dot:])
            dot = end
        return result

    @property
    def stem(self) -> str:
        name = self.name
        i = name.rfind(".")
        if 0 < i < len(name) - 1:
            return name[:i]
        return name

    @property
    def parent(self) -> PurePath:
        head = self._flavour.dirname(self._raw)
        if head == self._raw:
            return self
        return type(self)(head)

    @property
    def parents(self) -> Iterator[PurePath]:
        """Successive parents, nearest first.

        A new generator is returned on every access.
        """
        return self._iter_parents()

    def _iter_parents(self) -> Iterator[PurePath]:
        current = self.parent
        while current._raw != self._raw and current._raw:
            yield current
            nxt = current.parent
            if nxt._raw == current._raw:
                break
            current = nxt

    def is_absolute(self) -> bool:
        return self._flavour.is_rooted(self._raw)

    # -- composition --

    def joinpath(self, *segments: StrPath | None) -> PurePath:
        if not segments:
            return self
        return type(self)(self._raw, *segments)

    def __truediv__(self, other: StrPath) -> PurePath:
        try:
            return self.joinpath(other)
        except TypeError:
            return NotImplemented

    def __rtruediv__(self, other: StrPath) -> PurePath:
        try:
            return type(self)(other, self._raw)
        except TypeError:
            return NotImplemented

    def with_name(self, name: str) -> PurePath:
        if not self.name:
            raise OPathInvalidOperationError(
                f"Path has no name to replace: '{self._raw}'", self._raw
            )
        return type(self)(self._flavour.dirname(self._raw), name)

    def with_stem(self, stem: str) -> PurePath:
        return self.with_name(stem + self.suffix)

    def with_suffix(self, suffix: str) -> PurePath:
        return self.with_name(self.stem + suffix)


class PurePosixPath(PurePath):
    """Path value with POSIX separators and case-sensitive comparison."""

    __slots__ = ()
    _flavour = posix_flavour


class PureWindowsPath(PurePath):
    """Path value with Windows separators, drives and case-insensitive comparison."""

    __slots__ = ()
    _flavour = windows_flavour
