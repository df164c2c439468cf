"""Platform capability values.

A :class:`PathFlavour` bundles the separator characters and the filename
comparison rule of one platform, together with the lexical helpers the path
value is built on.  Every path carries exactly one flavour; nothing in the
path model consults global OS state directly, so both flavours can be used
on any host.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from collections.abc import Iterable
from types import ModuleType


class PathFlavour:
    __slots__ = ("name", "sep", "altsep", "case_sensitive", "_module", "_seps", "_joiners")

    def __init__(self, name: str, module: ModuleType, case_sensitive: bool) -> None:
        self.name: str = name
        self.sep: str = module.sep
        self.altsep: str | None = module.altsep
        self.case_sensitive: bool = case_sensitive
        self._module: ModuleType = module
        self._seps: tuple[str, ...] = (
            (self.sep, self.altsep) if self.altsep else (self.sep,)
        )
        # A drive's volume separator also terminates a prefix ("C:" + "x" -> "C:x")
        self._joiners: tuple[str, ...] = (
            self._seps + (":",) if module is ntpath else self._seps
        )

    def __repr__(self) -> str:
        return f"<PathFlavour {self.name}>"

    # -- string model --

    def normalize(self, raw: str) -> str:
        if not raw:
            return "."
        if self.altsep:
            raw = raw.replace(self.altsep, self.sep)
        return raw

    def casefold(self, raw: str) -> str:
        return raw if self.case_sensitive else raw.upper()

    def splitroot(self, raw: str) -> tuple[str, str, str]:
        """Split *raw* into ``(drive, root, tail)``.

        The root is at most one separator character; the tail keeps any
        further separators verbatim.
        """
        drive, rest = self._module.splitdrive(raw)
        root = rest[:1] if rest[:1] in self._seps else ""
        return drive, root, rest[len(root):]

    def is_rooted(self, raw: str) -> bool:
        drive, root, _ = self.splitroot(raw)
        return bool(drive or root)

    def combine(self, segments: Iterable[str]) -> str:
        result = ""
        for segment in segments:
            if not segment:
                continue
            if not result or self.is_rooted(segment):
                result = segment
            elif result[-1] in self._joiners:
                result += segment
            else:
                result += self.sep + segment
        return result

    def split(self, raw: str) -> list[str]:
        if self.altsep:
            raw = raw.replace(self.altsep, self.sep)
        return [p for p in raw.split(self.sep) if p]

    def dirname(self, raw: str) -> str:
        return self._module.dirname(raw)

    def basename(self, raw: str) -> str:
        return self._module.basename(raw)


posix_flavour = PathFlavour("posix", posixpath, case_sensitive=True)
windows_flavour = PathFlavour("windows", ntpath, case_sensitive=False)
host_flavour = windows_flavour if os.name == "nt" else posix_flavour
