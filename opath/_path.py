from __future__ import annotations

import io
import logging
import os
import shutil
from collections.abc import Iterator
from typing import IO, Any

from ._flavour import host_flavour
from ._glob import glob_directory, iter_directory
from ._pure import PurePath
from ._typing import OPathStatResult, StrPath

logger = logging.getLogger(__name__)


class Path(PurePath):
    """Host-flavoured path value with filesystem operations.

    Every filesystem method is a single blocking call into :mod:`os`,
    :mod:`shutil` or :mod:`io`.  Nothing is cached: two calls on the same
    path may observe different filesystem states.
    """

    __slots__ = ()
    _flavour = host_flavour

    # -- process state --

    @classmethod
    def cwd(cls) -> Path:
        return cls(os.getcwd())

    @classmethod
    def home(cls) -> Path:
        return cls(os.path.expanduser("~"))

    def absolute(self) -> Path:
        """Resolve against the current directory without touching the filesystem."""
        return type(self)(os.path.abspath(self._raw))

    def resolve(self) -> Path:
        """Canonicalize the path, following symlinks.

        Falls back to :meth:`absolute` when the OS cannot canonicalize the
        path (for example because it does not exist).
        """
        try:
            return type(self)(os.path.realpath(self._raw, strict=True))
        except (OSError, RuntimeError, ValueError) as e:
            logger.debug("resolve(%r) fell back to absolute(): %s", self._raw, e)
            return self.absolute()

    # -- queries --

    def exists(self) -> bool:
        return os.path.exists(self._raw)

    def is_file(self) -> bool:
        return os.path.isfile(self._raw)

    def is_dir(self) -> bool:
        return os.path.isdir(self._raw)

    def is_symlink(self) -> bool:
        return os.path.islink(self._raw)

    def stat(self) -> OPathStatResult | None:
        """Return metadata for the path, or ``None`` if it does not exist."""
        try:
            st = os.stat(self._raw)
        except FileNotFoundError:
            return None
        return OPathStatResult(
            size=st.st_size,
            created_at=st.st_ctime,
            modified_at=st.st_mtime,
            is_dir=os.path.isdir(self._raw),
            is_symlink=os.path.islink(self._raw),
        )

    # -- file I/O --

    def open(
        self,
        mode: str = "rb",
        buffering: int = -1,
        encoding: str | None = None,
        errors: str | None = None,
        newline: str | None = None,
    ) -> IO[Any]:
        return io.open(self._raw, mode, buffering, encoding, errors, newline)

    def read_bytes(self) -> bytes:
        with self.open("rb") as f:
            return f.read()

    def read_text(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        with self.open("r", encoding=encoding, errors=errors) as f:
            return f.read()

    def write_bytes(self, data: bytes) -> int:
        view = memoryview(data)
        with self.open("wb") as f:
            return f.write(view)

    def write_text(
        self, data: str, encoding: str = "utf-8", errors: str = "strict"
    ) -> int:
        if not isinstance(data, str):
            raise TypeError(f"data must be str, not {type(data).__name__}")
        with self.open("w", encoding=encoding, errors=errors) as f:
            return f.write(data)

    def touch(self) -> None:
        """Update the modification time, creating the file (and parents) if needed."""
        if self.exists():
            os.utime(self._raw, None)
            return
        parent = self.parent
        if not parent.exists():
            parent.mkdir(parents=True, exist_ok=True)
        logger.debug("touch: creating '%s'", self._raw)
        with self.open("ab"):
            pass

    # -- directories --

    def iterdir(self) -> Iterator[Path]:
        return iter_directory(self)

    def glob(self, pattern: str) -> Iterator[Path]:
        return glob_directory(self, pattern)

    def rglob(self, pattern: str) -> Iterator[Path]:
        return glob_directory(self, "**/" + pattern)

    def mkdir(self, parents: bool = False, exist_ok: bool = False) -> None:
        logger.debug("mkdir '%s' (parents=%s, exist_ok=%s)", self._raw, parents, exist_ok)
        try:
            if parents:
                os.makedirs(self._raw)
            else:
                os.mkdir(self._raw)
        except FileExistsError:
            if not exist_ok or not self.is_dir():
                raise

    def rmdir(self) -> None:
        logger.debug("rmdir '%s'", self._raw)
        os.rmdir(self._raw)

    # -- renames and removal --

    def _require_exists(self) -> None:
        if not os.path.lexists(self._raw):
            raise FileNotFoundError(f"No such file or directory: '{self._raw}'")

    def rename(self, target: StrPath) -> Path:
        """Move this entry to *target*, which must not exist yet."""
        destination = type(self)(target)
        self._require_exists()
        if os.path.lexists(destination._raw):
            raise FileExistsError(f"Destination already exists: '{destination}'")
        logger.debug("rename '%s' -> '%s'", self._raw, destination._raw)
        os.rename(self._raw, destination._raw)
        return destination

    def replace(self, target: StrPath) -> Path:
        """Move this entry to *target*, overwriting whatever is there.

        When this path is a directory an existing destination directory is
        removed recursively first.
        """
        destination = type(self)(target)
        self._require_exists()
        if self.is_dir() and not self.is_symlink() and destination.is_dir():
            logger.debug("replace: removing existing tree '%s'", destination._raw)
            shutil.rmtree(destination._raw)
        logger.debug("replace '%s' -> '%s'", self._raw, destination._raw)
        os.replace(self._raw, destination._raw)
        return destination

    def unlink(self, missing_ok: bool = False) -> None:
        logger.debug("unlink '%s'", self._raw)
        try:
            os.unlink(self._raw)
        except FileNotFoundError:
            if not missing_ok:
                raise

    # -- symbolic links --

    def symlink_to(self, target: StrPath) -> None:
        """Make this path a symbolic link pointing to *target*."""
        target_is_directory = os.path.isdir(target)
        logger.debug("symlink '%s' -> '%s'", self._raw, os.fspath(target))
        os.symlink(target, self._raw, target_is_directory=target_is_directory)

    def readlink(self) -> Path:
        return type(self)(os.readlink(self._raw))
