from ._exceptions import OPathInvalidOperationError
from ._flavour import PathFlavour, host_flavour, posix_flavour, windows_flavour
from ._glob import glob_directory, iter_directory
from ._path import Path
from ._pure import PurePath, PurePosixPath, PureWindowsPath
from ._typing import OPathStatResult
from ._wildcard import match

__all__ = [
    "Path",
    "PurePath",
    "PurePosixPath",
    "PureWindowsPath",
    "PathFlavour",
    "posix_flavour",
    "windows_flavour",
    "host_flavour",
    "OPathInvalidOperationError",
    "OPathStatResult",
    "match",
    "glob_directory",
    "iter_directory",
]
__version__ = "0.1.0"
