import os
from typing import TypedDict, Union

StrPath = Union[str, "os.PathLike[str]"]


class OPathStatResult(TypedDict):
    size: int
    created_at: float
    modified_at: float
    is_dir: bool
    is_symlink: bool
