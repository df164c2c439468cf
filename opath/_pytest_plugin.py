"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["opath._pytest_plugin"]

This makes the ``opath_tmp`` fixture automatically available::

    def test_something(opath_tmp):
        (opath_tmp / "a.txt").write_text("hello")
"""

import pytest

from ._path import Path


@pytest.fixture
def opath_tmp(tmp_path) -> Path:
    """An empty directory as an :class:`opath.Path`.

    Provides an independent directory per test (function scope), backed by
    pytest's ``tmp_path``.
    """
    return Path(tmp_path)
