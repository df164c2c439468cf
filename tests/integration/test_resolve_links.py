import os

import pytest
from opath import Path

needs_symlinks = pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")


def test_cwd_is_absolute_existing_directory():
    cwd = Path.cwd()
    assert isinstance(cwd, Path)
    assert cwd.exists()
    assert cwd.is_dir()
    assert cwd.is_absolute()


def test_cwd_is_not_cached(opath_tmp, monkeypatch):
    before = Path.cwd()
    monkeypatch.chdir(opath_tmp)
    assert Path.cwd() == Path(os.getcwd())
    assert Path.cwd().resolve() == opath_tmp.resolve()
    assert Path.cwd() != before


def test_home_is_absolute():
    home = Path.home()
    assert home.is_absolute()


def test_home_follows_environment(monkeypatch, opath_tmp):
    monkeypatch.setenv("HOME", str(opath_tmp))
    monkeypatch.setenv("USERPROFILE", str(opath_tmp))
    assert Path.home() == opath_tmp


def test_absolute_relative_path(opath_tmp, monkeypatch):
    monkeypatch.chdir(opath_tmp)
    p = Path("a", "b.txt").absolute()
    assert p.is_absolute()
    assert p == Path(os.path.abspath(os.path.join("a", "b.txt")))


def test_absolute_does_not_require_existence(opath_tmp, monkeypatch):
    monkeypatch.chdir(opath_tmp)
    p = Path("missing").absolute()
    assert not p.exists()
    assert p.name == "missing"


def test_resolve_missing_falls_back_to_absolute(opath_tmp, monkeypatch):
    monkeypatch.chdir(opath_tmp)
    p = Path("does", "not", "exist")
    assert p.resolve() == p.absolute()


def test_resolve_existing(opath_tmp):
    f = opath_tmp / "f.txt"
    f.touch()
    assert f.resolve() == Path(os.path.realpath(f))


@needs_symlinks
def test_symlink_to_file(opath_tmp):
    target = opath_tmp / "target.txt"
    target.write_text("data")
    link = opath_tmp / "link.txt"
    link.symlink_to(target)
    assert link.is_symlink()
    assert link.is_file()
    assert link.read_text() == "data"
    assert link.readlink() == target
    st = link.stat()
    assert st is not None and st["is_symlink"] is True


@needs_symlinks
def test_symlink_to_directory(opath_tmp):
    target = opath_tmp / "dir"
    target.mkdir()
    link = opath_tmp / "dirlink"
    link.symlink_to(target)
    assert link.is_symlink()
    assert link.is_dir()


@needs_symlinks
def test_resolve_follows_symlink(opath_tmp):
    target = opath_tmp / "real.txt"
    target.touch()
    link = opath_tmp / "alias.txt"
    link.symlink_to(target)
    assert link.resolve() == target.resolve()


@needs_symlinks
def test_unlink_dangling_symlink(opath_tmp):
    link = opath_tmp / "dangling"
    link.symlink_to(opath_tmp / "nowhere")
    assert not link.exists()
    assert link.is_symlink()
    link.unlink()
    assert not link.is_symlink()


@needs_symlinks
def test_resolve_dangling_symlink_falls_back(opath_tmp):
    link = opath_tmp / "dangling"
    link.symlink_to(opath_tmp / "nowhere")
    assert link.resolve() == link.absolute()


@needs_symlinks
def test_resolve_symlink_loop_falls_back(opath_tmp):
    a = opath_tmp / "a"
    b = opath_tmp / "b"
    a.symlink_to(b)
    b.symlink_to(a)
    assert a.resolve() == a.absolute()


def test_resolve_embedded_null_falls_back(opath_tmp, monkeypatch):
    monkeypatch.chdir(opath_tmp)
    p = Path("a\x00b")
    assert p.resolve() == p.absolute()
