#!/usr/bin/env python3

# -*- coding: utf-8 -*-

""" """

from pathlib import Path, PurePosixPath
import os
import pytest

from pushd import DirectoryChangeFailed, change_directory


class TestChangeDirectory:
    def test_yields_new_directory(self, tmp_path) -> None:
        start = Path.cwd()
        with change_directory(tmp_path) as here:
            assert here.samefile(tmp_path)
            assert Path.cwd().samefile(tmp_path)
        assert Path.cwd().samefile(start)

    def test_relative_path_is_yielded_absolute(self, tmp_path) -> None:
        (tmp_path / "sub").mkdir()
        os.chdir(tmp_path)
        with change_directory("sub") as here:
            assert here.is_absolute()
            assert here.samefile(tmp_path / "sub")

    def test_create(self, tmp_path) -> None:
        new_dir = tmp_path / "some" / "place"
        with change_directory(new_dir, create=True) as here:
            assert here.samefile(new_dir)
            assert Path.cwd().samefile(new_dir)
        assert new_dir.is_dir()

    def test_missing_without_create(self, tmp_path) -> None:
        start = Path.cwd()
        with pytest.raises(DirectoryChangeFailed):
            with change_directory(tmp_path / "nonexistent"):
                pass
        assert Path.cwd().samefile(start)

    def test_restores_when_block_raises(self, tmp_path) -> None:
        start = Path.cwd()
        with pytest.raises(KeyError):
            with change_directory(tmp_path):
                raise KeyError("inside")
        assert Path.cwd().samefile(start)

    def test_options_pass_through(self, fake_cwd) -> None:
        with change_directory("/etc", cwd=fake_cwd) as here:
            assert fake_cwd.current == PurePosixPath("/etc")
            assert str(here) == "/etc"
        assert fake_cwd.current == PurePosixPath("/home/user")
