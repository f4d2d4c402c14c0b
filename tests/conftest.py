#!/usr/bin/env python3

# -*- coding: utf-8 -*-

""" """

from pathlib import Path, PurePosixPath
import errno
import pytest


class FakeWorkingDirectory:
    """In-memory cwd. set() fails for unknown directories or paths in `errors`."""

    def __init__(self, current="/home/user", directories=("/etc",)):
        self.current = PurePosixPath(current)
        self.directories = {PurePosixPath(d) for d in directories} | {self.current}
        self.errors = {}
        self.get_error = None
        self.set_calls = []

    def get(self):
        if self.get_error is not None:
            raise self.get_error
        return self.current

    def set(self, path):
        path = self.current / path
        self.set_calls.append(path)
        if path in self.errors:
            raise self.errors[path]
        if path not in self.directories:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(path))
        self.current = path


@pytest.fixture()
def fake_cwd():
    return FakeWorkingDirectory(directories=("/etc", "/srv/a", "/srv/a/b"))


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    # put the real cwd back after each test, even if a test removed it
    monkeypatch.chdir(Path.cwd())
    monkeypatch.delenv("PUSHD_RAISE_ON_ERROR", raising=False)
    monkeypatch.delenv("PUSHD_SERIALIZE", raising=False)
