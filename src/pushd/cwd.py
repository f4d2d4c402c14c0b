#!/usr/bin/env python3

# -*- coding: utf-8 -*-

"""Access to the process working directory.

The working directory is process-wide state shared by every thread. Guards go
through a ``WorkingDirectory`` so that tests can swap in a fake one.
"""

from pathlib import Path
import os
import typing as t


PathLike = t.Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


class WorkingDirectory(t.Protocol):
    def get(self) -> Path:
        """Return the current directory. Raises OSError if it can't be read."""
        ...

    def set(self, path: PathLike) -> None:
        """Change the current directory. Raises OSError on refusal."""
        ...


class OsWorkingDirectory:
    def get(self) -> Path:
        return Path(os.getcwd())

    def set(self, path: PathLike) -> None:
        os.chdir(path)

    def __repr__(self) -> str:
        return "OsWorkingDirectory()"


_os_working_directory = OsWorkingDirectory()


def default_working_directory() -> WorkingDirectory:
    return _os_working_directory
