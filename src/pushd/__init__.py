#!/usr/bin/env python3

# -*- coding: utf-8 -*-

"""Temporarily change the current working directory, and change back."""

from .cwd import OsWorkingDirectory, WorkingDirectory, default_working_directory
from .exceptions import DirectoryChangeFailed, DirectoryQueryFailed, DirectoryRestoreFailed, PushdException
from .pushd import CWD_LOCK, Pushd
from .utils import change_directory

__all__ = [
    "CWD_LOCK",
    "DirectoryChangeFailed",
    "DirectoryQueryFailed",
    "DirectoryRestoreFailed",
    "OsWorkingDirectory",
    "Pushd",
    "PushdException",
    "WorkingDirectory",
    "change_directory",
    "default_working_directory",
]
