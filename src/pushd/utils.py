#!/usr/bin/env python3

# -*- coding: utf-8 -*-

""" """

import contextlib
from pathlib import Path

from .pushd import Pushd


@contextlib.contextmanager
def change_directory(new_dir, create=False, **options):
    """Run the block inside ``new_dir``, yielding it as an absolute path.

    With ``create=True`` the directory and its parents are made first.
    Remaining keyword arguments go to ``Pushd``.
    """
    new_dir = Path(new_dir)
    if create:
        new_dir.mkdir(parents=True, exist_ok=True)

    with Pushd(new_dir, **options) as pd:
        yield pd.previous_directory / new_dir
