#!/usr/bin/env python3

# -*- coding: utf-8 -*-

"""Defaults read from the environment, or a .env / settings.ini file found by
walking up from the current directory."""

from dataclasses import dataclass
from decouple import AutoConfig, Config, RepositoryEmpty
import os


@dataclass(frozen=True)
class Settings:
    raise_on_error: bool = False
    serialize: bool = False


def _config():
    try:
        return AutoConfig(search_path=os.getcwd())
    except OSError:
        # cwd is unreadable; the guard reports that itself, settings fall back to os.environ
        return Config(RepositoryEmpty())


def load_settings() -> Settings:
    # read on every call so that environment changes are picked up
    config = _config()
    return Settings(
        raise_on_error=config("PUSHD_RAISE_ON_ERROR", default=False, cast=bool),
        serialize=config("PUSHD_SERIALIZE", default=False, cast=bool),
    )
