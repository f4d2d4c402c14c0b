#!/usr/bin/env python3

# -*- coding: utf-8 -*-

"""Console and file logging setup for programs that use pushd.

The library itself only logs to ``pushd.*`` loggers. ``cli_log_config`` is for
applications and test runs that want to see those messages.
"""

import contextlib
import logging
import typing as t
from textwrap import indent
from pretty_traceback.formatting import exc_to_traceback_str


_ansi_colors = {
    "red": 31,
    "yellow": 33,
    "cyan": 36,
}
_ansi_reset_all = "\033[0m"


def style(text: t.Any, fg: str) -> str:
    if fg not in _ansi_colors:
        raise TypeError(f"Unknown color {fg!r}")
    return f"\033[{_ansi_colors[fg]}m{text}{_ansi_reset_all}"


default_formats = {
    logging.DEBUG: style("DEBUG | %(name)s: %(message)s", fg="cyan"),
    logging.INFO: "%(message)s",
    logging.WARNING: style("WARN  | %(message)s", fg="yellow"),
    logging.ERROR: style("ERROR | %(message)s", fg="red"),
    logging.CRITICAL: style("FATAL | %(message)s", fg="red"),
}

verbosities = {
    0: logging.CRITICAL,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
}


class PrettyExceptionFormatter(logging.Formatter):
    """Renders tracebacks with pretty-traceback, indented under the message."""

    def __init__(self, *args, color=True, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.color = color

    def format(self, record: logging.LogRecord):
        # exc_text is cached on the record, keep coloured tracebacks out of other handlers
        cached, record.exc_text = record.exc_text, None
        try:
            return super().format(record)
        finally:
            record.exc_text = cached

    def formatMessage(self, record: logging.LogRecord):
        s = super().formatMessage(record)
        # a failed restore carries the path and OS error as extras
        if getattr(record, "path", None) is not None and record.levelno >= logging.WARNING:
            s += f" [path={record.path} error={getattr(record, 'error', None)!r}]"
        return s

    def formatException(self, ei):
        _, exc_value, traceback = ei
        return indent(exc_to_traceback_str(exc_value, traceback, color=self.color), " " * 4)


class LevelFormatter(logging.Formatter):
    """Picks a format string by record level."""

    def __init__(self, formats: t.Optional[t.Dict[int, str]] = None, color: bool = True):
        super().__init__()
        self.fallback = PrettyExceptionFormatter(color=color)
        self.formatters = {
            levelno: PrettyExceptionFormatter(fmt, color=color) for levelno, fmt in (formats or default_formats).items()
        }

    def format(self, record: logging.LogRecord):
        return self.formatters.get(record.levelno, self.fallback).format(record)


@contextlib.contextmanager
def attached(logger: logging.Logger, handler: logging.Handler, close: bool = True):
    logger.addHandler(handler)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        if close:
            handler.close()


@contextlib.contextmanager
def level(logger: logging.Logger, new_level: int):
    old_level = logger.level
    logger.setLevel(new_level)
    try:
        yield logger
    finally:
        logger.setLevel(old_level)


def cli_log_config(
    logger: t.Optional[logging.Logger] = None,
    verbose: int = 2,
    filename: t.Optional[str] = None,
    file_verbose: t.Optional[int] = None,
) -> contextlib.ExitStack:
    """
    Configure ``logger`` (the root logger by default) for a CLI run.

    Parameters
    ----------
    logger : logging.Logger, default None
        The logger to configure. If None, configures the root logger.
    verbose : int from 0 to 3, default 2
        0 shows critical errors, 1 warnings, 2 info and 3 or more debug.
    filename : str, default None
        Also log, without colour, to this file.
    file_verbose : int, default None
        Verbosity for the file. Defaults to `verbose`.

    Returns
    -------
    A context manager. The previous level and handlers come back on exit.

    Example
    -------
    ```py
    with cli_log_config(verbose=1):
        with Pushd(build_dir):
            ...
    ```
    prints `WARN  | Could not return to original dir ...` if the way back fails.
    """
    logger = logger or logging.root
    if file_verbose is None:
        file_verbose = verbose

    console_level = verbosities.get(verbose, logging.DEBUG)
    file_level = verbosities.get(file_verbose, logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(LevelFormatter())
    console_handler.setLevel(console_level)

    stack = contextlib.ExitStack()
    stack.enter_context(level(logger, min(console_level, file_level)))
    stack.enter_context(attached(logger, console_handler, close=False))

    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(PrettyExceptionFormatter("%(levelname)s:%(asctime)s:%(name)s:%(message)s", color=False))
        file_handler.setLevel(file_level)
        stack.enter_context(attached(logger, file_handler))

    return stack
