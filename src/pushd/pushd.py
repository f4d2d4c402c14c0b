#!/usr/bin/env python3

# -*- coding: utf-8 -*-

"""A guard that changes the current directory and changes back afterwards.

    with Pushd("/etc"):
        ...  # cwd is /etc
    # cwd is back where it was

The working directory is shared by every thread in the process. A guard only
restores correctly if nothing else changes the cwd while it is live, so either
keep guards on one thread or pass ``serialize=True`` (or set
``PUSHD_SERIALIZE``) to hold ``CWD_LOCK`` for the guard's lifetime.

Guards nest: release them in reverse order of construction. Releasing an outer
guard before an inner one is not detected.
"""

from pathlib import Path
import logging
import os
import threading
import typing as t

from .config import load_settings
from .cwd import PathLike, WorkingDirectory, default_working_directory
from .exceptions import DirectoryChangeFailed, DirectoryQueryFailed, DirectoryRestoreFailed


log = logging.getLogger(__name__)


class CwdLock:
    """Re-entrant for the thread holding it, but releasable from any thread.

    A guard may be finalized on a different thread from the one that built
    it, so the last release can't be tied to the owner the way RLock is.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._owner = None
        self._depth = 0

    def acquire(self, blocking: bool = True, timeout: float = -1) -> bool:
        me = threading.current_thread()
        if self._owner is me:
            self._depth += 1
            return True
        if not self._lock.acquire(blocking, timeout):
            return False
        self._owner = me
        self._depth = 1
        return True

    def release(self) -> None:
        if self._depth == 0:
            raise RuntimeError("cannot release un-acquired lock")
        self._depth -= 1
        if self._depth == 0:
            self._owner = None
            self._lock.release()

    def locked(self) -> bool:
        return self._lock.locked()


CWD_LOCK = CwdLock()


class Pushd:
    """Changes the current directory when created and changes back on release.

    Construction raises ``DirectoryQueryFailed`` if the cwd can't be read and
    ``DirectoryChangeFailed`` if the OS refuses ``target_path``. In both cases
    the cwd is unchanged and no guard exists.

    Restoration is attempted at most once, by whichever comes first of
    ``release()``, ``pop()``, leaving a ``with`` block or garbage collection.
    ``release()`` logs a failed restore as a warning. ``pop()`` raises
    ``DirectoryRestoreFailed`` instead.

    With ``raise_on_error=True`` a failed restore at the end of a ``with``
    block is raised, unless the original directory is gone or the block is
    already raising.
    """

    def __init__(
        self,
        target_path: PathLike,
        *,
        raise_on_error: t.Optional[bool] = None,
        serialize: t.Optional[bool] = None,
        cwd: t.Optional[WorkingDirectory] = None,
    ):
        self._active = False
        self._lock_held = False

        if raise_on_error is None or serialize is None:
            settings = load_settings()
            raise_on_error = settings.raise_on_error if raise_on_error is None else raise_on_error
            serialize = settings.serialize if serialize is None else serialize

        self.raise_on_error = raise_on_error
        self.serialize = serialize
        self._cwd = cwd or default_working_directory()

        if self.serialize:
            CWD_LOCK.acquire()
            self._lock_held = True

        try:
            # nothing that can fail may run after the change succeeds
            target = Path(os.fsdecode(target_path))

            try:
                previous = self._cwd.get()
            except OSError as e:
                raise DirectoryQueryFailed(e) from e

            try:
                self._cwd.set(target_path)
            except OSError as e:
                raise DirectoryChangeFailed(target_path, e) from e
        except BaseException:
            self._release_lock()
            raise

        self._previous = previous
        self.target = target
        self._active = True
        log.debug(f"set current dir to {self.target} from {self._previous}")

    @property
    def previous_directory(self) -> Path:
        return self._previous

    @property
    def active(self) -> bool:
        return self._active

    def pop(self) -> None:
        """Change back to the original directory, the first time only.

        Raises DirectoryRestoreFailed if the change fails. The guard is
        released either way; there is no second attempt.
        """
        if not self._active:
            return

        self._active = False
        log.debug(f"setting current dir back to {self._previous}")
        try:
            self._cwd.set(self._previous)
        except OSError as e:
            raise DirectoryRestoreFailed(self._previous, e) from e
        finally:
            self._release_lock()

    def release(self) -> None:
        """Like pop(), but a failure is logged instead of raised."""
        try:
            self.pop()
        except DirectoryRestoreFailed as e:
            self._warn(e)

    def __enter__(self) -> "Pushd":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        try:
            self.pop()
        except DirectoryRestoreFailed as e:
            if not self.raise_on_error or exc_type is not None:
                self._warn(e)
            elif isinstance(e.cause, FileNotFoundError):
                # usually a temporary directory that was cleaned up
                log.debug(f"original dir {e.path} no longer exists, staying in {self.target}")
            else:
                raise

    def __del__(self):
        if getattr(self, "_active", False):
            self.release()

    def __repr__(self) -> str:
        state = "active" if self._active else "released"
        return f"Pushd({str(self.target)!r}, previous={str(self._previous)!r}, {state})"

    def _warn(self, e: DirectoryRestoreFailed) -> None:
        log.warning(
            f"Could not return to original dir {e.path}: {e.cause}",
            extra={"path": str(e.path), "error": e.cause},
        )

    def _release_lock(self) -> None:
        if self._lock_held:
            self._lock_held = False
            CWD_LOCK.release()
