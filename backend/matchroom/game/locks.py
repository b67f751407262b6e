from __future__ import annotations

import time
from contextlib import contextmanager
from threading import Condition, Lock
from typing import Iterator

from .errors import RegistryBusy


class RWLock:
    """Shared-read / exclusive-write lock.

    Any number of readers may hold the lock together. A writer waits for
    active readers to drain, and while it waits no new reader gets in, so a
    steady stream of `get` calls cannot starve `create`/`join`.
    """

    def __init__(self) -> None:
        self._cond = Condition(Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self, timeout: float | None = None) -> Iterator[None]:
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    if deadline is None:
                        self._cond.wait()
                        continue
                    remaining = deadline - time.monotonic()
                    if remaining <= 0 or not self._cond.wait(remaining):
                        if self._writer or self._readers:
                            raise RegistryBusy(message=f"write lock not acquired within {timeout}s")
            finally:
                self._writers_waiting -= 1
                # Readers blocked on us may proceed if we gave up.
                self._cond.notify_all()
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()
