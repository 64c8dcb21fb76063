"""Run callables on background threads with a bounded pool."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

POOL_SIZE = 12
"""Maximum number of suspended tasks running at once."""

_slots = threading.BoundedSemaphore(POOL_SIZE)


class SuspendStatus(Enum):
    """Lifecycle of a suspended task."""

    IDLE = "idle"
    AWAITING = "awaiting"
    ERROR = "error"
    DONE = "done"


class SuspendError(Exception):
    """Raised when a suspended task cannot start or fails."""


class Suspend:
    """A callable to run in the background, with its result and status."""

    def __init__(self, cb: Callable[[], Any] | None = None) -> None:
        self.cb = cb
        self.data: Any = None
        self.error: BaseException | None = None
        self.status = SuspendStatus.IDLE

    def _run(self) -> None:
        try:
            self.data = self.cb()
        except BaseException as exc:  # noqa: BLE001 - stored and re-raised on wait
            self.error = exc
            self.status = SuspendStatus.ERROR
        else:
            self.status = SuspendStatus.DONE
        finally:
            _slots.release()

    def __repr__(self) -> str:
        return f"Suspend(status={self.status.name})"


@dataclass
class Eventually:
    """Handle to a running task; ``wait`` blocks until it has finished."""

    thread: threading.Thread
    task: Suspend

    def wait(self, timeout: float | None = None) -> Any:
        """Wait for the task and return its result.

        Raises TimeoutError if it is still running after ``timeout`` seconds
        and SuspendError if the callable raised.
        """
        self.thread.join(timeout)
        if self.thread.is_alive():
            raise TimeoutError("suspended task is still running")
        if self.task.error is not None:
            raise SuspendError("suspended task failed") from self.task.error
        return self.task.data


def _start(task: Suspend, daemon: bool) -> threading.Thread:
    if task.cb is None:
        task.status = SuspendStatus.ERROR
        raise SuspendError("suspended task has no callable")
    _slots.acquire()
    task.data = None
    task.error = None
    task.status = SuspendStatus.AWAITING
    thread = threading.Thread(target=task._run, daemon=daemon)
    try:
        thread.start()
    except RuntimeError as exc:
        _slots.release()
        task.status = SuspendStatus.ERROR
        raise SuspendError("could not start thread") from exc
    return thread


def suspend(task: Suspend) -> Eventually:
    """Start ``task`` on a new thread and return a handle to wait on.

    Blocks while the pool is full.
    """
    return Eventually(_start(task, daemon=False), task)


def suspend_parallel(task: Suspend) -> None:
    """Start ``task`` on a detached thread; poll ``task.status`` for completion.

    Blocks while the pool is full.
    """
    _start(task, daemon=True)