"""Background task helpers for SimpleFtp.

Provides ThreadedTask, which runs one blocking FTP call on a worker
thread and hands back its completion as a TaskResult.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar


T = TypeVar("T")

logger = logging.getLogger("simple_ftp.threading")


class TaskStatus(Enum):
    """Status of a background task."""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class TaskResult(Generic[T]):
    """Result of a background task."""
    status: TaskStatus
    result: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        """True if the task completed without raising."""
        return self.status == TaskStatus.COMPLETED

    def raise_for_error(self) -> None:
        """Re-raise the error captured from the worker thread, if any."""
        if self.error is not None:
            raise self.error


class ThreadedTask(Generic[T]):
    """
    Runs a callable in a background thread.

    Usage:
        task = ThreadedTask(service.upload_string, args=("hello", "a.txt"))
        task.start()

        result = task.get_result()
        result.raise_for_error()
    """

    def __init__(
        self,
        target: Callable[..., T],
        args: tuple = (),
        kwargs: Optional[dict] = None,
        on_complete: Optional[Callable[[TaskResult[T]], None]] = None
    ):
        """
        Initialize a threaded task.

        Args:
            target: Callable to run in background
            args: Positional arguments for target
            kwargs: Keyword arguments for target
            on_complete: Callback when task finishes (called from worker thread)
        """
        self._target = target
        self._args = args
        self._kwargs = kwargs or {}
        self._on_complete = on_complete

        self._thread: Optional[threading.Thread] = None
        self._done = threading.Event()
        self._result: Optional[TaskResult[T]] = None
        self._status = TaskStatus.PENDING

    @property
    def status(self) -> TaskStatus:
        """Current task status."""
        return self._status

    @property
    def is_done(self) -> bool:
        """True once the task has completed or failed."""
        return self._done.is_set()

    def start(self) -> "ThreadedTask[T]":
        """Start the background task."""
        if self._status != TaskStatus.PENDING:
            raise RuntimeError("Task already started")

        self._status = TaskStatus.RUNNING
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        return self

    def _run(self) -> None:
        """Internal method that runs in the background thread."""
        try:
            result = self._target(*self._args, **self._kwargs)
            self._result = TaskResult(status=TaskStatus.COMPLETED, result=result)
            self._status = TaskStatus.COMPLETED
        except Exception as e:
            self._result = TaskResult(status=TaskStatus.FAILED, error=e)
            self._status = TaskStatus.FAILED
        finally:
            self._done.set()

        if self._on_complete:
            try:
                self._on_complete(self._result)
            except Exception:
                logger.exception("Task completion callback failed")

    def get_result(self, timeout: Optional[float] = None) -> TaskResult[T]:
        """
        Wait for task completion and return result.

        Args:
            timeout: Maximum time to wait (None = forever)

        Returns:
            TaskResult with status and result/error

        Raises:
            TimeoutError: If timeout expires before task completes
        """
        if self._thread:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                raise TimeoutError("Task did not complete within timeout")

        return self._result or TaskResult(status=TaskStatus.PENDING)


def run_in_background(
    target: Callable[..., T],
    *args,
    on_complete: Optional[Callable[[TaskResult[T]], None]] = None,
    **kwargs
) -> ThreadedTask[T]:
    """
    Start ``target`` on a worker thread.

    Args:
        target: Callable to run
        *args: Positional arguments for target
        on_complete: Callback when task finishes
        **kwargs: Keyword arguments for target

    Returns:
        The started ThreadedTask
    """
    task = ThreadedTask(target, args=args, kwargs=kwargs, on_complete=on_complete)
    return task.start()
