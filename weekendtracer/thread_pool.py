"""A small worker pool that pulls tasks from a generator until it runs dry."""

from __future__ import annotations

import os
import threading
from abc import ABC, abstractmethod
from typing import Callable


class TaskGenerator(ABC):
    """Source of work for a ThreadPool."""

    @abstractmethod
    def next(self) -> Callable[[], None] | None:
        """Return the next task, or None when there is no more work."""

    @abstractmethod
    def has_next(self) -> bool:
        """Report whether the generator has more tasks."""


class ThreadPool:
    """Starts worker threads at once; each runs tasks until the generator is exhausted.

    The first exception raised by a task stops the pool and is re-raised by join().
    """

    def __init__(self, generator: TaskGenerator, num_threads: int | None = None) -> None:
        if num_threads is None:
            num_threads = os.cpu_count() or 1
        if num_threads < 1:
            raise ValueError("A thread pool needs at least one thread.")
        self.num_threads = num_threads
        self.error: Exception | None = None
        self._generator = generator
        self._task_lock = threading.Lock()
        self._count_lock = threading.Lock()
        self._count = 0
        self._workers = [threading.Thread(target=self._work, daemon=True) for _ in range(num_threads)]
        for worker in self._workers:
            worker.start()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.join()

    def _work(self) -> None:
        while True:
            with self._task_lock:
                if self.error is not None:
                    return
                task = self._generator.next()
            if task is None:
                return
            try:
                task()
            except Exception as exc:
                with self._task_lock:
                    if self.error is None:
                        self.error = exc
                return
            with self._count_lock:
                self._count += 1

    def count(self) -> int:
        """Number of tasks completed so far."""
        with self._count_lock:
            return self._count

    def has_next(self) -> bool:
        return self._generator.has_next()

    def join(self) -> None:
        """Wait for every worker to finish; re-raise a task's exception if one failed."""
        for worker in self._workers:
            worker.join()
        self._workers.clear()
        if self.error is not None:
            raise self.error