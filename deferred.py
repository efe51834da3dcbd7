"""Zero-delay deferred tasks."""

from __future__ import annotations

from collections.abc import Callable


Task = Callable[[], None]
Scheduler = Callable[[Task], None]


class DeferredQueue:
    """Holds tasks until the presentation layer reports a finished commit.

    Tasks scheduled while the queue is running wait for the next ``run_pending``.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def __call__(self, task: Task) -> None:
        self._tasks.append(task)

    def __len__(self) -> int:
        return len(self._tasks)

    def run_pending(self) -> int:
        """Run the tasks queued so far. If one raises, the rest stay queued."""
        count = len(self._tasks)
        for _ in range(count):
            self._tasks.pop(0)()
        return count
