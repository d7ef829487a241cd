"""Cancellable deadline scope for bounding resolver I/O."""
from __future__ import annotations

import asyncio
from types import TracebackType
from typing import Awaitable, Optional, TypeVar

from purlinfo.exceptions import DeadlineExceededError, ScopeCancelledError

T = TypeVar("T")


class DeadlineScope:
    """Deadline handle passed into every operation that performs I/O.

    The deadline starts counting when the scope is entered. Work awaited
    through ``run()`` is bounded by the remaining time and is cancelled
    when ``cancel()`` is called or the ``async with`` block exits.

    Example:
        async with DeadlineScope(30.0) as scope:
            info = await resolver.resolve(scope, purl)
    """

    def __init__(self, timeout: float) -> None:
        """Initialize the scope.

        Args:
            timeout: Seconds allowed for work run inside the scope.
        """
        self._timeout = timeout
        self._deadline: Optional[float] = None
        self._cancelled = False
        self._tasks: set[asyncio.Future] = set()

    @property
    def timeout(self) -> float:
        """Total seconds allowed for this scope."""
        return self._timeout

    @property
    def cancelled(self) -> bool:
        """Whether ``cancel()`` has been called or the scope was exited."""
        return self._cancelled

    @property
    def expired(self) -> bool:
        """Whether the deadline has elapsed."""
        return self.remaining() <= 0

    async def __aenter__(self) -> DeadlineScope:
        self._deadline = asyncio.get_running_loop().time() + self._timeout
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.cancel()

    def remaining(self) -> float:
        """Seconds left before the deadline, never negative.

        Returns:
            Remaining seconds, or the full timeout if the scope was not entered.
        """
        if self._deadline is None:
            return max(self._timeout, 0.0)
        return max(self._deadline - asyncio.get_running_loop().time(), 0.0)

    def cancel(self) -> None:
        """Cancel the scope and any work still running inside it."""
        self._cancelled = True
        for task in list(self._tasks):
            task.cancel()

    async def run(self, awaitable: Awaitable[T]) -> T:
        """Await work bounded by this scope.

        Args:
            awaitable: Coroutine or future to run.

        Returns:
            The awaitable's result.

        Raises:
            ScopeCancelledError: If the scope is or becomes cancelled.
            DeadlineExceededError: If the deadline elapses first.
        """
        if self._cancelled:
            _discard(awaitable)
            raise ScopeCancelledError("scope was cancelled")
        remaining = self.remaining()
        if remaining <= 0:
            _discard(awaitable)
            raise DeadlineExceededError(
                f"deadline of {self._timeout:g}s exceeded"
            )

        task = asyncio.ensure_future(awaitable)
        self._tasks.add(task)
        try:
            return await asyncio.wait_for(task, timeout=remaining)
        except asyncio.TimeoutError as e:
            raise DeadlineExceededError(
                f"deadline of {self._timeout:g}s exceeded"
            ) from e
        except asyncio.CancelledError:
            if self._cancelled and task.cancelled():
                raise ScopeCancelledError("scope was cancelled") from None
            raise
        finally:
            self._tasks.discard(task)


def _discard(awaitable: Awaitable[object]) -> None:
    # Close never-started coroutines so they don't warn on garbage collection
    if asyncio.iscoroutine(awaitable):
        awaitable.close()
