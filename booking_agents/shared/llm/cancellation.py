"""
Deadline-backed cancellation for model calls.

Each model call gets its own ``CancellationToken``. The token is armed
on the running event loop for the duration of the call and its timer is
always cleared on exit. ``run_with_token`` races the call against the
token, so even a backend that ignores the token is abandoned at the
deadline.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Optional, TypeVar

from booking_agents.shared.errors import AbortedError


T = TypeVar("T")

# Time given to a cancelled call to unwind before it is abandoned
_CANCEL_GRACE_SECONDS = 1.0


class CancellationToken:
    """
    A cancellation signal that fires automatically after ``timeout`` seconds.

    Attributes:
        timeout: Seconds until the token fires once armed
        reason: Why the token fired, None while it has not
    """

    def __init__(self, timeout: float):
        self.timeout = timeout
        self.reason: Optional[str] = None
        self._event = asyncio.Event()
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._deadline: Optional[float] = None
        self._timer: Optional[asyncio.TimerHandle] = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: str = "Request was cancelled") -> None:
        if not self._event.is_set():
            self.reason = reason
            self._event.set()

    def remaining(self) -> float:
        """Seconds left before the deadline (the full timeout if not armed)."""
        if self._loop is None or self._deadline is None:
            return self.timeout
        return max(0.0, self._deadline - self._loop.time())

    async def wait(self) -> None:
        await self._event.wait()

    @asynccontextmanager
    async def armed(self) -> AsyncIterator["CancellationToken"]:
        """Start the deadline timer; it is cleared on every exit path."""
        self._loop = asyncio.get_running_loop()
        self._deadline = self._loop.time() + self.timeout
        self._timer = self._loop.call_later(
            self.timeout,
            self.cancel,
            f"Request timed out after {self.timeout:g} seconds.",
        )
        try:
            yield self
        finally:
            self._timer.cancel()
            self._timer = None


async def run_with_token(awaitable: Awaitable[T], token: CancellationToken) -> T:
    """
    Await ``awaitable`` unless ``token`` fires first.

    Args:
        awaitable: The in-flight model call
        token: Cancellation token for this call

    Returns:
        The call's result

    Raises:
        AbortedError: If the token fired before the call finished
    """
    task: "asyncio.Future[Any]" = asyncio.ensure_future(awaitable)
    waiter = asyncio.ensure_future(token.wait())
    try:
        done, _ = await asyncio.wait(
            {task, waiter}, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        waiter.cancel()
        if not task.done():
            task.cancel()
            await asyncio.wait({task}, timeout=_CANCEL_GRACE_SECONDS)

    if task in done:
        return task.result()
    raise AbortedError(token.reason or "Request was cancelled")
