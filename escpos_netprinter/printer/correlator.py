"""Single-slot wait/notify rendezvous for printer replies."""

from __future__ import annotations

import asyncio


class PendingReply:
    """At most one outstanding wait for new input bytes.

    The slot is either empty or holds a pending future. Concurrent callers of
    :meth:`wait` share the pending future. The future resolves to ``True`` when
    new bytes arrive and to ``False`` when the connection is torn down.

    No locking: the slot is only touched from the event loop thread.
    """

    def __init__(self) -> None:
        self._waiter: asyncio.Future[bool] | None = None

    @property
    def pending(self) -> bool:
        waiter = self._waiter
        return waiter is not None and not waiter.done()

    def wait(self) -> asyncio.Future[bool]:
        """Return the pending future, creating one if the slot is empty."""
        waiter = self._waiter
        if waiter is not None and not waiter.done():
            return waiter
        waiter = asyncio.get_running_loop().create_future()
        self._waiter = waiter
        return waiter

    def notify(self) -> None:
        """Resolve the pending wait with ``True``; no-op when nothing waits."""
        self._resolve(True)

    def close(self) -> None:
        """Resolve the pending wait with the closed signal (``False``)."""
        self._resolve(False)

    def _resolve(self, value: bool) -> None:
        waiter, self._waiter = self._waiter, None
        if waiter is not None and not waiter.done():
            waiter.set_result(value)
