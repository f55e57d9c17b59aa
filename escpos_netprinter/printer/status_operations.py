"""Real-time status query mixin for the network printer."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from ..const import STATUS_MASK
from ..exceptions import ChannelClosedError, ConnectionClosedError

_LOGGER = logging.getLogger(__name__)


class StatusOperationsMixin:
    """Mixin providing the ``DLE EOT`` status request/reply exchange."""

    # These attributes are expected from the connection class
    _generator: Any
    _channel: Any
    _input: Any
    _correlator: Any

    def _write(self, data: bytes) -> None:
        """Write bytes to the open channel (implemented in connection)."""
        raise NotImplementedError

    async def transmission_of_status(self, n: int = 1) -> int | None:
        """Request printer status ``n`` and return the low nibble of the reply.

        The reply is taken to be the last byte received, with no request
        matching. Concurrent callers share one wait and see the same reply.
        There is no built-in timeout: wrap the call in ``asyncio.wait_for``.
        If the caller gives up, the wait stays pending until a byte arrives or
        the connection is torn down.

        Returns:
            The status code, or ``None`` if no byte has been received.

        Raises:
            ChannelClosedError: If the printer is not connected.
            ConnectionClosedError: If the connection closes while waiting.
        """
        request = self._generator.transmission_of_status(n)
        if self._channel is None:
            raise ChannelClosedError("Printer is not connected; call `connect` first")

        waiter = self._correlator.wait()
        try:
            self._write(request)
        except ChannelClosedError:
            self._correlator.close()
            raise
        # Shield so a caller-side timeout leaves the shared wait intact
        received = await asyncio.shield(waiter)
        if not received:
            raise ConnectionClosedError("Connection closed while waiting for printer status")

        status = self._input.last
        if status is None:
            _LOGGER.debug("Status wait resolved with an empty input buffer")
            return None
        return status & STATUS_MASK
