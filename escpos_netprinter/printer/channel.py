"""Duplex TCP byte channel to a printer."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
import logging

from ..exceptions import ChannelClosedError

_LOGGER = logging.getLogger(__name__)

DataCallback = Callable[[bytes], None]
CloseCallback = Callable[["ByteChannel", "Exception | None"], None]


class ByteChannel(asyncio.Protocol):
    """asyncio protocol forwarding inbound chunks to a single listener.

    The listener is bound when the protocol is created, so no byte received
    after the connection is made can be missed.
    """

    def __init__(self, on_data: DataCallback, on_close: CloseCallback | None = None) -> None:
        self._on_data = on_data
        self._on_close = on_close
        self._transport: asyncio.Transport | None = None
        self._closed = False

    def connection_made(self, transport: asyncio.BaseTransport) -> None:
        self._transport = transport  # type: ignore[assignment]
        _LOGGER.debug("Channel opened to %s", transport.get_extra_info("peername"))

    def data_received(self, data: bytes) -> None:
        _LOGGER.debug("Received %d bytes: %s", len(data), data.hex())
        self._on_data(data)

    def connection_lost(self, exc: Exception | None) -> None:
        self._closed = True
        self._transport = None
        _LOGGER.debug("Channel lost: %s", exc)
        if self._on_close is not None:
            self._on_close(self, exc)

    @property
    def is_open(self) -> bool:
        transport = self._transport
        return not self._closed and transport is not None and not transport.is_closing()

    def write(self, data: bytes) -> None:
        """Queue ``data`` for sending; transport writes keep call order."""
        transport = self._transport
        if self._closed or transport is None or transport.is_closing():
            raise ChannelClosedError("Printer channel is closed")
        _LOGGER.debug("Sending %d bytes: %s", len(data), data.hex())
        transport.write(data)

    def close(self) -> None:
        """Forcibly close the channel, discarding unsent data."""
        self._closed = True
        transport = self._transport
        if transport is not None:
            transport.abort()


async def open_channel(
    host: str,
    port: int,
    *,
    on_data: DataCallback,
    on_close: CloseCallback | None = None,
    timeout: float,
) -> ByteChannel:
    """Connect to ``host:port`` within ``timeout`` seconds.

    Raises:
        asyncio.TimeoutError: If the connect does not complete in time.
        OSError: If the connect fails at the socket level.
    """
    loop = asyncio.get_running_loop()
    _, channel = await asyncio.wait_for(
        loop.create_connection(lambda: ByteChannel(on_data, on_close), host, port),
        timeout=timeout,
    )
    return channel
