"""Connection lifecycle for a network ESC/POS printer."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
import contextlib
from datetime import datetime, timezone
import logging
from typing import Any

from ..const import DEFAULT_PORT, DEFAULT_TIMEOUT
from ..exceptions import ChannelClosedError, NotConfiguredError
from ..generator import Generator, PosPrintResult
from ..validation import validate_timeout
from .channel import ByteChannel, open_channel
from .correlator import PendingReply
from .input_buffer import InputBuffer

_LOGGER = logging.getLogger(__name__)


class PrinterConnection:
    """Owns the channel, the input buffer and the reply correlator of one printer.

    Invariant: ``is_connected`` implies an open channel. Host and port survive
    :meth:`disconnect` so that :meth:`ensure_connected` can reconnect.
    """

    def __init__(self, generator: Generator) -> None:
        self._generator = generator
        self._host: str | None = None
        self._port: int | None = None
        self._channel: ByteChannel | None = None
        self._connected: bool = False
        self._input = InputBuffer()
        self._correlator = PendingReply()
        self._lock = asyncio.Lock()
        # Bumped by disconnect() so an in-flight connect can tell it was cancelled
        self._session = 0
        self._disconnect_delay_ms: int = 0
        self._connection_listeners: list[Callable[[bool], None]] = []
        self._last_connected: datetime | None = None
        self._last_error_reason: str | None = None

    @property
    def host(self) -> str | None:
        return self._host

    @property
    def port(self) -> int | None:
        return self._port

    @property
    def is_connected(self) -> bool:
        return self._connected

    @property
    def generator(self) -> Generator:
        return self._generator

    async def connect(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> PosPrintResult:
        """Record ``host``/``port`` and open the connection.

        Any failure to connect is reported as :attr:`PosPrintResult.TIMEOUT`.
        """
        self._host = host
        self._port = port
        return await self.ensure_connected(timeout=timeout)

    async def ensure_connected(self, timeout: float = DEFAULT_TIMEOUT) -> PosPrintResult:
        """Open the connection unless it is already open.

        Raises:
            NotConfiguredError: If neither :meth:`connect` nor configuration
                provided a host and port.
        """
        if self._connected:
            return PosPrintResult.SUCCESS

        host, port = self._host, self._port
        if host is None or port is None:
            raise NotConfiguredError("Call `connect` first to define `host` and `port`")

        async with self._lock:
            # Another caller may have connected while we waited for the lock
            if self._connected:
                return PosPrintResult.SUCCESS
            session = self._session
            try:
                channel = await open_channel(
                    host,
                    port,
                    on_data=self._on_bytes,
                    on_close=self._on_channel_lost,
                    timeout=validate_timeout(timeout),
                )
            except asyncio.TimeoutError:
                self._last_error_reason = "timeout"
                _LOGGER.warning("Timed out connecting to printer %s:%s", host, port)
                return PosPrintResult.TIMEOUT
            except (OSError, OverflowError, ValueError) as e:
                # OverflowError/ValueError: port or address rejected before any I/O
                self._last_error_reason = str(e)
                _LOGGER.warning("Could not connect to printer %s:%s: %s", host, port, e)
                return PosPrintResult.TIMEOUT

            if session != self._session:
                # disconnect() ran while the connect was in flight
                channel.close()
                self._last_error_reason = "disconnected while connecting"
                _LOGGER.debug("Discarding connection to %s:%s opened after disconnect", host, port)
                return PosPrintResult.TIMEOUT

            self._channel = channel
            self._connected = True
            self._last_connected = datetime.now(timezone.utc)
            self._last_error_reason = None
            _LOGGER.info("Connected to printer %s:%s", host, port)

            channel.write(self._generator.reset())
            self._notify_connection_change(True)
            return PosPrintResult.SUCCESS

    async def disconnect(self, delay_ms: int | None = None) -> None:
        """Close the channel and drop any buffered input.

        ``delay_ms`` is a grace period so that queued bytes reach the printer
        before the socket is torn down. A pending status wait is resolved with
        the closed signal.
        """
        if delay_ms is None:
            delay_ms = self._disconnect_delay_ms
        if delay_ms and delay_ms > 0:
            await asyncio.sleep(delay_ms / 1000)

        was_connected = self._connected
        self._session += 1
        self._connected = False
        channel, self._channel = self._channel, None
        if channel is not None:
            channel.close()
        self._input.clear()
        self._correlator.close()

        if was_connected:
            _LOGGER.info("Disconnected from printer %s:%s", self._host, self._port)
            self._notify_connection_change(False)

    def add_connection_listener(self, callback: Callable[[bool], None]) -> Callable[[], None]:
        """Register ``callback(connected)`` and return an unsubscribe function."""
        self._connection_listeners.append(callback)

        def _remove() -> None:
            with contextlib.suppress(ValueError):
                self._connection_listeners.remove(callback)

        return _remove

    def get_diagnostics(self) -> dict[str, Any]:
        """Return diagnostic information about the connection."""
        return {
            "host": self._host,
            "port": self._port,
            "connected": self._connected,
            "buffered_bytes": len(self._input),
            "reply_pending": self._correlator.pending,
            "last_connected": self._last_connected.isoformat() if self._last_connected else None,
            "last_error_reason": self._last_error_reason,
        }

    def _write(self, data: bytes) -> None:
        channel = self._channel
        if channel is None:
            raise ChannelClosedError("Printer is not connected; call `connect` first")
        channel.write(data)

    def _on_bytes(self, chunk: bytes) -> None:
        # Append before notify: a woken waiter must see the bytes that woke it.
        self._input.append(chunk)
        self._correlator.notify()

    def _on_channel_lost(self, channel: ByteChannel, exc: Exception | None) -> None:
        if channel is not self._channel:
            return
        _LOGGER.warning("Printer %s:%s closed the connection: %s", self._host, self._port, exc)
        self._channel = None
        self._connected = False
        self._last_error_reason = str(exc) if exc else "closed by peer"
        self._correlator.close()
        self._notify_connection_change(False)

    def _notify_connection_change(self, connected: bool) -> None:
        for cb in list(self._connection_listeners):
            with contextlib.suppress(Exception):
                cb(connected)
