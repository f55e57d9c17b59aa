"""Shared fixtures: an in-process TCP printer and connected clients."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator, Awaitable, Callable
import time

import pytest
import pytest_asyncio

from escpos_netprinter import Generator, NetworkPrinter, PosPrintResult


class VirtualPrinter:
    """Minimal ESC/POS device on 127.0.0.1 that records every byte it receives."""

    def __init__(self) -> None:
        self.received = bytearray()
        self.connections = 0
        self._server: asyncio.AbstractServer | None = None
        self._writers: list[asyncio.StreamWriter] = []

    @property
    def port(self) -> int:
        assert self._server is not None
        return self._server.sockets[0].getsockname()[1]

    async def start(self) -> None:
        self._server = await asyncio.start_server(self._handle, "127.0.0.1", 0)

    async def stop(self) -> None:
        await self.drop_clients()
        if self._server is not None:
            self._server.close()
            await self._server.wait_closed()

    async def _handle(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        self.connections += 1
        self._writers.append(writer)
        try:
            while True:
                data = await reader.read(4096)
                if not data:
                    break
                self.received.extend(data)
        except ConnectionError:
            pass
        finally:
            writer.close()

    async def reply(self, data: bytes) -> None:
        """Send ``data`` to every connected client."""
        for writer in list(self._writers):
            if writer.is_closing():
                continue
            try:
                writer.write(data)
                await writer.drain()
            except ConnectionError:
                continue

    async def drop_clients(self) -> None:
        """Close every client connection from the device side."""
        for writer in self._writers:
            writer.close()
        self._writers.clear()

    async def wait_for_bytes(self, count: int, timeout: float = 2.0) -> bytes:
        """Wait until at least ``count`` bytes have been received."""
        deadline = time.monotonic() + timeout
        while len(self.received) < count:
            if time.monotonic() > deadline:
                raise AssertionError(f"Expected {count} bytes, got {len(self.received)}: {bytes(self.received)!r}")
            await asyncio.sleep(0.01)
        return bytes(self.received)


async def _wait_until(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    """Poll ``predicate`` until it is true or fail the test."""
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("Condition not met before timeout")
        await asyncio.sleep(0.01)


@pytest.fixture
def wait_until() -> Callable[..., Awaitable[None]]:
    """Return a coroutine function polling a predicate until it holds."""
    return _wait_until


@pytest_asyncio.fixture
async def virtual_printer() -> AsyncGenerator[VirtualPrinter, None]:
    device = VirtualPrinter()
    await device.start()
    yield device
    await device.stop()


@pytest.fixture
def reset_bytes() -> bytes:
    """Bytes a freshly connected printer receives first."""
    return Generator().reset()


@pytest_asyncio.fixture
async def printer(virtual_printer: VirtualPrinter, reset_bytes: bytes) -> AsyncGenerator[NetworkPrinter, None]:
    """A NetworkPrinter connected to the virtual printer."""
    client = NetworkPrinter()
    result = await client.connect("127.0.0.1", port=virtual_printer.port, timeout=2.0)
    assert result is PosPrintResult.SUCCESS
    await virtual_printer.wait_for_bytes(len(reset_bytes))
    yield client
    await client.disconnect()
