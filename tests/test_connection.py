"""Tests for the printer connection lifecycle."""

import asyncio
import socket
import time
from unittest.mock import MagicMock, patch

import pytest

from escpos_netprinter import (
    ChannelClosedError,
    NetworkPrinter,
    NotConfiguredError,
    PosPrintResult,
)
from escpos_netprinter.printer import connection as connection_module
from escpos_netprinter.printer.channel import open_channel


def _unused_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class TestConnect:
    """Tests for connect and ensure_connected."""

    @pytest.mark.asyncio
    async def test_connect_sends_reset(self, virtual_printer, reset_bytes) -> None:
        printer = NetworkPrinter()
        result = await printer.connect("127.0.0.1", port=virtual_printer.port, timeout=2.0)
        try:
            assert result is PosPrintResult.SUCCESS
            assert printer.is_connected
            assert printer.host == "127.0.0.1"
            assert printer.port == virtual_printer.port
            received = await virtual_printer.wait_for_bytes(len(reset_bytes))
            assert received == reset_bytes
        finally:
            await printer.disconnect()

    @pytest.mark.asyncio
    async def test_ensure_connected_is_idempotent(self, virtual_printer) -> None:
        printer = NetworkPrinter()
        with patch.object(connection_module, "open_channel", wraps=open_channel) as spy:
            assert await printer.connect("127.0.0.1", port=virtual_printer.port) is PosPrintResult.SUCCESS
            assert await printer.ensure_connected() is PosPrintResult.SUCCESS
            assert await printer.ensure_connected() is PosPrintResult.SUCCESS
        try:
            assert spy.call_count == 1
        finally:
            await printer.disconnect()

    @pytest.mark.asyncio
    async def test_concurrent_ensure_connected_connects_once(self, virtual_printer) -> None:
        printer = NetworkPrinter()
        printer._host, printer._port = "127.0.0.1", virtual_printer.port
        with patch.object(connection_module, "open_channel", wraps=open_channel) as spy:
            results = await asyncio.gather(printer.ensure_connected(), printer.ensure_connected())
        try:
            assert results == [PosPrintResult.SUCCESS, PosPrintResult.SUCCESS]
            assert spy.call_count == 1
        finally:
            await printer.disconnect()

    @pytest.mark.asyncio
    async def test_ensure_connected_requires_host(self) -> None:
        printer = NetworkPrinter()
        with pytest.raises(NotConfiguredError):
            await printer.ensure_connected()

    @pytest.mark.asyncio
    async def test_refused_connection_reports_timeout(self) -> None:
        printer = NetworkPrinter()
        result = await printer.connect("127.0.0.1", port=_unused_port(), timeout=1.0)
        assert result is PosPrintResult.TIMEOUT
        assert printer.is_connected is False
        assert printer.get_diagnostics()["last_error_reason"]

    @pytest.mark.asyncio
    async def test_unreachable_host_does_not_hang(self) -> None:
        printer = NetworkPrinter()
        start = time.monotonic()
        # TEST-NET-1 address, never routable
        result = await printer.connect("192.0.2.1", port=9100, timeout=0.5)
        assert result is PosPrintResult.TIMEOUT
        assert time.monotonic() - start < 2.0

    @pytest.mark.asyncio
    async def test_connect_timeout_is_reported(self) -> None:
        printer = NetworkPrinter()

        async def _slow_open(*_, **__):
            raise asyncio.TimeoutError

        with patch.object(connection_module, "open_channel", side_effect=_slow_open):
            result = await printer.connect("printer.local", port=9100, timeout=0.2)
        assert result is PosPrintResult.TIMEOUT
        assert printer.get_diagnostics()["last_error_reason"] == "timeout"

    @pytest.mark.asyncio
    async def test_out_of_range_port_reports_timeout(self) -> None:
        printer = NetworkPrinter()
        result = await printer.connect("127.0.0.1", port=91000, timeout=1.0)
        assert result is PosPrintResult.TIMEOUT
        assert printer.is_connected is False
        assert printer.get_diagnostics()["last_error_reason"]


class TestDisconnect:
    """Tests for disconnect."""

    @pytest.mark.asyncio
    async def test_disconnect_keeps_host_and_port(self, printer, virtual_printer) -> None:
        await printer.disconnect()
        assert printer.is_connected is False
        assert printer.host == "127.0.0.1"
        assert printer.port == virtual_printer.port

    @pytest.mark.asyncio
    async def test_disconnect_clears_input(self, printer, virtual_printer, wait_until) -> None:
        await virtual_printer.reply(b"\x12\x16")
        await wait_until(lambda: len(printer._input) == 2)
        await printer.disconnect()
        assert len(printer._input) == 0

    @pytest.mark.asyncio
    async def test_disconnect_when_never_connected(self) -> None:
        printer = NetworkPrinter()
        await printer.disconnect()
        await printer.disconnect()
        assert printer.is_connected is False

    @pytest.mark.asyncio
    async def test_disconnect_delay(self, printer) -> None:
        start = time.monotonic()
        await printer.disconnect(delay_ms=100)
        assert time.monotonic() - start >= 0.09
        assert printer.is_connected is False

    @pytest.mark.asyncio
    async def test_write_after_disconnect_raises(self, printer) -> None:
        await printer.disconnect()
        with pytest.raises(ChannelClosedError):
            printer.text("late")

    @pytest.mark.asyncio
    async def test_write_before_connect_raises(self) -> None:
        printer = NetworkPrinter()
        with pytest.raises(ChannelClosedError):
            printer.cut()

    @pytest.mark.asyncio
    async def test_reconnect_after_disconnect(self, printer, virtual_printer, wait_until) -> None:
        await printer.disconnect()
        assert await printer.ensure_connected() is PosPrintResult.SUCCESS
        await wait_until(lambda: virtual_printer.connections == 2)
        assert printer.is_connected

    @pytest.mark.asyncio
    async def test_disconnect_during_connect_wins(self, virtual_printer) -> None:
        printer = NetworkPrinter()
        seen: list[bool] = []
        printer.add_connection_listener(seen.append)
        task = asyncio.create_task(printer.connect("127.0.0.1", port=virtual_printer.port, timeout=2.0))
        await asyncio.sleep(0)
        await printer.disconnect()
        result = await task
        assert result is PosPrintResult.TIMEOUT
        assert printer.is_connected is False
        assert printer._channel is None
        assert seen == []
        with pytest.raises(ChannelClosedError):
            printer.cut()
        # A later connect starts a fresh session
        assert await printer.ensure_connected() is PosPrintResult.SUCCESS
        await printer.disconnect()

    @pytest.mark.asyncio
    async def test_peer_close_marks_disconnected(self, printer, virtual_printer, wait_until) -> None:
        await virtual_printer.drop_clients()
        await wait_until(lambda: not printer.is_connected)
        assert printer.host == "127.0.0.1"
        with pytest.raises(ChannelClosedError):
            printer.feed(1)


class TestConnectionListeners:
    """Tests for connection listeners and diagnostics."""

    @pytest.mark.asyncio
    async def test_listener_sees_transitions(self, virtual_printer) -> None:
        printer = NetworkPrinter()
        seen: list[bool] = []
        printer.add_connection_listener(seen.append)
        await printer.connect("127.0.0.1", port=virtual_printer.port)
        await printer.disconnect()
        assert seen == [True, False]

    @pytest.mark.asyncio
    async def test_unsubscribe(self, virtual_printer) -> None:
        printer = NetworkPrinter()
        listener = MagicMock()
        remove = printer.add_connection_listener(listener)
        remove()
        remove()
        await printer.connect("127.0.0.1", port=virtual_printer.port)
        await printer.disconnect()
        listener.assert_not_called()

    @pytest.mark.asyncio
    async def test_failing_listener_is_ignored(self, virtual_printer) -> None:
        printer = NetworkPrinter()
        printer.add_connection_listener(MagicMock(side_effect=RuntimeError("boom")))
        assert await printer.connect("127.0.0.1", port=virtual_printer.port) is PosPrintResult.SUCCESS
        await printer.disconnect()

    @pytest.mark.asyncio
    async def test_diagnostics(self, printer, virtual_printer) -> None:
        diag = printer.get_diagnostics()
        assert diag["host"] == "127.0.0.1"
        assert diag["port"] == virtual_printer.port
        assert diag["connected"] is True
        assert diag["buffered_bytes"] == 0
        assert diag["reply_pending"] is False
        assert diag["last_connected"] is not None
        assert diag["last_error_reason"] is None
