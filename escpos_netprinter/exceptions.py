"""Exceptions raised by the ESC/POS network printer transport."""

from __future__ import annotations


class EscposNetPrinterError(Exception):
    """Base class for all transport errors."""


class NotConfiguredError(EscposNetPrinterError):
    """Raised when a connection is requested before host and port are known."""


class ChannelClosedError(EscposNetPrinterError):
    """Raised when bytes are written while no printer channel is open."""


class ConnectionClosedError(EscposNetPrinterError):
    """Raised when the connection is torn down while waiting for a reply."""


class InvalidConfigError(EscposNetPrinterError, ValueError):
    """Raised when a printer configuration mapping fails validation."""
