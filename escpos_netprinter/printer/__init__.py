"""Network printer transport for ESC/POS thermal printers.

This package owns the TCP connection to the printer, forwards encoded commands
in call order and correlates status replies with requests.
"""

from __future__ import annotations

from .channel import ByteChannel, open_channel
from .config import PRINTER_CONFIG_SCHEMA, NetworkPrinterConfig, config_from_dict
from .connection import PrinterConnection
from .correlator import PendingReply
from .input_buffer import InputBuffer
from .network_printer import NetworkPrinter

__all__ = [
    "PRINTER_CONFIG_SCHEMA",
    "ByteChannel",
    "InputBuffer",
    "NetworkPrinter",
    "NetworkPrinterConfig",
    "PendingReply",
    "PrinterConnection",
    "config_from_dict",
    "open_channel",
]
