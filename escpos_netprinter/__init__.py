"""ESC/POS network printer client."""

from __future__ import annotations

from .exceptions import (
    ChannelClosedError,
    ConnectionClosedError,
    EscposNetPrinterError,
    InvalidConfigError,
    NotConfiguredError,
)
from .generator import (
    Barcode,
    BarcodeFont,
    BarcodeText,
    Generator,
    PaperSize,
    PosAlign,
    PosBeepDuration,
    PosColumn,
    PosCutMode,
    PosDrawer,
    PosFontType,
    PosImageFn,
    PosPrintResult,
    PosStyles,
    PosTextSize,
    QRCorrection,
    QRSize,
)
from .printer import NetworkPrinter, NetworkPrinterConfig, config_from_dict

__version__ = "1.0.0"

__all__ = [
    "Barcode",
    "BarcodeFont",
    "BarcodeText",
    "ChannelClosedError",
    "ConnectionClosedError",
    "EscposNetPrinterError",
    "Generator",
    "InvalidConfigError",
    "NetworkPrinter",
    "NetworkPrinterConfig",
    "NotConfiguredError",
    "PaperSize",
    "PosAlign",
    "PosBeepDuration",
    "PosColumn",
    "PosCutMode",
    "PosDrawer",
    "PosFontType",
    "PosImageFn",
    "PosPrintResult",
    "PosStyles",
    "PosTextSize",
    "QRCorrection",
    "QRSize",
    "config_from_dict",
]
