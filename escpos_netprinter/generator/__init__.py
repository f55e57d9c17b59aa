"""ESC/POS command encoder and its parameter types."""

from __future__ import annotations

from .barcode import Barcode
from .enums import (
    BarcodeFont,
    BarcodeText,
    PaperSize,
    PosAlign,
    PosBeepDuration,
    PosCutMode,
    PosDrawer,
    PosFontType,
    PosImageFn,
    PosPrintResult,
    PosTextSize,
    QRCorrection,
    QRSize,
)
from .generator import Generator
from .styles import PosColumn, PosStyles

__all__ = [
    "Barcode",
    "BarcodeFont",
    "BarcodeText",
    "Generator",
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
]
