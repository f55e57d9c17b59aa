"""Enumerations for ESC/POS command parameters."""

from __future__ import annotations

from enum import Enum, IntEnum


class PosAlign(str, Enum):
    """Horizontal alignment, valued as python-escpos alignment names."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class PosCutMode(str, Enum):
    """Paper cut mode, valued as python-escpos cut modes."""

    FULL = "FULL"
    PARTIAL = "PART"


class PosFontType(str, Enum):
    """Printer font, valued as python-escpos font names."""

    FONT_A = "a"
    FONT_B = "b"


class PosTextSize(IntEnum):
    """Character magnification factor."""

    SIZE1 = 1
    SIZE2 = 2
    SIZE3 = 3
    SIZE4 = 4
    SIZE5 = 5
    SIZE6 = 6
    SIZE7 = 7
    SIZE8 = 8


class PosBeepDuration(IntEnum):
    """Buzzer duration code (``ESC B n t``)."""

    BEEP_50MS = 1
    BEEP_100MS = 2
    BEEP_150MS = 3
    BEEP_200MS = 4
    BEEP_250MS = 5
    BEEP_300MS = 6
    BEEP_350MS = 7
    BEEP_400MS = 8
    BEEP_450MS = 9


class PosDrawer(IntEnum):
    """Cash drawer kick-out connector pin."""

    PIN2 = 2
    PIN5 = 5


class PosImageFn(str, Enum):
    """Raster image command family, valued as python-escpos ``impl`` names."""

    BIT_IMAGE_RASTER = "bitImageRaster"
    GRAPHICS = "graphics"


class BarcodeText(str, Enum):
    """Position of the human readable text around a barcode."""

    NONE = "OFF"
    ABOVE = "ABOVE"
    BELOW = "BELOW"
    BOTH = "BOTH"


class BarcodeFont(str, Enum):
    """Font used for the human readable barcode text."""

    FONT_A = "A"
    FONT_B = "B"


class QRSize(IntEnum):
    """QR module size in dots."""

    SIZE1 = 1
    SIZE2 = 2
    SIZE3 = 3
    SIZE4 = 4
    SIZE5 = 5
    SIZE6 = 6
    SIZE7 = 7
    SIZE8 = 8


class QRCorrection(IntEnum):
    """QR error correction level, valued as python-escpos ``QR_ECLEVEL_*``."""

    L = 0
    M = 1
    Q = 2
    H = 3


class PaperSize(Enum):
    """Supported paper roll widths."""

    MM58 = "58mm"
    MM72 = "72mm"
    MM80 = "80mm"

    @property
    def width(self) -> int:
        """Printable width in dots."""
        return _PAPER_WIDTH_DOTS[self]

    def columns(self, font: PosFontType = PosFontType.FONT_A) -> int:
        """Characters per line for ``font``."""
        font_a, font_b = _PAPER_COLUMNS[self]
        return font_b if font == PosFontType.FONT_B else font_a


_PAPER_WIDTH_DOTS = {
    PaperSize.MM58: 372,
    PaperSize.MM72: 503,
    PaperSize.MM80: 558,
}

_PAPER_COLUMNS = {
    PaperSize.MM58: (32, 42),
    PaperSize.MM72: (42, 56),
    PaperSize.MM80: (48, 64),
}


class PosPrintResult(Enum):
    """Outcome of a connection attempt."""

    SUCCESS = 1
    TIMEOUT = 2

    @property
    def msg(self) -> str:
        """Human readable description of the outcome."""
        if self is PosPrintResult.SUCCESS:
            return "Success"
        return "Error. Printer connection timeout"
