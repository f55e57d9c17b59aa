"""Utility functions for coercing loose values into encoder enums."""

from __future__ import annotations

from .enums import PaperSize, PosAlign, PosCutMode, PosFontType


def map_align(align: PosAlign | str | None, default: PosAlign = PosAlign.LEFT) -> PosAlign:
    """Map an alignment name or member to :class:`PosAlign`."""
    if isinstance(align, PosAlign):
        return align
    if not align:
        return default
    try:
        return PosAlign(align.lower())
    except ValueError:
        return default


def map_cut(mode: PosCutMode | str | None) -> PosCutMode:
    """Map a cut mode to :class:`PosCutMode`; unknown values mean a full cut."""
    if isinstance(mode, PosCutMode):
        return mode
    mode_l = (mode or "").lower()
    if mode_l in ("partial", "part"):
        return PosCutMode.PARTIAL
    return PosCutMode.FULL


def map_font(font: PosFontType | str | None) -> PosFontType | None:
    """Map ``"a"``/``"b"`` style names (or ``fontA``/``fontB``) to :class:`PosFontType`."""
    if font is None or isinstance(font, PosFontType):
        return font
    name = font.lower().replace("_", "")
    if name in ("a", "fonta"):
        return PosFontType.FONT_A
    if name in ("b", "fontb"):
        return PosFontType.FONT_B
    raise ValueError(f"Unknown font: {font!r}")


def map_paper_size(size: PaperSize | str | int) -> PaperSize:
    """Map ``58``, ``"58mm"`` or ``"mm58"`` to :class:`PaperSize`."""
    if isinstance(size, PaperSize):
        return size
    digits = "".join(ch for ch in str(size) if ch.isdigit())
    for member in PaperSize:
        if member.value == f"{digits}mm":
            return member
    raise ValueError(f"Unsupported paper size: {size!r}")
