"""Barcode payload value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Barcode:
    """Barcode symbology name and data, as accepted by python-escpos."""

    bc: str
    data: str

    @classmethod
    def upc_a(cls, data: str) -> Barcode:
        return cls("UPC-A", data)

    @classmethod
    def upc_e(cls, data: str) -> Barcode:
        return cls("UPC-E", data)

    @classmethod
    def ean13(cls, data: str) -> Barcode:
        return cls("EAN13", data)

    @classmethod
    def ean8(cls, data: str) -> Barcode:
        return cls("EAN8", data)

    @classmethod
    def code39(cls, data: str) -> Barcode:
        return cls("CODE39", data)

    @classmethod
    def itf(cls, data: str) -> Barcode:
        return cls("ITF", data)

    @classmethod
    def codabar(cls, data: str) -> Barcode:
        return cls("NW7", data)

    @classmethod
    def code93(cls, data: str) -> Barcode:
        return cls("CODE93", data)

    @classmethod
    def code128(cls, data: str) -> Barcode:
        """CODE128 barcode; code set B is selected unless ``data`` names one."""
        if not data.startswith("{"):
            data = "{B" + data
        return cls("CODE128", data)
