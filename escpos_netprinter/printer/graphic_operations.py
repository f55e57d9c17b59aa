"""Image, barcode and QR code operation mixin for the network printer."""

from __future__ import annotations

from typing import Any

from PIL import Image

from ..generator import (
    Barcode,
    BarcodeFont,
    BarcodeText,
    PosAlign,
    PosImageFn,
    QRCorrection,
    QRSize,
)


class GraphicOperationsMixin:
    """Mixin providing image, image_raster, barcode and qrcode commands."""

    # These attributes are expected from the connection class
    _generator: Any

    def _write(self, data: bytes) -> None:
        """Write bytes to the open channel (implemented in connection)."""
        raise NotImplementedError

    def image(self, img_src: Image.Image, *, align: PosAlign = PosAlign.CENTER) -> None:
        self._write(self._generator.image(img_src, align=align))

    def image_raster(
        self,
        image: Image.Image,
        *,
        align: PosAlign = PosAlign.CENTER,
        high_density_horizontal: bool = True,
        high_density_vertical: bool = True,
        image_fn: PosImageFn = PosImageFn.BIT_IMAGE_RASTER,
    ) -> None:
        self._write(
            self._generator.image_raster(
                image,
                align=align,
                high_density_horizontal=high_density_horizontal,
                high_density_vertical=high_density_vertical,
                image_fn=image_fn,
            )
        )

    def barcode(
        self,
        barcode: Barcode,
        *,
        width: int | None = None,
        height: int | None = None,
        font: BarcodeFont | None = None,
        text_pos: BarcodeText = BarcodeText.BELOW,
        align: PosAlign = PosAlign.CENTER,
    ) -> None:
        self._write(
            self._generator.barcode(
                barcode,
                width=width,
                height=height,
                font=font,
                text_pos=text_pos,
                align=align,
            )
        )

    def qrcode(
        self,
        text: str,
        *,
        align: PosAlign = PosAlign.CENTER,
        size: QRSize = QRSize.SIZE4,
        cor: QRCorrection = QRCorrection.L,
    ) -> None:
        self._write(self._generator.qrcode(text, align=align, size=size, cor=cor))
