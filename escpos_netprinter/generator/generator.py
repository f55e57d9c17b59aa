"""ESC/POS command encoder built on python-escpos.

Every public method returns the bytes for one printer command. Rendering goes
through a fresh :class:`escpos.printer.Dummy` device so that python-escpos does
the protocol work (code pages, barcodes, QR codes, images) while this class
keeps the global font and code table state between calls.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging
import textwrap
from typing import Any

from escpos.printer import Dummy
from PIL import Image

from ..const import (
    KANJI_OFF,
    KANJI_ON,
    KANJI_PRINT_MODE,
    LF,
    MAX_BEEP_TIMES,
    MAX_FEED_LINES,
    PRINT_AND_FEED_DOTS,
    REVERSE_FEED,
    ROW_GRID_UNITS,
    TRANSMIT_STATUS,
)
from ..validation import validate_numeric_input
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
    QRCorrection,
    QRSize,
)
from .mapping_utils import map_align, map_cut, map_font, map_paper_size
from .styles import PosColumn, PosStyles

_LOGGER = logging.getLogger(__name__)

_DEFAULT_STYLES = PosStyles()


class Generator:
    """Encode printer operations into ESC/POS byte sequences."""

    def __init__(
        self,
        paper_size: PaperSize | str = PaperSize.MM80,
        profile: str | None = None,
        *,
        space_between_rows: int = 5,
    ) -> None:
        self._paper_size = map_paper_size(paper_size)
        self._profile = profile
        self._space_between_rows = validate_numeric_input(space_between_rows, 0, 255, "space_between_rows")
        self._font: PosFontType | None = None
        self._code_table: str | None = None
        self._max_chars_per_line: int | None = None

    @property
    def paper_size(self) -> PaperSize:
        return self._paper_size

    @property
    def profile(self) -> str | None:
        return self._profile

    @property
    def max_chars_per_line(self) -> int:
        """Characters per line for the current global font and paper."""
        if self._max_chars_per_line:
            return self._max_chars_per_line
        return self._paper_size.columns(self._font or PosFontType.FONT_A)

    # ------------------------------------------------------------------ helpers

    def _render(self, draw: Callable[[Any], None]) -> bytes:
        """Run ``draw`` against a scratch python-escpos device and return its output."""
        printer = Dummy(profile=self._profile)
        draw(printer)
        return bytes(printer.output)

    def _apply_styles(self, printer: Any, styles: PosStyles, *, is_kanji: bool = False) -> None:
        code_table = styles.code_table or self._code_table
        if code_table:
            printer.charcode(code_table)

        size_kwargs: dict[str, Any]
        if styles.width > 1 or styles.height > 1:
            size_kwargs = {
                "width": int(styles.width),
                "height": int(styles.height),
                "custom_size": True,
                "normal_textsize": False,
            }
        else:
            size_kwargs = {"custom_size": False, "normal_textsize": True}

        font = styles.font_type or self._font
        printer.set(
            align=map_align(styles.align).value,
            font=font.value if font else None,
            bold=bool(styles.bold),
            underline=1 if styles.underline else 0,
            invert=bool(styles.reverse),
            **size_kwargs,
        )

        if is_kanji:
            mode = 0
            if styles.width > 1:
                mode |= 0x04
            if styles.height > 1:
                mode |= 0x08
            if styles.underline:
                mode |= 0x80
            printer._raw(KANJI_PRINT_MODE + bytes([mode]))

    @staticmethod
    def _write_text(printer: Any, text: str, contains_chinese: bool) -> None:
        if contains_chinese:
            printer._raw(KANJI_ON + text.encode("gbk", errors="replace") + KANJI_OFF)
        else:
            printer._raw(KANJI_OFF)
            printer.text(text)

    @staticmethod
    def _wrap_text(text: str, cols: int) -> str:
        """Wrap each line of ``text`` to ``cols`` characters, keeping empty lines."""
        if cols <= 0:
            return text
        wrapped_lines: list[str] = []
        for line in text.splitlines():
            if not line:
                wrapped_lines.append("")
                continue
            wrapped_lines.extend(textwrap.wrap(line, width=cols, replace_whitespace=False, drop_whitespace=False))
        return "\n".join(wrapped_lines)

    @staticmethod
    def _set_align(printer: Any, align: PosAlign | str | None) -> None:
        printer.set(align=map_align(align, PosAlign.CENTER).value)

    # ----------------------------------------------------------------- commands

    def reset(self) -> bytes:
        """Initialize the printer and re-apply the global font and code table."""

        def _draw(printer: Any) -> None:
            printer.hw("INIT")
            if self._code_table:
                printer.charcode(self._code_table)
            if self._font:
                printer.set(font=self._font.value)

        return self._render(_draw)

    def end_job(self) -> bytes:
        """Print whatever is left in the printer buffer without feeding."""
        return PRINT_AND_FEED_DOTS + b"\x00"

    def set_global_code_table(self, code_table: str) -> bytes:
        self._code_table = code_table
        return self._render(lambda printer: printer.charcode(code_table))

    def set_global_font(self, font: PosFontType | str, max_chars_per_line: int | None = None) -> bytes:
        font_m = map_font(font)
        self._font = font_m
        self._max_chars_per_line = max_chars_per_line
        return self._render(lambda printer: printer.set(font=font_m.value if font_m else None))

    def set_styles(self, styles: PosStyles, is_kanji: bool = False) -> bytes:
        return self._render(lambda printer: self._apply_styles(printer, styles, is_kanji=is_kanji))

    def raw_bytes(self, cmd: Sequence[int] | bytes, is_kanji: bool = False) -> bytes:
        """Pass ``cmd`` through, switching Kanji mode off first unless ``is_kanji``."""
        prefix = b"" if is_kanji else KANJI_OFF
        return prefix + bytes(cmd)

    def text(
        self,
        text: str,
        styles: PosStyles = _DEFAULT_STYLES,
        lines_after: int = 0,
        contains_chinese: bool = False,
        max_chars_per_line: int | None = None,
    ) -> bytes:
        body = self._wrap_text(text, max_chars_per_line) if max_chars_per_line else text

        def _draw(printer: Any) -> None:
            self._apply_styles(printer, styles)
            self._write_text(printer, body, contains_chinese)
            printer._raw(LF * (max(0, lines_after) + 1))

        return self._render(_draw)

    def text_encoded(
        self,
        text_bytes: bytes,
        styles: PosStyles = _DEFAULT_STYLES,
        lines_after: int = 0,
        max_chars_per_line: int | None = None,
    ) -> bytes:
        """Print bytes that are already encoded for the active code table."""
        body = bytes(text_bytes)
        if max_chars_per_line and max_chars_per_line > 0:
            body = LF.join(body[i:i + max_chars_per_line] for i in range(0, len(body), max_chars_per_line))

        def _draw(printer: Any) -> None:
            self._apply_styles(printer, styles)
            printer._raw(KANJI_OFF + body)
            printer._raw(LF * (max(0, lines_after) + 1))

        return self._render(_draw)

    def empty_lines(self, n: int) -> bytes:
        return LF * n if n > 0 else b""

    def feed(self, n: int) -> bytes:
        """Print the buffer and feed ``n`` lines (``ESC d n``)."""
        lines = validate_numeric_input(n, 0, MAX_FEED_LINES, "feed")
        return self._render(lambda printer: printer.print_and_feed(lines))

    def reverse_feed(self, n: int) -> bytes:
        lines = validate_numeric_input(n, 0, MAX_FEED_LINES, "reverse_feed")
        return REVERSE_FEED + bytes([lines])

    def cut(self, mode: PosCutMode | str = PosCutMode.FULL) -> bytes:
        cut_mode = map_cut(mode)
        return self._render(lambda printer: printer.cut(mode=cut_mode.value))

    def print_code_table(self, code_table: str | None = None) -> bytes:
        """Print every printable character of ``code_table`` (or the active one)."""

        def _draw(printer: Any) -> None:
            printer._raw(KANJI_OFF)
            if code_table:
                printer.charcode(code_table)
            printer._raw(bytes(range(0x20, 0x7F)) + bytes(range(0x80, 0x100)) + LF)
            if code_table and self._code_table:
                printer.charcode(self._code_table)

        return self._render(_draw)

    def beep(self, n: int = 3, duration: PosBeepDuration = PosBeepDuration.BEEP_450MS) -> bytes:
        """Sound the buzzer ``n`` times; the printer accepts at most 9 per command."""
        if n <= 0:
            return b""

        def _draw(printer: Any) -> None:
            remaining = n
            while remaining > 0:
                times = min(remaining, MAX_BEEP_TIMES)
                printer.buzzer(times, int(duration))
                remaining -= times

        return self._render(_draw)

    def row(self, cols: Sequence[PosColumn]) -> bytes:
        """Print a line split into columns whose widths add up to 12.

        Cells longer than their column wrap onto extra lines; shorter cells are
        padded according to their own alignment.
        """
        total = sum(col.width for col in cols)
        if total != ROW_GRID_UNITS:
            raise ValueError(f"Total columns width must be equal to {ROW_GRID_UNITS}, got {total}")

        line_chars = self.max_chars_per_line
        cells: list[tuple[PosColumn, int, list[Any]]] = []
        for col in cols:
            char_width = max(1, line_chars * col.width // ROW_GRID_UNITS)
            chunks: list[Any]
            if col.text_encoded is not None:
                data = col.text_encoded
                chunks = [data[i:i + char_width] for i in range(0, len(data), char_width)] or [b""]
            else:
                chunks = textwrap.wrap(col.text, width=char_width) or [""]
            cells.append((col, char_width, chunks))
        height = max(len(chunks) for _, _, chunks in cells)

        def _draw(printer: Any) -> None:
            for index in range(height):
                for col, char_width, chunks in cells:
                    blank: Any = b"" if col.text_encoded is not None else ""
                    chunk = chunks[index] if index < len(chunks) else blank
                    padded = _pad(chunk, char_width, col.styles.align)
                    self._apply_styles(printer, col.styles.copy_with(align=PosAlign.LEFT))
                    if isinstance(padded, bytes):
                        printer._raw(KANJI_OFF + padded)
                    else:
                        self._write_text(printer, padded, col.contains_chinese)
                printer._raw(LF)
            if self._space_between_rows:
                printer._raw(PRINT_AND_FEED_DOTS + bytes([self._space_between_rows]))

        return self._render(_draw)

    def image(self, img_src: Image.Image, align: PosAlign | str = PosAlign.CENTER) -> bytes:
        """Print an image using the column bit image command (``ESC *``)."""

        def _draw(printer: Any) -> None:
            self._set_align(printer, align)
            printer.image(img_src, impl="bitImageColumn")

        return self._render(_draw)

    def image_raster(
        self,
        image: Image.Image,
        align: PosAlign | str = PosAlign.CENTER,
        high_density_horizontal: bool = True,
        high_density_vertical: bool = True,
        image_fn: PosImageFn = PosImageFn.BIT_IMAGE_RASTER,
    ) -> bytes:
        def _draw(printer: Any) -> None:
            self._set_align(printer, align)
            printer.image(
                image,
                high_density_vertical=high_density_vertical,
                high_density_horizontal=high_density_horizontal,
                impl=PosImageFn(image_fn).value,
            )

        return self._render(_draw)

    def barcode(
        self,
        barcode: Barcode,
        width: int | None = None,
        height: int | None = None,
        font: BarcodeFont | None = None,
        text_pos: BarcodeText = BarcodeText.BELOW,
        align: PosAlign | str = PosAlign.CENTER,
    ) -> bytes:
        def _draw(printer: Any) -> None:
            self._set_align(printer, align)
            printer.barcode(
                barcode.data,
                barcode.bc,
                height=height if height is not None else 64,
                width=width if width is not None else 3,
                pos=BarcodeText(text_pos).value,
                font=BarcodeFont(font or BarcodeFont.FONT_A).value,
                align_ct=False,
            )

        return self._render(_draw)

    def qrcode(
        self,
        text: str,
        align: PosAlign | str = PosAlign.CENTER,
        size: QRSize = QRSize.SIZE4,
        cor: QRCorrection = QRCorrection.L,
    ) -> bytes:
        def _draw(printer: Any) -> None:
            self._set_align(printer, align)
            printer.qr(text, ec=int(cor), size=int(size), native=True)

        return self._render(_draw)

    def drawer(self, pin: PosDrawer = PosDrawer.PIN2) -> bytes:
        return self._render(lambda printer: printer.cashdraw(int(pin)))

    def hr(self, ch: str = "-", length: int | None = None, lines_after: int = 0) -> bytes:
        """Print a horizontal rule spanning the line (or ``length`` characters)."""
        count = length if length and length > 0 else self.max_chars_per_line
        return self.text(ch * count, lines_after=lines_after)

    def transmission_of_status(self, n: int = 1) -> bytes:
        """Real-time status request (``DLE EOT n``)."""
        status_type = validate_numeric_input(n, 1, 4, "n")
        _LOGGER.debug("Encoding status request n=%s", status_type)
        return TRANSMIT_STATUS + bytes([status_type])


def _pad(chunk: Any, width: int, align: PosAlign) -> Any:
    """Pad ``chunk`` (str or bytes) to ``width`` honouring ``align``."""
    fill: Any = b" " if isinstance(chunk, bytes) else " "
    if align == PosAlign.RIGHT:
        return chunk.rjust(width, fill)
    if align == PosAlign.CENTER:
        return chunk.center(width, fill)
    return chunk.ljust(width, fill)
