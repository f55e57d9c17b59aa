"""Text operation mixin for the network printer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..generator import PosColumn, PosFontType, PosStyles

_DEFAULT_STYLES = PosStyles()


class TextOperationsMixin:
    """Mixin providing text, style and column layout commands."""

    # These attributes are expected from the connection class
    _generator: Any

    def _write(self, data: bytes) -> None:
        """Write bytes to the open channel (implemented in connection)."""
        raise NotImplementedError

    def text(
        self,
        text: str,
        *,
        styles: PosStyles = _DEFAULT_STYLES,
        lines_after: int = 0,
        contains_chinese: bool = False,
        max_chars_per_line: int | None = None,
    ) -> None:
        self._write(
            self._generator.text(
                text,
                styles=styles,
                lines_after=lines_after,
                contains_chinese=contains_chinese,
                max_chars_per_line=max_chars_per_line,
            )
        )

    def text_encoded(
        self,
        text_bytes: bytes,
        *,
        styles: PosStyles = _DEFAULT_STYLES,
        lines_after: int = 0,
        max_chars_per_line: int | None = None,
    ) -> None:
        self._write(
            self._generator.text_encoded(
                text_bytes,
                styles=styles,
                lines_after=lines_after,
                max_chars_per_line=max_chars_per_line,
            )
        )

    def set_global_code_table(self, code_table: str) -> None:
        self._write(self._generator.set_global_code_table(code_table))

    def set_global_font(self, font: PosFontType, *, max_chars_per_line: int | None = None) -> None:
        self._write(self._generator.set_global_font(font, max_chars_per_line=max_chars_per_line))

    def set_styles(self, styles: PosStyles, *, is_kanji: bool = False) -> None:
        self._write(self._generator.set_styles(styles, is_kanji=is_kanji))

    def raw_bytes(self, cmd: Sequence[int] | bytes, *, is_kanji: bool = False) -> None:
        self._write(self._generator.raw_bytes(cmd, is_kanji=is_kanji))

    def row(self, cols: Sequence[PosColumn]) -> None:
        self._write(self._generator.row(cols))

    def hr(self, *, ch: str = "-", length: int | None = None, lines_after: int = 0) -> None:
        self._write(self._generator.hr(ch=ch, length=length, lines_after=lines_after))
