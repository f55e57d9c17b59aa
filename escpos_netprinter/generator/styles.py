"""Text style and column value types."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .enums import PosAlign, PosFontType, PosTextSize


@dataclass(frozen=True)
class PosStyles:
    """Character styling applied before a block of text."""

    bold: bool = False
    reverse: bool = False
    underline: bool = False
    align: PosAlign = PosAlign.LEFT
    height: PosTextSize = PosTextSize.SIZE1
    width: PosTextSize = PosTextSize.SIZE1
    font_type: PosFontType | None = None
    code_table: str | None = None

    def copy_with(self, **changes: object) -> PosStyles:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class PosColumn:
    """One cell of a :meth:`Generator.row` layout.

    ``width`` is expressed in twelfths of the line. Exactly one of ``text`` and
    ``text_encoded`` is expected to be set.
    """

    text: str = ""
    text_encoded: bytes | None = None
    width: int = 2
    contains_chinese: bool = False
    styles: PosStyles = field(default_factory=PosStyles)

    def __post_init__(self) -> None:
        if not 1 <= self.width <= 12:
            raise ValueError(f"Column width must be between 1 and 12, got {self.width}")
        if self.text and self.text_encoded is not None:
            raise ValueError("Only one of text or text_encoded may be set")
