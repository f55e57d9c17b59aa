"""Control operation mixin for the network printer."""

from __future__ import annotations

from typing import Any

from ..generator import PosBeepDuration, PosCutMode, PosDrawer


class ControlOperationsMixin:
    """Mixin providing feed, cut, beep, drawer and job control commands."""

    # These attributes are expected from the connection class
    _generator: Any

    def _write(self, data: bytes) -> None:
        """Write bytes to the open channel (implemented in connection)."""
        raise NotImplementedError

    def reset(self) -> None:
        self._write(self._generator.reset())

    def end_job(self) -> None:
        self._write(self._generator.end_job())

    def empty_lines(self, n: int) -> None:
        self._write(self._generator.empty_lines(n))

    def feed(self, n: int) -> None:
        self._write(self._generator.feed(n))

    def reverse_feed(self, n: int) -> None:
        self._write(self._generator.reverse_feed(n))

    def cut(self, *, mode: PosCutMode = PosCutMode.FULL) -> None:
        self._write(self._generator.cut(mode=mode))

    def print_code_table(self, *, code_table: str | None = None) -> None:
        self._write(self._generator.print_code_table(code_table=code_table))

    def beep(self, *, n: int = 3, duration: PosBeepDuration = PosBeepDuration.BEEP_450MS) -> None:
        self._write(self._generator.beep(n=n, duration=duration))

    def drawer(self, *, pin: PosDrawer = PosDrawer.PIN2) -> None:
        self._write(self._generator.drawer(pin=pin))
