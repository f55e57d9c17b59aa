"""Network printer: ESC/POS commands over a TCP connection."""

from __future__ import annotations

from ..generator import Generator, PaperSize
from .config import NetworkPrinterConfig
from .connection import PrinterConnection
from .control_operations import ControlOperationsMixin
from .graphic_operations import GraphicOperationsMixin
from .status_operations import StatusOperationsMixin
from .text_operations import TextOperationsMixin


class NetworkPrinter(
    PrinterConnection,
    TextOperationsMixin,
    GraphicOperationsMixin,
    ControlOperationsMixin,
    StatusOperationsMixin,
):
    """ESC/POS printer reachable over TCP.

    Command methods are synchronous: each one encodes its command and queues
    the bytes on the socket in call order. They raise
    :class:`~escpos_netprinter.exceptions.ChannelClosedError` when the
    printer is not connected.
    """

    def __init__(
        self,
        paper_size: PaperSize | str = PaperSize.MM80,
        profile: str | None = None,
        *,
        space_between_rows: int = 5,
        generator: Generator | None = None,
    ) -> None:
        super().__init__(generator or Generator(paper_size, profile, space_between_rows=space_between_rows))

    @property
    def paper_size(self) -> PaperSize:
        return self._generator.paper_size

    @property
    def profile(self) -> str | None:
        return self._generator.profile

    @classmethod
    def from_config(cls, config: NetworkPrinterConfig) -> NetworkPrinter:
        """Build a printer with host and port preset from ``config``.

        The result can be connected with :meth:`ensure_connected` directly.
        """
        printer = cls(
            config.paper_size,
            config.profile,
            space_between_rows=config.space_between_rows,
        )
        printer._host = config.host
        printer._port = config.port
        printer._disconnect_delay_ms = config.disconnect_delay_ms
        return printer
