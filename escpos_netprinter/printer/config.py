"""Printer configuration dataclass and validation schema."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import voluptuous as vol

from ..capabilities import is_valid_profile
from ..const import (
    CONF_DISCONNECT_DELAY_MS,
    CONF_HOST,
    CONF_PAPER_SIZE,
    CONF_PORT,
    CONF_PROFILE,
    CONF_SPACE_BETWEEN_ROWS,
    CONF_TIMEOUT,
    DEFAULT_DISCONNECT_DELAY_MS,
    DEFAULT_PAPER_SIZE,
    DEFAULT_PORT,
    DEFAULT_SPACE_BETWEEN_ROWS,
    DEFAULT_TIMEOUT,
    MAX_DISCONNECT_DELAY_MS,
    MAX_TIMEOUT,
    MIN_TIMEOUT,
)
from ..exceptions import InvalidConfigError
from ..generator import PaperSize
from ..generator.mapping_utils import map_paper_size


@dataclass
class NetworkPrinterConfig:
    """Configuration for a network (TCP/IP) printer."""

    host: str = ""
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT
    paper_size: PaperSize = PaperSize.MM80
    profile: str | None = None
    space_between_rows: int = DEFAULT_SPACE_BETWEEN_ROWS
    disconnect_delay_ms: int = DEFAULT_DISCONNECT_DELAY_MS


def _paper_size(value: Any) -> PaperSize:
    try:
        return map_paper_size(value)
    except ValueError as err:
        raise vol.Invalid(str(err)) from err


def _profile(value: Any) -> str | None:
    if value in (None, ""):
        return None
    value = str(value)
    if not is_valid_profile(value):
        raise vol.Invalid(f"Unknown printer profile: {value}")
    return value


PRINTER_CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_HOST): vol.All(str, vol.Length(min=1)),
        vol.Optional(CONF_PORT, default=DEFAULT_PORT): vol.All(vol.Coerce(int), vol.Range(min=1, max=65535)),
        vol.Optional(CONF_TIMEOUT, default=DEFAULT_TIMEOUT): vol.All(
            vol.Coerce(float), vol.Range(min=MIN_TIMEOUT, max=MAX_TIMEOUT)
        ),
        vol.Optional(CONF_PAPER_SIZE, default=DEFAULT_PAPER_SIZE): _paper_size,
        vol.Optional(CONF_PROFILE, default=None): _profile,
        vol.Optional(CONF_SPACE_BETWEEN_ROWS, default=DEFAULT_SPACE_BETWEEN_ROWS): vol.All(
            vol.Coerce(int), vol.Range(min=0, max=255)
        ),
        vol.Optional(CONF_DISCONNECT_DELAY_MS, default=DEFAULT_DISCONNECT_DELAY_MS): vol.All(
            vol.Coerce(int), vol.Range(min=0, max=MAX_DISCONNECT_DELAY_MS)
        ),
    }
)


def config_from_dict(data: Mapping[str, Any]) -> NetworkPrinterConfig:
    """Validate ``data`` against :data:`PRINTER_CONFIG_SCHEMA`.

    Raises:
        InvalidConfigError: If validation fails.
    """
    try:
        validated = PRINTER_CONFIG_SCHEMA(dict(data))
    except vol.Invalid as err:
        raise InvalidConfigError(f"Invalid printer configuration: {err}") from err
    return NetworkPrinterConfig(**validated)
