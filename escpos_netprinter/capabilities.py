"""Access to the python-escpos printer capability database."""

from __future__ import annotations

from functools import lru_cache
import logging
from typing import Any

from escpos.capabilities import CAPABILITIES

_LOGGER = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_capabilities() -> dict[str, Any]:
    """Return the capability database shipped with python-escpos (cached)."""
    return CAPABILITIES  # type: ignore[no-any-return]


def get_profile_names() -> list[str]:
    """Return the sorted list of known printer profile keys."""
    return sorted(_get_capabilities().get("profiles", {}))


def is_valid_profile(profile_key: str | None) -> bool:
    """Check if a profile key is valid.

    Empty or ``None`` means the python-escpos default profile and is valid.
    """
    if not profile_key:
        return True
    profiles = _get_capabilities().get("profiles", {})
    if profile_key not in profiles:
        _LOGGER.debug("Unknown printer profile '%s'", profile_key)
        return False
    return True
