"""Versioned IRS/Census reference tables.

Each registered StandardsTables instance covers one government-published
effective-date range. Swapping years means selecting another version.
"""

from typing import Optional

from ..config import DEFAULT_STANDARDS_VERSION
from ..exceptions import ConfigurationError
from .data_2025 import STANDARDS_2025_11
from .tables import (
    MetroArea,
    NationalStandardBreakdown,
    StandardsTables,
    check_household_size,
)

_REGISTRY: dict[str, StandardsTables] = {
    STANDARDS_2025_11.version: STANDARDS_2025_11,
}


def available_versions() -> list[str]:
    """Registered standards versions, oldest first."""
    return sorted(_REGISTRY)


def get_standards(version: Optional[str] = None) -> StandardsTables:
    """Return the table set for a version (default: current).

    Raises:
        ConfigurationError: If the version is not registered.
    """
    key = version or DEFAULT_STANDARDS_VERSION
    try:
        return _REGISTRY[key]
    except KeyError:
        raise ConfigurationError(
            f"Unknown standards version: {key}",
            config_key="standards_version",
            expected=f"One of: {', '.join(available_versions())}",
            actual=key,
        ) from None


__all__ = [
    "MetroArea",
    "NationalStandardBreakdown",
    "StandardsTables",
    "available_versions",
    "check_household_size",
    "get_standards",
]
