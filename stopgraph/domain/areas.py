"""Preset rectangles offered by the CLI."""

from __future__ import annotations

from typing import Dict

from .errors import ConfigurationError
from .models import GeographicBounds

PRESET_AREAS: Dict[str, GeographicBounds] = {
    "madrid": GeographicBounds(40.0, 41.0, -4.0, -3.0, "Madrid y alrededores"),
    "centro_espana": GeographicBounds(39.0, 41.0, -5.0, -3.0, "Centro de España"),
    "extremadura": GeographicBounds(38.0, 40.0, -7.0, -5.0, "Extremadura"),
    "norte_espana": GeographicBounds(41.0, 44.0, -3.0, 3.0, "Norte de España"),
    "sur_espana": GeographicBounds(36.0, 39.0, -6.0, -2.0, "Sur de España"),
    "cataluna": GeographicBounds(40.0, 42.0, 0.0, 3.0, "Cataluña"),
}

# Used when custom coordinates cannot be parsed.
DEFAULT_AREA = GeographicBounds(40.0, 41.0, -4.0, -3.0, "Madrid (por defecto)")


def get_area(key: str) -> GeographicBounds:
    """Look up a preset area by key.

    Raises:
        ConfigurationError: If the key is not a known preset.
    """
    try:
        return PRESET_AREAS[key.strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown area {key!r}; expected one of {', '.join(PRESET_AREAS)}",
            setting_name="area",
        ) from None
