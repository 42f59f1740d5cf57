"""Global settings resolution."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from ..value_objects import GlobalSetting

__all__ = [
    "DEFAULT_GST_RATE",
    "DEFAULT_HARDWARE_BASE_COST",
    "DEFAULT_MATERIAL_RATE",
    "PricingSettings",
    "parse_global_settings",
]

logger = logging.getLogger(__name__)

# Fallbacks used whenever a settings row is absent, blank or unparsable.
DEFAULT_MATERIAL_RATE = 85.0  # per m², HMR board
DEFAULT_GST_RATE = 0.10
DEFAULT_HARDWARE_BASE_COST = 45.0

_SETTING_FIELDS: dict[str, str] = {
    "hmr_rate_per_sqm": "material_rate",
    "gst_rate": "gst_rate",
    "hardware_base_cost": "hardware_base_cost",
}


@dataclass(frozen=True)
class PricingSettings:
    """Typed pricing rates.

    Attributes:
        material_rate: Carcass board rate per square metre.
        gst_rate: Tax fraction applied to the subtotal (0.10 = 10%).
        hardware_base_cost: Flat hardware allowance for price tables.
    """

    material_rate: float = DEFAULT_MATERIAL_RATE
    gst_rate: float = DEFAULT_GST_RATE
    hardware_base_cost: float = DEFAULT_HARDWARE_BASE_COST


def _parse_value(raw: str | None) -> float | None:
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_global_settings(rows: Iterable[GlobalSetting] | None) -> PricingSettings:
    """Parse raw settings rows into a PricingSettings value.

    Unknown keys are ignored. A recognised key with a missing or unparsable
    value keeps its fallback; an explicit zero is honoured. When a key
    appears more than once the last row wins.

    Args:
        rows: Raw ``{setting_key, setting_value}`` rows, or None.

    Returns:
        PricingSettings with every field populated.
    """
    values: dict[str, float] = {}
    for row in rows or ():
        field_name = _SETTING_FIELDS.get(row.setting_key)
        if field_name is None:
            continue
        parsed = _parse_value(row.setting_value)
        if parsed is None:
            logger.debug(
                f"Ignoring unparsable setting {row.setting_key}={row.setting_value!r}"
            )
            continue
        values[field_name] = parsed
    return PricingSettings(**values)
