"""Domain layer - catalog records, configuration entities and pricing."""

from .entities import CabinetConfiguration, ConfigurationTemplate, utcnow
from .value_objects import (
    CabinetCategory,
    CabinetPart,
    CabinetStyle,
    CabinetType,
    Color,
    ConfigurationSource,
    DoorStyle,
    DoorStyleFinish,
    Finish,
    GlobalSetting,
    HardwareOption,
    HardwareProduct,
    HardwareRequirement,
    UnitScope,
    as_amount,
)

__all__ = [
    "CabinetCategory",
    "CabinetConfiguration",
    "CabinetPart",
    "CabinetStyle",
    "CabinetType",
    "Color",
    "ConfigurationSource",
    "ConfigurationTemplate",
    "DoorStyle",
    "DoorStyleFinish",
    "Finish",
    "GlobalSetting",
    "HardwareOption",
    "HardwareProduct",
    "HardwareRequirement",
    "UnitScope",
    "as_amount",
    "utcnow",
]
