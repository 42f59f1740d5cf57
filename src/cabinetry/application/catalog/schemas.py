"""Pydantic schema models for catalog documents.

A catalog document is the JSON snapshot of the records the pricing core
consumes: cabinet types with their parts, global settings rows, door
styles, finishes, colours, hardware products and hardware requirements with
their brand options.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cabinetry.domain import CabinetCategory, CabinetStyle, UnitScope


class CabinetTypeSchema(BaseModel):
    """A cabinet type row.

    Bounds that are omitted collapse to the default dimension.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str
    category: CabinetCategory = CabinetCategory.BASE
    default_width_mm: float = Field(..., gt=0)
    default_height_mm: float = Field(..., gt=0)
    default_depth_mm: float = Field(..., gt=0)
    min_width_mm: float | None = Field(default=None, gt=0)
    max_width_mm: float | None = Field(default=None, gt=0)
    min_height_mm: float | None = Field(default=None, gt=0)
    max_height_mm: float | None = Field(default=None, gt=0)
    min_depth_mm: float | None = Field(default=None, gt=0)
    max_depth_mm: float | None = Field(default=None, gt=0)
    door_count: int = Field(default=0, ge=0)
    drawer_count: int = Field(default=0, ge=0)
    backs_qty: int = Field(default=1, ge=0)
    bottoms_qty: int = Field(default=1, ge=0)
    sides_qty: int = Field(default=2, ge=0)
    door_qty: int | None = Field(default=None, ge=0)
    cabinet_style: CabinetStyle = CabinetStyle.STANDARD
    left_side_width_mm: float | None = Field(default=None, gt=0)
    right_side_width_mm: float | None = Field(default=None, gt=0)
    left_side_depth_mm: float | None = Field(default=None, gt=0)
    right_side_depth_mm: float | None = Field(default=None, gt=0)
    default_hardware_brand_id: str | None = None

    @model_validator(mode="after")
    def validate_bounds(self) -> "CabinetTypeSchema":
        """Ensure min <= default <= max for every dimension."""
        for dim in ("width", "height", "depth"):
            default = getattr(self, f"default_{dim}_mm")
            low = getattr(self, f"min_{dim}_mm")
            high = getattr(self, f"max_{dim}_mm")
            if low is not None and low > default:
                raise ValueError(f"min_{dim}_mm ({low}) exceeds default_{dim}_mm ({default})")
            if high is not None and high < default:
                raise ValueError(f"max_{dim}_mm ({high}) is below default_{dim}_mm ({default})")
        return self


class CabinetPartSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    cabinet_type_id: str
    part_name: str
    quantity: int = Field(default=1, ge=0)
    is_door: bool = False
    is_hardware: bool = False
    id: str | None = None


class GlobalSettingSchema(BaseModel):
    """A raw settings row. Values are kept as text, as stored."""

    model_config = ConfigDict(extra="forbid")

    setting_key: str
    setting_value: str | None = None

    @field_validator("setting_value", mode="before")
    @classmethod
    def stringify_value(cls, value: Any) -> str | None:
        if value is None:
            return None
        return str(value)


class DoorStyleSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str
    base_rate_per_sqm: float = Field(default=0.0, ge=0)


class FinishSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str
    rate_per_sqm: float = Field(default=0.0, ge=0)
    finish_type: str | None = None
    brand_id: str | None = None


class ColorSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str
    door_style_id: str
    surcharge_rate_per_sqm: float = Field(default=0.0, ge=0)
    hex_code: str | None = None
    image_url: str | None = None


class HardwareProductSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str
    brand_id: str
    cost_per_unit: float = Field(default=0.0, ge=0)
    model_number: str | None = None


class HardwareOptionSchema(BaseModel):
    """A brand's option for a requirement, linked to a product by id."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    brand_id: str
    product_id: str | None = None


class HardwareRequirementSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    cabinet_type_id: str
    hardware_type: str
    unit_scope: UnitScope = UnitScope.PER_CABINET
    units_per_scope: float = Field(default=1.0, ge=0)
    notes: str | None = None
    options: list[HardwareOptionSchema] = Field(default_factory=list)


class CatalogSchema(BaseModel):
    """Root model of a catalog document."""

    model_config = ConfigDict(extra="forbid")

    cabinet_types: list[CabinetTypeSchema] = Field(default_factory=list)
    cabinet_parts: list[CabinetPartSchema] = Field(default_factory=list)
    global_settings: list[GlobalSettingSchema] = Field(default_factory=list)
    door_styles: list[DoorStyleSchema] = Field(default_factory=list)
    finishes: list[FinishSchema] = Field(default_factory=list)
    colors: list[ColorSchema] = Field(default_factory=list)
    hardware_products: list[HardwareProductSchema] = Field(default_factory=list)
    hardware_requirements: list[HardwareRequirementSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_type_ids(self) -> "CatalogSchema":
        seen: set[str] = set()
        for cabinet_type in self.cabinet_types:
            if cabinet_type.id in seen:
                raise ValueError(f"Duplicate cabinet type id: {cabinet_type.id}")
            seen.add(cabinet_type.id)
        return self
