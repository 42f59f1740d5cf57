"""Adapter from catalog schema models to domain records.

build_catalog turns a validated CatalogSchema into a Catalog of immutable
domain records and offers the lookups the CLI and web adapters need to
assemble pricing inputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cabinetry.application.catalog.schemas import (
    CabinetTypeSchema,
    CatalogSchema,
    HardwareRequirementSchema,
)
from cabinetry.domain import (
    CabinetPart,
    CabinetType,
    Color,
    DoorStyle,
    DoorStyleFinish,
    Finish,
    GlobalSetting,
    HardwareOption,
    HardwareProduct,
    HardwareRequirement,
)

logger = logging.getLogger(__name__)


class UnknownRecordError(LookupError):
    """Raised when a catalog lookup names a record that does not exist."""

    def __init__(self, kind: str, record_id: str) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"Unknown {kind}: {record_id}")


@dataclass(frozen=True)
class Catalog:
    """Immutable snapshot of every record the pricing core consumes."""

    cabinet_types: dict[str, CabinetType] = field(default_factory=dict)
    cabinet_parts: tuple[CabinetPart, ...] = ()
    global_settings: tuple[GlobalSetting, ...] = ()
    door_styles: dict[str, DoorStyle] = field(default_factory=dict)
    finishes: dict[str, Finish] = field(default_factory=dict)
    colors: dict[str, Color] = field(default_factory=dict)
    hardware_requirements: tuple[tuple[str, HardwareRequirement], ...] = ()

    def cabinet_type(self, type_id: str) -> CabinetType:
        try:
            return self.cabinet_types[type_id]
        except KeyError:
            raise UnknownRecordError("cabinet type", type_id) from None

    def parts_for(self, type_id: str) -> list[CabinetPart]:
        return [part for part in self.cabinet_parts if part.cabinet_type_id == type_id]

    def requirements_for(self, type_id: str) -> list[HardwareRequirement]:
        return [req for owner, req in self.hardware_requirements if owner == type_id]

    def brand_ids_for(self, type_id: str) -> list[str]:
        """Brands offering at least one option for the type, in catalog order."""
        brands: list[str] = []
        for requirement in self.requirements_for(type_id):
            for option in requirement.options:
                if option.brand_id not in brands:
                    brands.append(option.brand_id)
        return brands

    def door_style_finish(
        self, door_style_id: str | None, finish_id: str | None = None
    ) -> DoorStyleFinish | None:
        """Pair a door style with an optional finish.

        Returns None when no door style is selected.

        Raises:
            UnknownRecordError: If either id is not in the catalog.
        """
        if not door_style_id:
            return None
        style = self.door_styles.get(door_style_id)
        if style is None:
            raise UnknownRecordError("door style", door_style_id)
        finish = None
        if finish_id:
            finish = self.finishes.get(finish_id)
            if finish is None:
                raise UnknownRecordError("finish", finish_id)
        return DoorStyleFinish(door_style=style, finish=finish)

    def color(self, color_id: str | None) -> Color | None:
        if not color_id:
            return None
        try:
            return self.colors[color_id]
        except KeyError:
            raise UnknownRecordError("color", color_id) from None

    def all_door_style_finishes(self) -> list[DoorStyleFinish]:
        """Every door style unfinished, then paired with each finish."""
        combos = [DoorStyleFinish(door_style=style) for style in self.door_styles.values()]
        combos.extend(
            DoorStyleFinish(door_style=style, finish=finish)
            for style in self.door_styles.values()
            for finish in self.finishes.values()
        )
        return combos


def _to_cabinet_type(schema: CabinetTypeSchema) -> CabinetType:
    return CabinetType(**schema.model_dump())


def _to_requirement(
    schema: HardwareRequirementSchema, products: dict[str, HardwareProduct]
) -> HardwareRequirement:
    options = []
    for option in schema.options:
        product = products.get(option.product_id) if option.product_id else None
        if product is None:
            logger.warning(
                f"Hardware option {option.id} for {schema.hardware_type} has no product"
            )
        options.append(
            HardwareOption(
                id=option.id,
                requirement_id=schema.id,
                brand_id=option.brand_id,
                product=product,
            )
        )
    return HardwareRequirement(
        id=schema.id,
        hardware_type=schema.hardware_type,
        unit_scope=schema.unit_scope,
        units_per_scope=schema.units_per_scope,
        options=tuple(options),
        notes=schema.notes,
    )


def build_catalog(schema: CatalogSchema) -> Catalog:
    """Convert a validated catalog document into domain records.

    Options whose product id is missing from the document keep a None
    product so pricing reports them as gaps instead of failing.
    """
    products = {
        product.id: HardwareProduct(**product.model_dump())
        for product in schema.hardware_products
    }
    catalog = Catalog(
        cabinet_types={t.id: _to_cabinet_type(t) for t in schema.cabinet_types},
        cabinet_parts=tuple(CabinetPart(**p.model_dump()) for p in schema.cabinet_parts),
        global_settings=tuple(
            GlobalSetting(setting_key=s.setting_key, setting_value=s.setting_value)
            for s in schema.global_settings
        ),
        door_styles={s.id: DoorStyle(**s.model_dump()) for s in schema.door_styles},
        finishes={f.id: Finish(**f.model_dump()) for f in schema.finishes},
        colors={c.id: Color(**c.model_dump()) for c in schema.colors},
        hardware_requirements=tuple(
            (r.cabinet_type_id, _to_requirement(r, products))
            for r in schema.hardware_requirements
        ),
    )
    logger.debug(
        f"Built catalog with {len(catalog.cabinet_types)} cabinet type(s) and "
        f"{len(catalog.hardware_requirements)} hardware requirement(s)"
    )
    return catalog
