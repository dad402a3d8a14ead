"""Pydantic models for module drawing configuration files.

Configuration files use the camelCase keys of the design canvas
(``widthMm``, ``panelsEnabled``, ``centerPostCount``); snake_case field
names are accepted as well. Business ranges are not enforced here, only
types and non-negativity. Range checks live in
``modulecad.application.config.validator``.

Example:
    {
        "schema_version": "1.0",
        "module": {
            "unitType": "wardrobe_carcass",
            "widthMm": 1200,
            "heightMm": 2400,
            "centerPostCount": 2,
            "sections": [{"type": "shelves", "shelfCount": 2}]
        }
    }
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from modulecad.domain.value_objects import SectionType

# Supported schema versions for configuration files
# Version 1.0: Initial schema with module, sections and drawing origin
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid", alias_generator=to_camel, populate_by_name=True
    )


class PanelsEnabledConfig(_CamelModel):
    """Enable flags for the five carcass panels. Absent flags mean enabled."""

    top: bool = True
    bottom: bool = True
    left: bool = True
    right: bool = True
    back: bool = True


class SectionConfig(_CamelModel):
    """Configuration for one module section.

    Attributes:
        type: Behavioral zone type (long_hang, short_hang, shelves, drawers, open)
        width_mm: Explicit width in mm, or 0 to split evenly among siblings
        shelf_count: Number of shelves (generator default when omitted)
        drawer_count: Number of drawers (generator default when omitted)
        rod_height_pct: Rod zone share of a short_hang section, in percent
        shelf_positions: Custom shelf positions as percentages of section height
        posts_below: Partial posts anchored under the lowest shelf
    """

    type: SectionType = SectionType.SHELVES
    width_mm: float = Field(default=0.0, ge=0)
    shelf_count: int | None = Field(default=None, ge=0)
    drawer_count: int | None = Field(default=None, ge=0)
    rod_height_pct: float | None = None
    shelf_positions: list[float] = Field(default_factory=list)
    posts_below: int = Field(default=0, ge=0)


class ModuleConfigSchema(_CamelModel):
    """Configuration for the module dimensions and structure.

    Attributes:
        unit_type: Unit type tag selecting the generator; unknown tags are
            drawn by the generic generator
        name: Display name
        width_mm: Overall width in mm
        height_mm: Overall height in mm
        depth_mm: Overall depth in mm
        carcass_thickness_mm: Carcass panel thickness in mm
        center_post_count: Number of full-height center posts
        center_post_positions: Explicit post offsets in mm from the inner
            left face, one per post
        skirting_enabled: Whether a skirting band raises the bottom panel
        skirting_height_mm: Skirting band height in mm
        panels_enabled: Per-panel enable flags
        sections: Section descriptors, left to right
        loft_enabled: Whether a loft sits above the main cavity
        loft_height_mm: Loft height in mm, measured from the top
        shutter_count: Number of shutters
        section_count: Number of sections when none are listed
        carcass_material: Carcass material name
        shutter_material: Shutter material name
    """

    unit_type: str = "other"
    name: str = ""
    width_mm: float | None = Field(default=None, ge=0)
    height_mm: float | None = Field(default=None, ge=0)
    depth_mm: float | None = Field(default=None, ge=0)
    carcass_thickness_mm: float | None = Field(default=None, ge=0)
    center_post_count: int | None = Field(default=None, ge=0)
    center_post_positions: list[float] | None = None
    skirting_enabled: bool = False
    skirting_height_mm: float | None = Field(default=None, ge=0)
    panels_enabled: PanelsEnabledConfig = Field(default_factory=PanelsEnabledConfig)
    sections: list[SectionConfig] = Field(default_factory=list)
    loft_enabled: bool = False
    loft_height_mm: float | None = Field(default=None, ge=0)
    shutter_count: int | None = Field(default=None, ge=0)
    section_count: int | None = Field(default=None, ge=0)
    carcass_material: str | None = None
    shutter_material: str | None = None


class OriginConfig(BaseModel):
    """Drawing origin of the module's top-left corner, in mm."""

    model_config = ConfigDict(extra="forbid")

    x: float = 0.0
    y: float = 0.0


class DrawingConfiguration(BaseModel):
    """Root configuration model for a module drawing.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        module: Module dimensions and structure
        origin: Where the module's top-left corner is placed

    Example:
        >>> config = DrawingConfiguration(
        ...     schema_version="1.0",
        ...     module=ModuleConfigSchema(unit_type="wardrobe", width_mm=1800),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    module: ModuleConfigSchema
    origin: OriginConfig = Field(default_factory=OriginConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
