from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WireModel(BaseModel):
    # Accept both the camelCase wire names and the python field names.
    model_config = ConfigDict(populate_by_name=True)


class ParsedSpan(WireModel):
    id: str
    description: str
    direction: Literal["x", "y"]
    length_m: float
    level: str


class ParsedMaterialSystem(WireModel):
    frame: Literal["reinforced_concrete", "steel", "unknown"] = "unknown"
    slab: Literal["flat_slab", "one_way_slab", "composite", "unknown"] = "unknown"


class ParsedArchitecture(WireModel):
    project_name: str = Field("Untitled project", alias="projectName")
    storeys: int = 1
    spans: list[ParsedSpan] = Field(default_factory=list)
    materials: ParsedMaterialSystem = Field(default_factory=ParsedMaterialSystem)
    assumptions: list[str] = Field(default_factory=list)


class SiteInputs(WireModel):
    """User supplied site parameters. Free text, nothing is validated."""

    soil_type: str = Field("", alias="soilType")
    wind_zone: str = Field("", alias="windZone")
    seismic_zone: str = Field("", alias="seismicZone")
    importance_class: str = Field("", alias="importanceClass")
    national_annex: str = Field("", alias="nationalAnnex")
    imposed_use_category: str = Field("", alias="imposedUseCategory")

    @field_validator("*", mode="before")
    @classmethod
    def as_text(cls, value):
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


class GenerateRequest(WireModel):
    architecture: ParsedArchitecture | None = None
    site_inputs: SiteInputs | None = Field(None, alias="siteInputs")
