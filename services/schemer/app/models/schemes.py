from typing import Literal

from pydantic import Field

from .inputs import ParsedArchitecture, WireModel


MemberType = Literal["beam", "column", "slab", "wall", "foundation"]


class MemberCalcPlaceholder(WireModel):
    member_id: str = Field(alias="memberId")
    member_type: MemberType = Field(alias="memberType")
    description: str
    design_code: str = Field(alias="designCode")
    utilisation_ratio: float | None = Field(None, alias="utilisationRatio")
    warnings: list[str] = Field(default_factory=list)


class StructuralSchemeOption(WireModel):
    id: str
    name: str
    description: str
    lateral_system: str = Field(alias="lateralSystem")
    gravity_system: str = Field(alias="gravitySystem")
    foundations: str
    key_assumptions: list[str] = Field(default_factory=list, alias="keyAssumptions")
    members: list[MemberCalcPlaceholder] = Field(default_factory=list)


class ArchitectureResponse(WireModel):
    architecture: ParsedArchitecture


class SchemesResponse(WireModel):
    schemes: list[StructuralSchemeOption]


class ReportRequest(WireModel):
    architecture: ParsedArchitecture | None = None
    schemes: list[StructuralSchemeOption] | None = None


class ReportFile(WireModel):
    filename: str
    content_b64: str = Field(alias="contentB64")
    content_type: str = Field("application/pdf", alias="contentType")


class ReportResponse(WireModel):
    report: ReportFile
