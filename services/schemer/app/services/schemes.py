from ..eurocode import beam_placeholder, column_placeholder, slab_placeholder
from ..models.inputs import ParsedArchitecture, SiteInputs
from ..models.schemes import StructuralSchemeOption

NOT_SET = "NOT SET"


def base_assumptions(site: SiteInputs) -> list[str]:
    """Design basis lines shared by every scheme."""
    return [
        f"Design basis: Eurocodes with national annex: {site.national_annex or NOT_SET}.",
        f"Imposed load category: {site.imposed_use_category or NOT_SET}.",
        f"Soil type (user input): {site.soil_type or NOT_SET}.",
        f"Wind zone (user input): {site.wind_zone or NOT_SET}.",
        f"Seismic zone (user input): {site.seismic_zone or NOT_SET}.",
        f"Importance class: {site.importance_class or NOT_SET}.",
        "Global analysis, load combinations, and detailed Eurocode checks NOT implemented yet.",
        "Member design outputs below are placeholders only.",
    ]


def generate_scheme_options(
    architecture: ParsedArchitecture, site: SiteInputs
) -> list[StructuralSchemeOption]:
    """Return the RC flat slab and composite steel schemes, in that order."""
    assumptions = base_assumptions(site)
    typical_beam = architecture.spans[0].id if architecture.spans else "span-1"

    rc_flat_slab = StructuralSchemeOption(
        id="scheme-rc-flat-slab",
        name="RC frame with flat slab, core walls for stability",
        description=(
            "Reinforced concrete frame in both directions with flat slabs and "
            "RC core walls providing lateral stability."
        ),
        lateral_system="RC cores and shear walls around lift/stair cores.",
        gravity_system="RC columns and flat slabs spanning between columns.",
        foundations="Pad footings under columns with strip footings/walls under cores (placeholder).",
        key_assumptions=[
            *assumptions,
            "Frame and slabs designed to EN 1992-1-1 (not yet implemented).",
            "Lateral stability checked via elastic global analysis (not yet implemented).",
        ],
        members=[
            beam_placeholder(typical_beam, "Typical RC beam along main span (placeholder design)."),
            column_placeholder("col-typ-1", "Typical RC column internal (placeholder design)."),
            slab_placeholder("slab-typ-1", "Typical flat slab panel (placeholder design)."),
        ],
    )

    composite_steel = StructuralSchemeOption(
        id="scheme-composite-steel",
        name="Steel composite frame with concrete core",
        description=(
            "Steel beam-and-column frame with composite metal deck slab, "
            "concrete cores for stability."
        ),
        lateral_system="RC concrete cores plus some steel bracing (placeholder).",
        gravity_system="Steel beams supporting composite deck slabs, supported on steel columns.",
        foundations="Pile caps beneath major columns and cores (placeholder).",
        key_assumptions=[
            *assumptions,
            "Steel members designed to EN 1993-1-1 (not yet implemented).",
            "Composite slabs designed to EN 1994-1-1 (not yet implemented).",
        ],
        members=[
            beam_placeholder(typical_beam, "Typical steel composite beam (placeholder design)."),
            column_placeholder("col-typ-2", "Typical steel column (placeholder design)."),
            slab_placeholder("slab-typ-2", "Typical composite slab panel (placeholder design)."),
        ],
    )

    return [rc_flat_slab, composite_steel]
