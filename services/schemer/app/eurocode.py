"""
Eurocode member design placeholders.

None of these perform a design check. Each returns a member record with no
utilisation ratio and warnings saying so; replace with validated
implementations before any engineering use.
"""

from .models.schemes import MemberCalcPlaceholder, MemberType

DESIGN_CODE = "EN 1992-1-1 (placeholder only)"


def _placeholder(member_type: MemberType, member_id: str, description: str) -> MemberCalcPlaceholder:
    return MemberCalcPlaceholder(
        member_id=member_id,
        member_type=member_type,
        description=description,
        design_code=DESIGN_CODE,
        utilisation_ratio=None,
        warnings=[
            f"Eurocode {member_type} design not implemented. This is a placeholder.",
            "Implement real design checks before engineering use.",
        ],
    )


def beam_placeholder(member_id: str, description: str) -> MemberCalcPlaceholder:
    return _placeholder("beam", member_id, description)


def column_placeholder(member_id: str, description: str) -> MemberCalcPlaceholder:
    return _placeholder("column", member_id, description)


def slab_placeholder(member_id: str, description: str) -> MemberCalcPlaceholder:
    return _placeholder("slab", member_id, description)
