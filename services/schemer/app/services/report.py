from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from ..models.inputs import ParsedArchitecture
from ..models.schemes import StructuralSchemeOption

MARGIN = 72
LINE = 14
BODY_FONT = ("Helvetica", 10)
DISCLAIMER = (
    "Engineering disclaimer: all member calculations are placeholders. "
    "Not for design use."
)


class _Writer:
    """Top-down text cursor over a canvas, starting a new page when full."""

    def __init__(self, c: canvas.Canvas):
        self.c = c
        self.width, self.height = A4
        self.y = self.height - MARGIN

    def _footer(self):
        self.c.setFont("Helvetica-Oblique", 8)
        self.c.drawString(MARGIN, MARGIN / 2, DISCLAIMER)

    def _ensure_room(self, needed: float):
        if self.y - needed < MARGIN:
            self._footer()
            self.c.showPage()
            self.y = self.height - MARGIN

    def text(self, value: str, font=BODY_FONT, indent: float = 0, gap: float = 0):
        lines = simpleSplit(value, font[0], font[1], self.width - 2 * MARGIN - indent)
        for line in lines:
            self._ensure_room(LINE)
            self.c.setFont(*font)
            self.c.drawString(MARGIN + indent, self.y, line)
            self.y -= LINE
        self.y -= gap

    def finish(self):
        self._footer()
        self.c.showPage()
        self.c.save()


def render_scheme_report(
    architecture: ParsedArchitecture, schemes: list[StructuralSchemeOption]
) -> bytes:
    """Draw a PDF summary of the scheme options and return its bytes."""
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    c.setTitle(f"Conceptual structural schemes - {architecture.project_name}")
    w = _Writer(c)

    w.text("Conceptual Structural Schemes (Placeholder)", font=("Helvetica-Bold", 16), gap=8)
    w.text(f"Project: {architecture.project_name}")
    w.text(f"Storeys: {architecture.storeys}")
    w.text(
        f"Materials (parsed): frame {architecture.materials.frame}, slab {architecture.materials.slab}",
        gap=10,
    )

    for scheme in schemes:
        w.text(scheme.name, font=("Helvetica-Bold", 12), gap=2)
        w.text(scheme.description, gap=2)
        w.text(f"Lateral system: {scheme.lateral_system}", indent=12)
        w.text(f"Gravity system: {scheme.gravity_system}", indent=12)
        w.text(f"Foundations: {scheme.foundations}", indent=12, gap=4)
        for member in scheme.members:
            ratio = member.utilisation_ratio
            utilisation = "not calculated (placeholder)" if ratio is None else f"{ratio:.2f}"
            w.text(
                f"{member.member_type.upper()} {member.member_id}: {member.description}",
                indent=12,
            )
            w.text(f"Code: {member.design_code}; utilisation: {utilisation}", indent=24)
            for warning in member.warnings:
                w.text(f"! {warning}", font=("Helvetica-Oblique", 9), indent=24)
        w.y -= 10

    w.finish()
    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes
