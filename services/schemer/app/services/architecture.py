import structlog

from ..config import get_settings
from ..models.inputs import ParsedArchitecture, ParsedMaterialSystem, ParsedSpan

logger = structlog.get_logger(__name__)

PDF_CONTENT_TYPES = {"application/pdf", "application/x-pdf"}


def mock_architecture(filename: str | None, content_type: str | None = None) -> ParsedArchitecture:
    """Stand-in for drawing parsing: the upload itself is never read."""
    if content_type and content_type not in PDF_CONTENT_TYPES:
        logger.warning("Upload is not declared as a PDF", filename=filename, content_type=content_type)

    return ParsedArchitecture(
        project_name=filename or get_settings().default_project_name,
        storeys=5,
        spans=[
            ParsedSpan(
                id="span-L1-01",
                description="Typical span grid A–B, Level 1",
                direction="x",
                length_m=7.5,
                level="Level 1",
            ),
            ParsedSpan(
                id="span-L1-02",
                description="Typical span grid B–C, Level 1",
                direction="x",
                length_m=8.0,
                level="Level 1",
            ),
            ParsedSpan(
                id="span-L2-01",
                description="Typical span grid A–B, Level 2",
                direction="x",
                length_m=7.5,
                level="Level 2",
            ),
        ],
        materials=ParsedMaterialSystem(frame="reinforced_concrete", slab="flat_slab"),
        assumptions=[
            "Architecture parsed with placeholder logic; no real AI parsing yet.",
            "Spans and materials are mocked for demonstration.",
            "Replace with actual AI-based PDF/BIM parsing before real use.",
        ],
    )
