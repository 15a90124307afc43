import structlog
from fastapi import APIRouter, File, UploadFile

from ..errors import ApiError
from ..models.schemes import ArchitectureResponse
from ..services.architecture import mock_architecture

router = APIRouter()
logger = structlog.get_logger(__name__)


@router.post("/api/parse-architecture", response_model=ArchitectureResponse)
async def parse_architecture(arch_drawing: UploadFile | None = File(None, alias="archDrawing")):
    if arch_drawing is None:
        raise ApiError(400, "No architectural drawing PDF uploaded (field name: archDrawing).")

    try:
        logger.info(
            "Architectural drawing received",
            filename=arch_drawing.filename,
            content_type=arch_drawing.content_type,
        )
        # TODO: replace the mock with real drawing extraction once a parser is chosen.
        architecture = mock_architecture(arch_drawing.filename, arch_drawing.content_type)
    except Exception as e:
        logger.exception("Parsing architectural drawing failed")
        raise ApiError(500, "Failed to parse architectural drawing.", str(e)) from e
    finally:
        await arch_drawing.close()

    return ArchitectureResponse(architecture=architecture)
