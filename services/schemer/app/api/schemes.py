import structlog
from fastapi import APIRouter

from ..errors import ApiError
from ..models.inputs import GenerateRequest
from ..models.schemes import SchemesResponse
from ..services.schemes import generate_scheme_options

router = APIRouter()
logger = structlog.get_logger(__name__)


@router.post("/api/generate-schemes", response_model=SchemesResponse)
def generate_schemes(body: GenerateRequest):
    if body.architecture is None or body.site_inputs is None:
        raise ApiError(400, "architecture and siteInputs must be provided.")

    try:
        schemes = generate_scheme_options(body.architecture, body.site_inputs)
    except Exception as e:
        logger.exception("Scheme generation failed")
        raise ApiError(500, "Failed to generate structural schemes.", str(e)) from e

    logger.info(
        "Schemes generated",
        project=body.architecture.project_name,
        schemes=[s.id for s in schemes],
    )
    return SchemesResponse(schemes=schemes)
