import base64
import re

import structlog
from fastapi import APIRouter

from ..errors import ApiError
from ..models.schemes import ReportFile, ReportRequest, ReportResponse
from ..services.report import render_scheme_report

router = APIRouter()
logger = structlog.get_logger(__name__)


def report_filename(project_name: str) -> str:
    stem = re.sub(r"[^A-Za-z0-9_-]+", "_", project_name.rsplit(".", 1)[0]).strip("_")
    return f"schemes_{stem or 'project'}.pdf"


@router.post("/api/scheme-report", response_model=ReportResponse)
def scheme_report(body: ReportRequest):
    if body.architecture is None or not body.schemes:
        raise ApiError(400, "architecture and at least one scheme must be provided.")

    try:
        pdf_bytes = render_scheme_report(body.architecture, body.schemes)
    except Exception as e:
        logger.exception("Report rendering failed")
        raise ApiError(500, "Failed to render scheme report.", str(e)) from e

    logger.info("Scheme report rendered", schemes=len(body.schemes), pdf_size_bytes=len(pdf_bytes))
    return ReportResponse(
        report=ReportFile(
            filename=report_filename(body.architecture.project_name),
            content_b64=base64.b64encode(pdf_bytes).decode("ascii"),
            content_type="application/pdf",
        )
    )
