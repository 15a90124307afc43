import time
import uuid
from pathlib import Path

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from .api.parse import router as parse_router
from .api.report import router as report_router
from .api.schemes import router as schemes_router
from .config import get_settings
from .errors import register_error_handlers
from .logging_config import configure_logging

INDEX_HTML = Path(__file__).parent / "static" / "index.html"

settings = get_settings()
configure_logging(settings.log_level)
logger = structlog.get_logger(__name__)

app = FastAPI(title=settings.app_name, version=settings.app_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_error_handlers(app)


@app.middleware("http")
async def request_logging(request: Request, call_next):
    started = time.time()
    request_id = request.headers.get("X-Request-ID") or f"req_{uuid.uuid4().hex[:12]}"
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)

    logger.info("Request started", method=request.method, path=request.url.path)
    response = await call_next(request)
    logger.info(
        "Request completed",
        status_code=response.status_code,
        duration=time.time() - started,
    )
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/health")
async def health() -> JSONResponse:
    return JSONResponse({"status": "ok", "service": settings.app_name, "version": settings.app_version})


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    return HTMLResponse(INDEX_HTML.read_text(encoding="utf-8"))


app.include_router(parse_router)
app.include_router(schemes_router)
app.include_router(report_router)
