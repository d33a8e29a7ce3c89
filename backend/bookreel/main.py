"""
BookReel Backend API
FastAPI application that turns a book brief into a narrated, captioned
vertical video or an editor package.

This is the main entry point that wires together all routes and services.
"""

import os
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, UTC
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import (
    API_DESCRIPTION,
    API_TITLE,
    API_VERSION,
    CORS_ORIGINS,
    ELEVENLABS_API_KEY,
    GEMINI_API_KEY,
    OLLAMA_HOST,
    OUTPUT_DIR,
    PEXELS_API_KEY,
    SERVICE_NAME,
    TEMP_DIR,
    UNSPLASH_ACCESS_KEY,
    VIDEO_OUTPUT_DIR,
)
from .core import (
    clear_context,
    get_logger,
    locate_render_tools,
    parse_bool_env,
    run_startup_runtime_checks,
    set_request_id,
    setup_logging,
)
from .routes import (
    export_router,
    media_router,
    script_router,
    video_router,
    voiceover_router,
)

# Initialize logging
log_level = os.getenv("LOG_LEVEL", "INFO")
log_file = os.getenv("LOG_FILE")
use_json_logs = parse_bool_env(os.getenv("JSON_LOGS"))
pipeline_log_file = os.getenv("PIPELINE_LOG_FILE")

setup_logging(
    level=log_level,
    log_file=Path(log_file) if log_file else None,
    use_json=use_json_logs,
    pipeline_log_file=Path(pipeline_log_file) if pipeline_log_file else None,
)

logger = get_logger(__name__, service="api")
logger.info("Starting BookReel API", extra={"log_level": log_level, "json_logs": use_json_logs})


@asynccontextmanager
async def lifespan(_app: FastAPI):
    strict_runtime = parse_bool_env(
        os.getenv("STARTUP_STRICT_RUNTIME_CHECKS"),
        default=os.getenv("ENV", "").lower() == "production",
    )
    runtime_report = run_startup_runtime_checks(
        directories={"output": OUTPUT_DIR, "videos": VIDEO_OUTPUT_DIR, "temp": TEMP_DIR},
        strict_tools=strict_runtime,
        strict_dirs=True,
    )
    _app.state.runtime_report = runtime_report
    logger.info("Startup runtime checks complete", extra={"runtime_report": runtime_report.as_dict()})
    yield


# Create FastAPI app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_request_correlation(request: Request, call_next):
    """Attach a correlation id to every request and log the exchange."""
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    set_request_id(request_id)
    path = request.url.path

    logger.info(f"{request.method} {path}", extra={
        "method": request.method,
        "path": path,
        "client": request.client.host if request.client else "unknown",
    })

    try:
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        logger.info(f"Response: {response.status_code}", extra={
            "status_code": response.status_code,
            "method": request.method,
            "path": path,
        })
        return response
    finally:
        clear_context()


# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Rendered videos are served straight from the output directory
app.mount("/videos", StaticFiles(directory=str(VIDEO_OUTPUT_DIR)), name="videos")

# Include routers
app.include_router(script_router)
app.include_router(voiceover_router)
app.include_router(video_router)
app.include_router(export_router)
app.include_router(media_router)


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "message": "BookReel API - Turn a book brief into a short vertical video",
        "version": API_VERSION,
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint for container orchestration.

    Reports media tool availability and which credentials are configured.
    Returns 200 if the render path can run, 503 if a required tool is missing.
    """
    checks = {}
    healthy = True

    for tool, path in locate_render_tools().items():
        checks[tool] = {"available": path is not None, "required": True, "path": path}
        if path is None:
            healthy = False
            logger.warning(f"Health check: {tool} not found in PATH (REQUIRED)")

    checks["credentials"] = {
        "gemini": bool(GEMINI_API_KEY),
        "ollama_host": OLLAMA_HOST,
        "elevenlabs": bool(ELEVENLABS_API_KEY),
        "pexels": bool(PEXELS_API_KEY),
        "unsplash": bool(UNSPLASH_ACCESS_KEY),
    }

    body = {
        "status": "healthy" if healthy else "unhealthy",
        "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
        "service": SERVICE_NAME,
        "checks": checks,
    }
    return JSONResponse(status_code=200 if healthy else 503, content=body)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookreel.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=parse_bool_env(os.getenv("RELOAD")),
    )
