"""
Editor package export route
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response

from ..core import InputValidationError, get_logger
from ..models import ExportPackageRequest
from ..services.use_cases import ExportPackageUseCase

router = APIRouter(tags=["export"])
logger = get_logger(__name__, component="export_routes")


@router.post(
    "/export-package",
    response_class=Response,
    responses={200: {"content": {"application/zip": {}}}, 400: {"description": "Invalid input"}},
)
async def export_package(request: ExportPackageRequest):
    """Zip of narration, captions, storyboard and instructions"""
    try:
        package = await ExportPackageUseCase().execute(request)
    except InputValidationError as exc:
        logger.info("Export rejected", extra={"field": exc.field, "error": str(exc)})
        return JSONResponse(status_code=400, content={"success": False, "error": str(exc)})

    return Response(
        content=package.content,
        media_type=package.content_type,
        headers={
            "Content-Disposition": f'attachment; filename="{package.filename}"',
        },
    )
