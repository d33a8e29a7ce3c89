"""
Full render route

Failures are reported in the pipeline envelope:
{success: false, error, step, code, details, suggestion}
"""

import json

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..core import get_logger
from ..models import GenerationRequest, PipelineStep, VideoResponse
from ..services.pipeline.errors import REMEDIATION, ErrorCode, PipelineFailure, classify_validation_errors
from ..services.use_cases import GenerateVideoUseCase

router = APIRouter(tags=["video"])
logger = get_logger(__name__, component="video_routes")


def failure_response(failure: PipelineFailure) -> JSONResponse:
    return JSONResponse(
        status_code=failure.status_code,
        content=failure.to_response().model_dump(by_alias=True),
    )


def _invalid_json(details: str) -> PipelineFailure:
    remedy = REMEDIATION[ErrorCode.INVALID_JSON]
    return PipelineFailure(
        step=PipelineStep.PARSING_REQUEST,
        code=ErrorCode.INVALID_JSON,
        message=remedy.message,
        suggestion=remedy.suggestion,
        details=details,
        status_code=remedy.status_code,
    )


@router.post(
    "/generate-video",
    response_model=VideoResponse,
    response_model_by_alias=True,
    responses={400: {"description": "Invalid brief"}, 500: {"description": "Pipeline failure"}},
)
async def generate_video(request: Request):
    """Render a narrated, captioned vertical video from a brief"""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        return failure_response(_invalid_json(str(exc)))
    if not isinstance(body, dict):
        return failure_response(_invalid_json("Request body must be a JSON object"))

    try:
        brief = GenerationRequest.model_validate(body)
    except ValidationError as exc:
        failure = classify_validation_errors(exc.errors())
        logger.info("Rejected brief", extra={"code": failure.code.value, "details": failure.details})
        return failure_response(failure)

    outcome = await GenerateVideoUseCase().execute(brief)
    match outcome:
        case PipelineFailure():
            return failure_response(outcome)
        case _:
            return outcome
