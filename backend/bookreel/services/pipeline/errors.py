"""
Pipeline failure classification

Every exception that ends a job is mapped, by type and by the service that
raised it, to exactly one code from a fixed table. The code decides the
user-facing message, the remediation hint and the HTTP status; the raw
exception text is only ever reported as ``details``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence

from ...core.exceptions import (
    AssetNotFoundError,
    AuthenticationError,
    CodecError,
    ConfigurationError,
    ContentPolicyError,
    InputValidationError,
    MediaToolError,
    OutputPermissionError,
    RateLimitError,
    ToolNotInstalledError,
    UpstreamError,
    UpstreamValidationError,
)
from ...models.generation import PipelineErrorResponse
from ...models.status import PipelineStep

VOICE_SERVICES = frozenset({"elevenlabs"})
MEDIA_SERVICES = frozenset({"media", "pexels", "unsplash"})
LLM_SERVICES = frozenset({"llm", "gemini", "ollama"})


class ErrorCode(str, Enum):
    INVALID_JSON = "ERR_INVALID_JSON"
    MISSING_TITLE = "ERR_MISSING_TITLE"
    MISSING_DESCRIPTION = "ERR_MISSING_DESCRIPTION"
    INVALID_TONE = "ERR_INVALID_TONE"
    INVALID_DURATION = "ERR_INVALID_DURATION"
    SCRIPT_GENERATION = "ERR_SCRIPT_GENERATION"
    LLM_KEY_MISSING = "ERR_LLM_KEY_MISSING"
    LLM_API = "ERR_LLM_API"
    ELEVENLABS_KEY_MISSING = "ERR_ELEVENLABS_KEY_MISSING"
    ELEVENLABS_API = "ERR_ELEVENLABS_API"
    ELEVENLABS_QUOTA = "ERR_ELEVENLABS_QUOTA"
    CONTENT_MODERATION = "ERR_CONTENT_MODERATION"
    TEXT_VALIDATION = "ERR_TEXT_VALIDATION"
    MEDIA_KEYS_MISSING = "ERR_MEDIA_KEYS_MISSING"
    MEDIA_FETCH = "ERR_MEDIA_FETCH"
    MEDIA_RATE_LIMIT = "ERR_MEDIA_RATE_LIMIT"
    NO_ASSETS_FOUND = "ERR_NO_ASSETS_FOUND"
    FFMPEG_MISSING = "ERR_FFMPEG_MISSING"
    CODEC = "ERR_CODEC"
    PERMISSION = "ERR_PERMISSION"
    VIDEO_CREATION = "ERR_VIDEO_CREATION"
    UNKNOWN = "ERR_UNKNOWN"


@dataclass(frozen=True)
class Remedy:
    message: str
    suggestion: str
    status_code: int = 500


REMEDIATION: Dict[ErrorCode, Remedy] = {
    ErrorCode.INVALID_JSON: Remedy(
        "Invalid request body",
        "Ensure the request body is valid JSON with title, description, tone, and duration fields.",
        400,
    ),
    ErrorCode.MISSING_TITLE: Remedy(
        "Book title is required",
        "Provide a non-empty book title in the request body.",
        400,
    ),
    ErrorCode.MISSING_DESCRIPTION: Remedy(
        "Description is required",
        "Provide a non-empty description or key message for the video.",
        400,
    ),
    ErrorCode.INVALID_TONE: Remedy(
        "Invalid tone",
        "Tone must be one of: Motivational, Emotional, Educational, Aggressive, Calm",
        400,
    ),
    ErrorCode.INVALID_DURATION: Remedy(
        "Invalid duration",
        "Duration must be one of: 30, 45, 60 seconds",
        400,
    ),
    ErrorCode.SCRIPT_GENERATION: Remedy(
        "Failed to generate script",
        "Try again with a shorter or simpler description.",
    ),
    ErrorCode.LLM_KEY_MISSING: Remedy(
        "No text generation provider is configured",
        "Set GEMINI_API_KEY, or run Ollama and set OLLAMA_HOST, then restart the server.",
        503,
    ),
    ErrorCode.LLM_API: Remedy(
        "Text generation service error",
        "Check the LLM provider key and quota, then try again.",
    ),
    ErrorCode.ELEVENLABS_KEY_MISSING: Remedy(
        "ElevenLabs API key not configured",
        "Add ELEVENLABS_API_KEY to your .env file and restart the server.",
        503,
    ),
    ErrorCode.ELEVENLABS_API: Remedy(
        "Voice generation failed",
        "Check that your ElevenLabs API key is valid and has text-to-speech access.",
    ),
    ErrorCode.ELEVENLABS_QUOTA: Remedy(
        "ElevenLabs quota exceeded",
        "Upgrade your ElevenLabs plan, wait for your quota to reset, or try again in a few minutes.",
    ),
    ErrorCode.CONTENT_MODERATION: Remedy(
        "Content was rejected by the voice service",
        "The book title or description may contain words that trigger content filters. "
        "Try rephrasing with more neutral language.",
    ),
    ErrorCode.TEXT_VALIDATION: Remedy(
        "Script could not be converted to speech",
        "The script may be too long or contain unsupported characters. Try a shorter description.",
    ),
    ErrorCode.MEDIA_KEYS_MISSING: Remedy(
        "Stock media API keys not configured",
        "Add PEXELS_API_KEY or UNSPLASH_ACCESS_KEY to your .env file and restart the server.",
        503,
    ),
    ErrorCode.MEDIA_FETCH: Remedy(
        "Failed to fetch visual assets",
        "Check your Pexels/Unsplash API keys and network connection, then try again.",
    ),
    ErrorCode.MEDIA_RATE_LIMIT: Remedy(
        "Stock media rate limit reached",
        "Wait a minute before retrying. Pexels and Unsplash limit requests per hour on free keys.",
    ),
    ErrorCode.NO_ASSETS_FOUND: Remedy(
        "No visual assets found",
        'Try using a more generic book title or description with common keywords like '
        '"motivation", "success", or "mindset".',
    ),
    ErrorCode.FFMPEG_MISSING: Remedy(
        "FFmpeg is not installed",
        "Install FFmpeg on your system. On Windows: choco install ffmpeg. "
        "On Mac: brew install ffmpeg. On Ubuntu: sudo apt install ffmpeg",
        503,
    ),
    ErrorCode.CODEC: Remedy(
        "Video encoding failed",
        "Ensure FFmpeg is installed with libx264 and aac codec support.",
    ),
    ErrorCode.PERMISSION: Remedy(
        "Cannot write video files",
        "Check that the application has write permissions to the output videos directory.",
    ),
    ErrorCode.VIDEO_CREATION: Remedy(
        "Failed to create video",
        "Check the server logs for the FFmpeg output and try again.",
    ),
    ErrorCode.UNKNOWN: Remedy(
        "An unexpected error occurred",
        "Please try again. If the problem persists, check server logs or contact support.",
    ),
}

FIELD_CODES = {
    "title": ErrorCode.MISSING_TITLE,
    "description": ErrorCode.MISSING_DESCRIPTION,
    "tone": ErrorCode.INVALID_TONE,
    "duration": ErrorCode.INVALID_DURATION,
}

STEP_DEFAULT_CODES = {
    PipelineStep.PARSING_REQUEST: ErrorCode.INVALID_JSON,
    PipelineStep.GENERATING_SCRIPT: ErrorCode.SCRIPT_GENERATION,
    PipelineStep.GENERATING_VOICE: ErrorCode.ELEVENLABS_API,
    PipelineStep.FETCHING_ASSETS: ErrorCode.MEDIA_FETCH,
    PipelineStep.ASSEMBLING_VIDEO: ErrorCode.VIDEO_CREATION,
}


@dataclass(frozen=True)
class PipelineFailure:
    step: PipelineStep
    code: ErrorCode
    message: str
    suggestion: str
    details: Optional[str] = None
    status_code: int = 500

    def to_response(self) -> PipelineErrorResponse:
        return PipelineErrorResponse(
            error=self.message,
            step=self.step.label,
            code=self.code.value,
            details=self.details,
            suggestion=self.suggestion,
        )


def _upstream_code(exc: UpstreamError) -> ErrorCode:
    if exc.service in VOICE_SERVICES:
        return ErrorCode.ELEVENLABS_API
    if exc.service in MEDIA_SERVICES:
        return ErrorCode.MEDIA_FETCH
    if exc.service in LLM_SERVICES:
        return ErrorCode.LLM_API
    return ErrorCode.UNKNOWN


def error_code_for(exc: Exception, step: PipelineStep) -> ErrorCode:
    """One code per cause; the step only decides otherwise untyped failures"""
    match exc:
        case InputValidationError(field=field) if field in FIELD_CODES:
            return FIELD_CODES[field]
        case InputValidationError(field="clips"):
            return ErrorCode.NO_ASSETS_FOUND
        case InputValidationError() if step is PipelineStep.GENERATING_VOICE:
            return ErrorCode.TEXT_VALIDATION
        case ConfigurationError(service=service) if service in VOICE_SERVICES:
            return ErrorCode.ELEVENLABS_KEY_MISSING
        case ConfigurationError(service=service) if service in MEDIA_SERVICES:
            return ErrorCode.MEDIA_KEYS_MISSING
        case ConfigurationError(service=service) if service in LLM_SERVICES:
            return ErrorCode.LLM_KEY_MISSING
        case RateLimitError(service=service) if service in VOICE_SERVICES:
            return ErrorCode.ELEVENLABS_QUOTA
        case RateLimitError(service=service) if service in MEDIA_SERVICES:
            return ErrorCode.MEDIA_RATE_LIMIT
        case ContentPolicyError():
            return ErrorCode.CONTENT_MODERATION
        case UpstreamValidationError(service=service) if service in VOICE_SERVICES:
            return ErrorCode.TEXT_VALIDATION
        case AuthenticationError() | UpstreamError():
            code = _upstream_code(exc)
            if code is not ErrorCode.UNKNOWN:
                return code
        case AssetNotFoundError() if step is PipelineStep.FETCHING_ASSETS:
            return ErrorCode.NO_ASSETS_FOUND
        case ToolNotInstalledError():
            return ErrorCode.FFMPEG_MISSING
        case CodecError():
            return ErrorCode.CODEC
        case OutputPermissionError() | PermissionError():
            return ErrorCode.PERMISSION
        case MediaToolError():
            return ErrorCode.VIDEO_CREATION
    return STEP_DEFAULT_CODES.get(step, ErrorCode.UNKNOWN)


def classify_error(exc: Exception, step: PipelineStep) -> PipelineFailure:
    code = error_code_for(exc, step)
    remedy = REMEDIATION[code]
    return PipelineFailure(
        step=step,
        code=code,
        message=remedy.message,
        suggestion=remedy.suggestion,
        details=str(exc) or type(exc).__name__,
        status_code=remedy.status_code,
    )


def classify_validation_errors(errors: Sequence[Mapping[str, Any]]) -> PipelineFailure:
    """Map pydantic request-validation errors to the first matching field code"""
    step = PipelineStep.VALIDATING_INPUTS
    for error in errors:
        location = [str(part) for part in error.get("loc", ())]
        for part in reversed(location):
            if part in FIELD_CODES:
                code = FIELD_CODES[part]
                remedy = REMEDIATION[code]
                return PipelineFailure(
                    step=step,
                    code=code,
                    message=remedy.message,
                    suggestion=remedy.suggestion,
                    details=f"{part}: {error.get('msg', 'invalid value')}",
                    status_code=remedy.status_code,
                )

    remedy = REMEDIATION[ErrorCode.INVALID_JSON]
    first = errors[0].get("msg") if errors else None
    return PipelineFailure(
        step=PipelineStep.PARSING_REQUEST,
        code=ErrorCode.INVALID_JSON,
        message=remedy.message,
        suggestion=remedy.suggestion,
        details=first,
        status_code=remedy.status_code,
    )
