"""
Voice-over routes
"""

import base64
from typing import List

from fastapi import APIRouter, HTTPException

from ..core import (
    AuthenticationError,
    ConfigurationError,
    ContentPolicyError,
    InputValidationError,
    RateLimitError,
    UpstreamError,
    get_logger,
)
from ..core.voice_catalog import get_render_settings_for_tone
from ..models import VoiceoverRequest, VoiceoverResponse, VoiceProfileResponse
from ..services.pipeline.audio import VoiceSynthesizer

router = APIRouter(tags=["voice"])
logger = get_logger(__name__, component="voice_routes")


def _http_error(exc: Exception) -> HTTPException:
    match exc:
        case InputValidationError():
            return HTTPException(status_code=400, detail=str(exc))
        case ConfigurationError():
            return HTTPException(status_code=503, detail=str(exc))
        case AuthenticationError():
            return HTTPException(status_code=401, detail=str(exc))
        case RateLimitError():
            return HTTPException(status_code=429, detail=str(exc))
        case ContentPolicyError():
            return HTTPException(status_code=422, detail=str(exc))
        case UpstreamError():
            return HTTPException(status_code=502, detail=str(exc))
    return HTTPException(status_code=500, detail="Voice generation failed")


@router.post("/generate-voiceover", response_model=VoiceoverResponse, response_model_by_alias=True)
async def generate_voiceover(request: VoiceoverRequest):
    """Narration audio for a script, returned as base64 MP3"""
    synthesizer = VoiceSynthesizer()
    try:
        result = await synthesizer.synthesize(
            request.script,
            tone=request.tone,
            voice_id=request.voice_id,
            settings=get_render_settings_for_tone(request.tone),
        )
    except (InputValidationError, ConfigurationError, UpstreamError) as exc:
        logger.warning("Voice-over failed", extra={"error_type": type(exc).__name__, "error": str(exc)})
        raise _http_error(exc) from exc

    return VoiceoverResponse(
        audio=base64.b64encode(result.audio).decode("ascii"),
        content_type=result.content_type,
        duration=result.estimated_duration,
        voice_id=result.voice_id,
        voice_name=result.voice_name,
        model_used=result.model_id,
    )


@router.get("/voices", response_model=List[VoiceProfileResponse], response_model_by_alias=True)
async def list_voices():
    """Voices available to the configured key (premade voices when listing is not permitted)"""
    try:
        voices = await VoiceSynthesizer().list_voices()
    except (ConfigurationError, UpstreamError) as exc:
        raise _http_error(exc) from exc
    return [
        VoiceProfileResponse(
            voice_id=voice.voice_id,
            name=voice.name,
            category=voice.category,
            supports_style=voice.supports_style,
            supports_speaker_boost=voice.supports_speaker_boost,
        )
        for voice in voices
    ]
