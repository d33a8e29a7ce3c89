"""
Voice Synthesizer

Narration text in, MP3 bytes out, via ElevenLabs. Text length is checked
before any network call; the returned payload is checked for a minimum size
so an empty "200 OK" never reaches the assembler.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ....core.exceptions import BookReelError, InputValidationError, UpstreamError
from ....core.logging import get_logger
from ....core.voice_catalog import (
    DEFAULT_TTS_MODEL,
    DEFAULT_VOICE_SETTINGS,
    VoiceProfile,
    VoiceSettings,
)
from ....models.generation import Tone
from ..results import StageFailure, StageResult, StageSuccess
from .elevenlabs_client import SERVICE, ElevenLabsClient
from .voice_registry import VoiceRegistry

logger = get_logger(__name__, component="voice_synthesizer")

MIN_TEXT_LENGTH = 3
MAX_TEXT_LENGTH = 5000
MIN_AUDIO_BYTES = 1000
WORDS_PER_SECOND = 150 / 60
AUDIO_CONTENT_TYPE = "audio/mpeg"


@dataclass(frozen=True)
class VoiceResult:
    audio: bytes
    content_type: str
    estimated_duration: float
    voice_id: str
    voice_name: str
    model_id: str


def validate_text(text: str) -> str:
    stripped = (text or "").strip()
    if len(stripped) < MIN_TEXT_LENGTH:
        raise InputValidationError(
            f"Text must be at least {MIN_TEXT_LENGTH} characters", field="text"
        )
    if len(stripped) > MAX_TEXT_LENGTH:
        raise InputValidationError(
            f"Text must be at most {MAX_TEXT_LENGTH} characters (got {len(stripped)})", field="text"
        )
    return stripped


def estimate_speech_duration(text: str) -> float:
    return len(text.split()) / WORDS_PER_SECOND


def build_tts_payload(
    text: str,
    voice: VoiceProfile,
    settings: VoiceSettings = DEFAULT_VOICE_SETTINGS,
    model_id: str = DEFAULT_TTS_MODEL,
) -> Dict[str, Any]:
    """Request body with expressive parameters only where the voice supports them"""
    payload: Dict[str, Any] = {"text": text, "model_id": model_id}
    if not (voice.supports_style or voice.supports_speaker_boost):
        return payload

    voice_settings: Dict[str, Any] = {
        "stability": settings.stability,
        "similarity_boost": settings.similarity_boost,
    }
    if voice.supports_style and settings.style is not None:
        voice_settings["style"] = settings.style
    if voice.supports_speaker_boost and settings.use_speaker_boost is not None:
        voice_settings["use_speaker_boost"] = settings.use_speaker_boost
    payload["voice_settings"] = voice_settings
    return payload


class VoiceSynthesizer:
    def __init__(
        self,
        client: Optional[ElevenLabsClient] = None,
        registry: Optional[VoiceRegistry] = None,
        model_id: str = DEFAULT_TTS_MODEL,
    ):
        self.client = client or ElevenLabsClient()
        self.registry = registry or VoiceRegistry(self.client)
        self.model_id = model_id

    async def synthesize(
        self,
        text: str,
        tone: Optional[Tone | str] = None,
        voice_id: Optional[str] = None,
        settings: Optional[VoiceSettings] = None,
    ) -> VoiceResult:
        """
        Raises:
            InputValidationError: Text out of range or unknown voice id
            ConfigurationError: Missing or malformed API key
            UpstreamError: ElevenLabs failure, or a payload below the size floor
        """
        text = validate_text(text)
        self.client.require_key()

        voice = await self.registry.resolve(voice_id=voice_id, tone=tone)
        payload = build_tts_payload(text, voice, settings or DEFAULT_VOICE_SETTINGS, self.model_id)

        logger.info(
            "Synthesizing narration",
            extra={"voice_id": voice.voice_id, "voice_name": voice.name, "characters": len(text)},
        )
        audio = await self.client.text_to_speech(voice.voice_id, payload)
        if len(audio) < MIN_AUDIO_BYTES:
            raise UpstreamError(
                f"ElevenLabs returned {len(audio)} bytes of audio; expected at least {MIN_AUDIO_BYTES}",
                SERVICE,
            )

        return VoiceResult(
            audio=audio,
            content_type=AUDIO_CONTENT_TYPE,
            estimated_duration=estimate_speech_duration(text),
            voice_id=voice.voice_id,
            voice_name=voice.name,
            model_id=self.model_id,
        )

    async def run(self, text: str, **kwargs) -> StageResult[VoiceResult]:
        try:
            return StageSuccess(await self.synthesize(text, **kwargs), source=SERVICE)
        except BookReelError as exc:
            return StageFailure(error=exc)
        except Exception as exc:
            logger.exception("Unexpected voice synthesis failure")
            return StageFailure(error=exc)

    async def list_voices(self) -> List[VoiceProfile]:
        self.client.require_key()
        return await self.registry.voices()
