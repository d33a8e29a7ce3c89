"""
Voice registry

Remote voice list cached for five minutes, with the premade profiles as
fallback when the key cannot list voices. A rejected key is not a fallback
case and propagates.
"""

from typing import Any, Dict, List, Optional

from ....core.cache import TTLCache
from ....core.exceptions import AssetNotFoundError, AuthenticationError, InputValidationError
from ....core.logging import get_logger
from ....core.voice_catalog import VoiceProfile, get_premade_voices, get_voice_id_for_tone
from ....models.generation import Tone
from ..fallback import FallbackChain, Provider
from ..results import StageFailure, StageSuccess
from .elevenlabs_client import ElevenLabsClient

logger = get_logger(__name__, component="voice_registry")

VOICE_REGISTRY_TTL_SECONDS = 300

# Process-wide default; tests and callers that need isolation inject their own
default_voice_cache: TTLCache[List[VoiceProfile]] = TTLCache(ttl_seconds=VOICE_REGISTRY_TTL_SECONDS)


def build_voice_profile(data: Dict[str, Any]) -> VoiceProfile:
    settings = data.get("settings") or {}
    return VoiceProfile(
        voice_id=data["voice_id"],
        name=data.get("name") or data["voice_id"],
        category=data.get("category") or "unknown",
        supports_style="style" in settings,
        supports_speaker_boost="use_speaker_boost" in settings,
    )


class VoiceRegistry:
    def __init__(self, client: ElevenLabsClient, cache: Optional[TTLCache[List[VoiceProfile]]] = None):
        self.client = client
        self.cache = cache if cache is not None else default_voice_cache

    async def _fetch_remote(self) -> List[VoiceProfile]:
        raw = await self.client.list_voices()
        if not raw:
            raise AssetNotFoundError("Voice list is empty")
        return [build_voice_profile(item) for item in raw]

    async def voices(self) -> List[VoiceProfile]:
        """Cached voice list

        Raises:
            AuthenticationError: The key was rejected outright
        """
        cached = self.cache.get()
        if cached is not None:
            return cached

        chain = FallbackChain(
            "voice_registry",
            [Provider("remote", self._fetch_remote), Provider("premade", get_premade_voices)],
            fatal=(AuthenticationError,),
        )
        match await chain.run():
            case StageSuccess(value=voices, source=source):
                logger.info("Voice registry refreshed", extra={"source": source, "voice_count": len(voices)})
                self.cache.set(voices)
                return voices
            case StageFailure(error=error):
                raise error

    async def resolve(self, voice_id: Optional[str] = None, tone: Optional[Tone | str] = None) -> VoiceProfile:
        """Pick the voice for a request.

        An explicit id must exist in the registry. A tone maps to its preset
        voice, or to the first registry voice when the preset is unavailable.
        """
        voices = await self.voices()
        by_id = {voice.voice_id: voice for voice in voices}

        if voice_id:
            if voice_id not in by_id:
                raise InputValidationError(f"Invalid voice ID: {voice_id}", field="voice_id")
            return by_id[voice_id]

        preset_id = get_voice_id_for_tone(tone or Tone.MOTIVATIONAL)
        if preset_id in by_id:
            return by_id[preset_id]

        logger.warning(
            "Preset voice not in registry, using first available voice",
            extra={"preset_voice_id": preset_id, "voice_id": voices[0].voice_id},
        )
        return voices[0]
