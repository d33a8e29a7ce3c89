"""
Voice Synthesizer - narration audio via ElevenLabs
"""

from .elevenlabs_client import ElevenLabsClient, VoiceListPermissionError
from .voice_registry import VoiceRegistry, build_voice_profile, default_voice_cache
from .voice_synthesizer import (
    VoiceResult,
    VoiceSynthesizer,
    build_tts_payload,
    estimate_speech_duration,
    validate_text,
)

__all__ = [
    "ElevenLabsClient",
    "VoiceListPermissionError",
    "VoiceRegistry",
    "build_voice_profile",
    "default_voice_cache",
    "VoiceResult",
    "VoiceSynthesizer",
    "build_tts_payload",
    "estimate_speech_duration",
    "validate_text",
]
