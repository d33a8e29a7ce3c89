"""
Central voice catalog for narration.

Single source of truth for:
- tone -> voice preset mapping
- preset -> ElevenLabs voice id
- the premade voice profiles used when the remote voice list is unavailable
- per-tone voice settings for the render path
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..models.generation import Tone

DEFAULT_TTS_MODEL = "eleven_multilingual_v2"


@dataclass(frozen=True)
class VoiceProfile:
    voice_id: str
    name: str
    category: str = "premade"
    supports_style: bool = False
    supports_speaker_boost: bool = False


# Preset name -> voice id
VOICE_PRESETS: Dict[str, str] = {
    "motivational": "pNInz6obpgDQGcFmaJgB",  # Adam
    "energetic": "ErXwobaYiN019PkySvjV",  # Antoni
    "narrative": "TxGEqnHWrfWFTfGW9XjX",  # Josh
    "professional": "21m00Tcm4TlvDq8ikWAM",  # Rachel
    "calm": "EXAVITQu4vr4xnSDxMaL",  # Bella
}

TONE_TO_PRESET: Dict[Tone, str] = {
    Tone.MOTIVATIONAL: "motivational",
    Tone.EMOTIONAL: "calm",
    Tone.EDUCATIONAL: "professional",
    Tone.AGGRESSIVE: "energetic",
    Tone.CALM: "calm",
}

PREMADE_VOICES: List[VoiceProfile] = [
    VoiceProfile(voice_id=VOICE_PRESETS["motivational"], name="Adam"),
    VoiceProfile(voice_id=VOICE_PRESETS["energetic"], name="Antoni"),
    VoiceProfile(voice_id=VOICE_PRESETS["narrative"], name="Josh"),
    VoiceProfile(voice_id=VOICE_PRESETS["professional"], name="Rachel"),
    VoiceProfile(voice_id=VOICE_PRESETS["calm"], name="Bella"),
]


@dataclass(frozen=True)
class VoiceSettings:
    stability: float = 0.5
    similarity_boost: float = 0.75
    style: Optional[float] = None
    use_speaker_boost: Optional[bool] = None


DEFAULT_VOICE_SETTINGS = VoiceSettings()


def get_voice_id_for_tone(tone: Tone | str) -> str:
    return VOICE_PRESETS[TONE_TO_PRESET[Tone(tone)]]


def get_render_settings_for_tone(tone: Tone | str) -> VoiceSettings:
    """Settings used by the full-render path; expressive values only apply when the voice supports them"""
    tone = Tone(tone)
    return VoiceSettings(
        stability=0.7 if tone == Tone.CALM else 0.5,
        similarity_boost=0.75,
        style=0.8 if tone == Tone.AGGRESSIVE else 0.5,
        use_speaker_boost=True,
    )


def get_premade_voices() -> List[VoiceProfile]:
    return list(PREMADE_VOICES)
