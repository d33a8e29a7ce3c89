"""
API schemas for generation endpoints

Request/Response models for script, voice-over, video and export operations.
JSON bodies use camelCase keys; Python attributes stay snake_case.
"""

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Tone(str, Enum):
    """Narrative style preset driving script wording, voice and storyboard"""
    MOTIVATIONAL = "Motivational"
    EMOTIONAL = "Emotional"
    EDUCATIONAL = "Educational"
    AGGRESSIVE = "Aggressive"
    CALM = "Calm"


VALID_DURATIONS = (30, 45, 60)
VideoDuration = Literal[30, 45, 60]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BriefRequest(CamelModel):
    """A title, description, tone and target duration. Immutable once accepted."""
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    tone: Tone
    duration: VideoDuration

    @field_validator("title", "description")
    @classmethod
    def require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()


class GenerationRequest(BriefRequest):
    """Request to render a full video"""


class ScriptRequest(BriefRequest):
    """Request to generate narration only"""
    punchy: bool = False


class ScriptResponse(CamelModel):
    success: bool = True
    script: str
    keywords: List[str]
    format: Literal["capcut", "standard"]
    source: Literal["ai", "template"]
    scenes: List[str] = Field(default_factory=list)
    word_count: int = 0


class VoiceoverRequest(CamelModel):
    script: str
    tone: Tone
    voice_id: Optional[str] = None

    @field_validator("script")
    @classmethod
    def require_script(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()


class VoiceoverResponse(CamelModel):
    success: bool = True
    audio: str  # base64
    content_type: str
    duration: float
    voice_id: str
    voice_name: str
    model_used: str


class VoiceProfileResponse(CamelModel):
    voice_id: str
    name: str
    category: str
    supports_style: bool
    supports_speaker_boost: bool


class VideoResponse(CamelModel):
    success: bool = True
    video_url: str
    thumbnail_url: Optional[str] = None
    duration: float
    file_size: int


class PipelineErrorResponse(CamelModel):
    success: bool = False
    error: str
    step: str
    code: str
    details: Optional[str] = None
    suggestion: Optional[str] = None


class ExportPackageRequest(CamelModel):
    """Export body. Field checks live in the exporter so they run before any archive work."""
    title: str = ""
    description: str = ""
    tone: str = Tone.MOTIVATIONAL.value
    duration: Union[int, float, str] = 30
    script: str = ""
    voice_audio: str = ""


class FetchMediaRequest(CamelModel):
    title: str
    description: str
    count: int = Field(default=5, ge=1, le=20)

    @field_validator("title", "description")
    @classmethod
    def require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()


class RemoteAssetResponse(CamelModel):
    url: str
    type: Literal["video", "image"]
    source: str
    thumbnail: Optional[str] = None
    attribution: str = ""


class FetchMediaResponse(CamelModel):
    success: bool = True
    query: str
    assets: List[RemoteAssetResponse]
