"""
API models and shared enumerations
"""

from .generation import (
    Tone,
    VALID_DURATIONS,
    VideoDuration,
    CamelModel,
    BriefRequest,
    GenerationRequest,
    ScriptRequest,
    ScriptResponse,
    VoiceoverRequest,
    VoiceoverResponse,
    VoiceProfileResponse,
    VideoResponse,
    PipelineErrorResponse,
    ExportPackageRequest,
    FetchMediaRequest,
    FetchMediaResponse,
    RemoteAssetResponse,
)
from .status import PipelineStep, RENDER_STEPS, EXPORT_STEPS

__all__ = [
    "Tone",
    "VALID_DURATIONS",
    "VideoDuration",
    "CamelModel",
    "BriefRequest",
    "GenerationRequest",
    "ScriptRequest",
    "ScriptResponse",
    "VoiceoverRequest",
    "VoiceoverResponse",
    "VoiceProfileResponse",
    "VideoResponse",
    "PipelineErrorResponse",
    "ExportPackageRequest",
    "FetchMediaRequest",
    "FetchMediaResponse",
    "RemoteAssetResponse",
    "PipelineStep",
    "RENDER_STEPS",
    "EXPORT_STEPS",
]
