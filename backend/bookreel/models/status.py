"""
Pipeline step constants.

Centralized step labels used for progress logging and failure attribution.
"""

from enum import Enum


class PipelineStep(Enum):
    """Every step a generation job can be in. Values are the user-facing labels."""

    INITIALIZATION = "initialization"
    PARSING_REQUEST = "parsing request"
    VALIDATING_INPUTS = "validating inputs"
    GENERATING_SCRIPT = "generating script"
    GENERATING_VOICE = "generating voice-over"
    FETCHING_ASSETS = "fetching visual assets"
    ASSEMBLING_VIDEO = "creating video with FFmpeg"
    GENERATING_SUBTITLES = "generating subtitles"
    GENERATING_STORYBOARD = "generating storyboard"
    BUILDING_ARCHIVE = "creating archive"
    CLEANUP = "cleanup"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return self.value

    def is_terminal(self) -> bool:
        return self in (PipelineStep.CLEANUP, PipelineStep.COMPLETED)


# Steps of the full-render path, in execution order
RENDER_STEPS = (
    PipelineStep.PARSING_REQUEST,
    PipelineStep.VALIDATING_INPUTS,
    PipelineStep.GENERATING_SCRIPT,
    PipelineStep.GENERATING_VOICE,
    PipelineStep.FETCHING_ASSETS,
    PipelineStep.ASSEMBLING_VIDEO,
    PipelineStep.CLEANUP,
)

# Steps of the export-package path, in execution order
EXPORT_STEPS = (
    PipelineStep.VALIDATING_INPUTS,
    PipelineStep.GENERATING_SUBTITLES,
    PipelineStep.GENERATING_STORYBOARD,
    PipelineStep.BUILDING_ARCHIVE,
)


__all__ = [
    "PipelineStep",
    "RENDER_STEPS",
    "EXPORT_STEPS",
]
