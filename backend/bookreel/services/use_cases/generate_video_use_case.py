"""
GenerateVideoUseCase - the full render pipeline

validate -> script -> (voice-over | stock assets) -> ffmpeg render

Voice-over and asset acquisition do not depend on each other and run
concurrently. Every stage reports a StageResult; the first failure in
pipeline order ends the job and is classified against its step. The job's
temporary files are swept on every exit path.
"""

import asyncio
from typing import Optional, Union

from ...core.exceptions import ConfigurationError
from ...core.logging import get_logger
from ...core.voice_catalog import get_render_settings_for_tone
from ...models.generation import GenerationRequest, VideoResponse
from ...models.status import PipelineStep
from ..pipeline.assembly import ClipInput, RenderOptions, VideoAssembler
from ..pipeline.audio import VoiceSynthesizer
from ..pipeline.errors import PipelineFailure
from ..pipeline.job import PipelineJob
from ..pipeline.media import AcquireOptions, VisualAssetAcquirer
from ..pipeline.results import StageFailure, StageResult, StageSuccess
from ..pipeline.script import ScriptSynthesizer
from .base import UseCase

logger = get_logger(__name__, component="generate_video")

RENDER_ASSET_COUNT = 6
RENDER_OPTIONS = RenderOptions(width=1080, height=1920, fps=30, subtitle_font_size=56)

VideoOutcome = Union[VideoResponse, PipelineFailure]


def _as_stage_result(outcome: Union[StageResult, BaseException]) -> StageResult:
    """A branch that raised instead of reporting still fails its own stage"""
    if isinstance(outcome, Exception):
        logger.error("Stage raised instead of reporting", exc_info=outcome)
        return StageFailure(error=outcome)
    if isinstance(outcome, BaseException):
        raise outcome
    return outcome


class GenerateVideoUseCase(UseCase[GenerationRequest, VideoOutcome]):
    def __init__(
        self,
        scripts: Optional[ScriptSynthesizer] = None,
        voice: Optional[VoiceSynthesizer] = None,
        assets: Optional[VisualAssetAcquirer] = None,
        assembler: Optional[VideoAssembler] = None,
    ):
        self.scripts = scripts or ScriptSynthesizer()
        self.voice = voice or VoiceSynthesizer()
        self.assets = assets or VisualAssetAcquirer()
        self.assembler = assembler or VideoAssembler()

    async def execute(self, request: GenerationRequest) -> VideoOutcome:
        async with PipelineJob() as job:
            try:
                return await self._run(job, request)
            except Exception as exc:
                logger.exception("Unexpected pipeline error")
                return job.fail(exc)

    async def _run(self, job: PipelineJob, request: GenerationRequest) -> VideoOutcome:
        job.set_step(PipelineStep.VALIDATING_INPUTS)
        logger.info(
            "Video requested",
            extra={"title": request.title, "tone": request.tone.value, "duration": request.duration},
        )

        job.set_step(PipelineStep.GENERATING_SCRIPT)
        match await self.scripts.run(request.title, request.description, request.tone, request.duration):
            case StageFailure(error=error):
                return job.fail(error)
            case StageSuccess(value=script):
                pass

        # Both credentials are checked before either stage starts
        try:
            self.voice.client.require_key()
        except ConfigurationError as exc:
            return job.fail(exc, PipelineStep.GENERATING_VOICE)
        try:
            self.assets.require_configured()
        except ConfigurationError as exc:
            return job.fail(exc, PipelineStep.FETCHING_ASSETS)

        job.set_step(PipelineStep.GENERATING_VOICE)
        # Both branches always finish before either result is inspected
        voice_result, asset_result = await asyncio.gather(
            self.voice.run(
                script.script,
                tone=request.tone,
                settings=get_render_settings_for_tone(request.tone),
            ),
            self.assets.run(
                request.title,
                request.description,
                download_dir=job.temp_dir,
                options=AcquireOptions(
                    count=RENDER_ASSET_COUNT,
                    orientation="portrait",
                    keywords=script.keywords,
                ),
                track=job.track,
            ),
            return_exceptions=True,
        )
        voice_result = _as_stage_result(voice_result)
        asset_result = _as_stage_result(asset_result)

        match voice_result:
            case StageFailure(error=error):
                return job.fail(error, PipelineStep.GENERATING_VOICE)
            case StageSuccess(value=voice):
                pass
        match asset_result:
            case StageFailure(error=error):
                return job.fail(error, PipelineStep.FETCHING_ASSETS)
            case StageSuccess(value=assets):
                pass

        narration = job.track(job.temp_dir / "narration.mp3")
        narration.write_bytes(voice.audio)

        job.set_step(PipelineStep.ASSEMBLING_VIDEO)
        clips = [ClipInput(path=asset.path, kind=asset.kind) for asset in assets]
        match await self.assembler.run(narration, clips, script.script, options=RENDER_OPTIONS, track=job.track):
            case StageFailure(error=error):
                return job.fail(error)
            case StageSuccess(value=artifact):
                pass

        job.set_step(PipelineStep.COMPLETED)
        logger.info(
            "Video generated",
            extra={"video_url": artifact.video_url, "file_size": artifact.file_size, "video_duration": artifact.duration},
        )
        return VideoResponse(
            video_url=artifact.video_url,
            thumbnail_url=None,
            duration=artifact.duration,
            file_size=artifact.file_size,
        )
