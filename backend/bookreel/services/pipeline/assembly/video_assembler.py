"""
Video Assembler

Narration + clips + script in, one vertical MP4 out. The narration's measured
duration sets the video length; every clip gets an equal share of it.
Clips are normalized one by one, concatenated, captioned and muxed with the
narration. Intermediate files are removed whether or not the render
succeeds.
"""

import shutil
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from ....config import FFMPEG_TIMEOUT_SECONDS, FFPROBE_TIMEOUT_SECONDS, TEMP_DIR, VIDEO_OUTPUT_DIR
from ....core.exceptions import BookReelError, InputValidationError, MediaToolError, OutputPermissionError
from ....core.logging import LogTimer, get_logger
from ..results import StageFailure, StageResult, StageSuccess
from ..subtitles import align_to_srt
from .ffmpeg import (
    RenderOptions,
    build_clip_command,
    build_final_command,
    read_duration,
    run_ffmpeg,
    write_concat_list,
)

logger = get_logger(__name__, component="video_assembler")

VIDEO_EXTENSIONS = (".mp4", ".webm", ".mov")
VIDEO_URL_PREFIX = "/videos"


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as exc:
        raise OutputPermissionError(f"Cannot create {path}: {exc}") from exc


@dataclass(frozen=True)
class ClipInput:
    path: Path
    kind: str = "video"  # "video" | "image"

    @property
    def is_image(self) -> bool:
        return self.kind == "image"

    @classmethod
    def from_path(cls, path: Path) -> "ClipInput":
        path = Path(path)
        return cls(path=path, kind="video" if path.suffix.lower() in VIDEO_EXTENSIONS else "image")


@dataclass(frozen=True)
class VideoArtifact:
    video_id: str
    path: Path
    video_url: str
    duration: float
    file_size: int


class VideoAssembler:
    def __init__(
        self,
        output_dir: Optional[Path] = None,
        work_dir: Optional[Path] = None,
        ffmpeg_timeout: float = FFMPEG_TIMEOUT_SECONDS,
        ffprobe_timeout: float = FFPROBE_TIMEOUT_SECONDS,
    ):
        self.output_dir = Path(output_dir or VIDEO_OUTPUT_DIR)
        self.work_dir = Path(work_dir or TEMP_DIR)
        self.ffmpeg_timeout = ffmpeg_timeout
        self.ffprobe_timeout = ffprobe_timeout

    async def assemble(
        self,
        voice_file: Path,
        clips: Sequence[ClipInput],
        script: str,
        options: Optional[RenderOptions] = None,
        track: Optional[Callable[[Path], object]] = None,
    ) -> VideoArtifact:
        """
        Render the final video

        Raises:
            InputValidationError: No clips, or the narration file is missing
            MediaToolError: ffmpeg/ffprobe failure (typed subclasses for
                missing binary, codec, permission and timeout)
        """
        if not clips:
            raise InputValidationError("At least one clip is required", field="clips")
        voice_file = Path(voice_file)
        if not voice_file.is_file():
            raise InputValidationError(f"Narration file not found: {voice_file.name}", field="voice_file")

        options = options or RenderOptions()
        _ensure_dir(self.output_dir)

        audio_duration = await read_duration(voice_file, timeout=self.ffprobe_timeout)
        clip_duration = audio_duration / len(clips)

        video_id = str(uuid.uuid4())
        output_path = self.output_dir / f"{video_id}.mp4"
        work_dir = self.work_dir / f"render_{video_id}"
        _ensure_dir(work_dir)
        if track is not None:
            track(work_dir)

        logger.info(
            "Assembling video",
            extra={
                "video_id": video_id,
                "clip_count": len(clips),
                "audio_duration": round(audio_duration, 3),
                "clip_duration": round(clip_duration, 3),
                "resolution": f"{options.width}x{options.height}",
            },
        )

        try:
            with LogTimer(logger, f"render {video_id}"):
                normalized = await self._normalize_clips(clips, clip_duration, options, work_dir)

                concat_list = write_concat_list(normalized, work_dir / "concat.txt")
                subtitle_path = work_dir / "captions.srt"
                subtitle_path.write_text(align_to_srt(script, audio_duration), encoding="utf-8")

                await run_ffmpeg(
                    build_final_command(concat_list, voice_file, subtitle_path, output_path, options),
                    timeout=self.ffmpeg_timeout,
                )
        except BookReelError:
            output_path.unlink(missing_ok=True)
            raise
        except PermissionError as exc:
            output_path.unlink(missing_ok=True)
            raise OutputPermissionError(f"Cannot write render files: {exc}") from exc
        finally:
            self._remove_work_dir(work_dir)

        if not output_path.is_file():
            raise MediaToolError("ffmpeg finished without producing an output file")

        artifact = VideoArtifact(
            video_id=video_id,
            path=output_path,
            video_url=f"{VIDEO_URL_PREFIX}/{output_path.name}",
            duration=audio_duration,
            file_size=output_path.stat().st_size,
        )
        logger.info(
            "Video ready",
            extra={"video_id": video_id, "video_url": artifact.video_url, "file_size": artifact.file_size},
        )
        return artifact

    async def run(self, voice_file: Path, clips: Sequence[ClipInput], script: str, **kwargs) -> StageResult[VideoArtifact]:
        try:
            return StageSuccess(await self.assemble(voice_file, clips, script, **kwargs), source="ffmpeg")
        except BookReelError as exc:
            return StageFailure(error=exc)
        except Exception as exc:
            logger.exception("Unexpected render failure")
            return StageFailure(error=exc)

    async def _normalize_clips(
        self,
        clips: Sequence[ClipInput],
        clip_duration: float,
        options: RenderOptions,
        work_dir: Path,
    ) -> List[Path]:
        normalized = []
        for index, clip in enumerate(clips):
            target = work_dir / f"clip_{index:03d}.mp4"
            await run_ffmpeg(
                build_clip_command(clip.path, target, clip_duration, options, is_image=clip.is_image),
                timeout=self.ffmpeg_timeout,
            )
            normalized.append(target)
            logger.debug("Clip normalized", extra={"clip_index": index + 1, "clip_total": len(clips)})
        return normalized

    @staticmethod
    def _remove_work_dir(work_dir: Path) -> None:
        try:
            shutil.rmtree(work_dir)
        except FileNotFoundError:
            return
        except OSError as exc:
            logger.warning("Could not remove render directory", extra={"path": str(work_dir), "error": str(exc)})
