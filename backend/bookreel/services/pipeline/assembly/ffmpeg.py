"""
ffmpeg / ffprobe command building and execution

Commands are assembled as argument lists (never shell strings) and run with
``asyncio.create_subprocess_exec``. stderr is captured so failures can be
classified; a process that overruns its timeout is killed.
"""

import asyncio
import contextlib
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ....config import FFMPEG_TIMEOUT_SECONDS, FFPROBE_TIMEOUT_SECONDS
from ....core.exceptions import (
    CodecError,
    EncodeTimeoutError,
    MediaToolError,
    OutputPermissionError,
    ToolNotInstalledError,
)
from ....core.logging import get_logger

logger = get_logger(__name__, component="ffmpeg")

STDERR_TAIL_CHARS = 2000

_PERMISSION_PATTERN = re.compile(r"permission denied|operation not permitted|read-only file system", re.I)
_CODEC_PATTERN = re.compile(
    r"unknown encoder|encoder \S* ?not found|error while opening encoder|"
    r"codec not currently supported|could not find codec|unknown decoder|no such filter",
    re.I,
)


@dataclass(frozen=True)
class RenderOptions:
    width: int = 1080
    height: int = 1920
    fps: int = 30
    video_bitrate: str = "4000k"
    audio_bitrate: str = "128k"
    subtitle_font_size: int = 48


@dataclass(frozen=True)
class SubtitleStyle:
    font_size: int = 48
    font_name: str = "Arial"
    primary_colour: str = "&HFFFFFF"
    outline_colour: str = "&H000000"
    outline: int = 2
    shadow: int = 1
    alignment: int = 2
    margin_v: int = 100

    def force_style(self) -> str:
        return (
            f"FontSize={self.font_size},FontName={self.font_name},"
            f"PrimaryColour={self.primary_colour},OutlineColour={self.outline_colour},"
            f"Outline={self.outline},Shadow={self.shadow},"
            f"Alignment={self.alignment},MarginV={self.margin_v}"
        )


@dataclass
class FFmpegCommand:
    """Typed ffmpeg invocation: inputs, filters and output options"""

    output: Path
    inputs: List[Tuple[Tuple[str, ...], Path]] = field(default_factory=list)
    video_filters: List[str] = field(default_factory=list)
    filter_complex: Optional[str] = None
    output_options: List[str] = field(default_factory=list)
    binary: str = "ffmpeg"
    overwrite: bool = True

    def add_input(self, path: Path, *options: str) -> "FFmpegCommand":
        self.inputs.append((tuple(options), Path(path)))
        return self

    def add_filter(self, expression: str) -> "FFmpegCommand":
        self.video_filters.append(expression)
        return self

    def add_output_options(self, *options: str) -> "FFmpegCommand":
        self.output_options.extend(options)
        return self

    def argv(self) -> List[str]:
        if not self.inputs:
            raise ValueError("ffmpeg command needs at least one input")
        if self.video_filters and self.filter_complex:
            raise ValueError("Use either simple video filters or a filter graph, not both")

        args = [self.binary, "-hide_banner"]
        if self.overwrite:
            args.append("-y")
        for options, path in self.inputs:
            args.extend(options)
            args.extend(["-i", str(path)])
        if self.video_filters:
            args.extend(["-vf", ",".join(self.video_filters)])
        if self.filter_complex:
            args.extend(["-filter_complex", self.filter_complex])
        args.extend(self.output_options)
        args.append(str(self.output))
        return args


def classify_tool_failure(tool: str, returncode: int, stderr: str) -> MediaToolError:
    tail = stderr[-STDERR_TAIL_CHARS:]
    if _PERMISSION_PATTERN.search(stderr):
        return OutputPermissionError(f"{tool} could not access a file", stderr=tail)
    if _CODEC_PATTERN.search(stderr):
        return CodecError(f"{tool} is missing a required codec or filter", stderr=tail)
    return MediaToolError(f"{tool} exited with code {returncode}", stderr=tail)


async def run_tool(argv: Sequence[str], timeout: float) -> Tuple[str, str]:
    """
    Run a media binary and return (stdout, stderr)

    Raises:
        ToolNotInstalledError: Binary not found on PATH
        OutputPermissionError: Binary not executable, or a file access was denied
        EncodeTimeoutError: Process ran past ``timeout`` and was killed
        CodecError / MediaToolError: Non-zero exit, classified from stderr
    """
    tool = argv[0]
    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as exc:
        raise ToolNotInstalledError(f"{tool} is not installed or not on PATH") from exc
    except PermissionError as exc:
        raise OutputPermissionError(f"{tool} could not be executed: {exc}") from exc

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError as exc:
        with contextlib.suppress(ProcessLookupError):
            process.kill()
        await process.wait()
        logger.error("Media tool timed out", extra={"tool": tool, "timeout_seconds": timeout})
        raise EncodeTimeoutError(f"{tool} timed out after {timeout:.0f}s") from exc

    stderr_text = stderr.decode("utf-8", errors="replace")
    if process.returncode != 0:
        error = classify_tool_failure(tool, process.returncode, stderr_text)
        logger.error(
            "Media tool failed",
            extra={"tool": tool, "returncode": process.returncode, "stderr_tail": error.stderr[-500:]},
        )
        raise error
    return stdout.decode("utf-8", errors="replace"), stderr_text


async def run_ffmpeg(command: FFmpegCommand, timeout: float = FFMPEG_TIMEOUT_SECONDS) -> str:
    """Run an ffmpeg command; returns its stderr log"""
    _, stderr = await run_tool(command.argv(), timeout)
    return stderr


async def read_duration(path: Path, timeout: float = FFPROBE_TIMEOUT_SECONDS) -> float:
    stdout, _ = await run_tool(
        [
            "ffprobe",
            "-v", "error",
            "-show_entries", "format=duration",
            "-of", "default=noprint_wrappers=1:nokey=1",
            str(path),
        ],
        timeout,
    )
    try:
        duration = float(stdout.strip())
    except ValueError as exc:
        raise MediaToolError(f"ffprobe returned no duration for {Path(path).name}", stderr=stdout) from exc
    if duration <= 0:
        raise MediaToolError(f"{Path(path).name} has no playable duration")
    return duration


def escape_filter_value(value: str) -> str:
    """Escape a value for use inside a quoted filter option"""
    return (
        value.replace("\\", "/")
        .replace(":", "\\:")
        .replace("'", "\\'")
    )


def _scale_pad_fps(width: int, height: int, fps: int) -> List[str]:
    return [
        f"scale={width}:{height}:force_original_aspect_ratio=decrease",
        f"pad={width}:{height}:(ow-iw)/2:(oh-ih)/2:black",
        f"fps={fps}",
    ]


def build_clip_command(
    source: Path,
    output: Path,
    duration: float,
    options: RenderOptions,
    is_image: bool = False,
) -> FFmpegCommand:
    """Normalize one clip to the target frame, rate and length; stills are looped"""
    seconds = f"{duration:.3f}"
    command = FFmpegCommand(output=output)
    if is_image:
        command.add_input(source, "-loop", "1", "-t", seconds)
    else:
        command.add_input(source)
    for expression in _scale_pad_fps(options.width, options.height, options.fps):
        command.add_filter(expression)
    return command.add_output_options(
        "-t", seconds,
        "-an",
        "-c:v", "libx264",
        "-preset", "fast",
        "-pix_fmt", "yuv420p",
    )


def write_concat_list(clips: Sequence[Path], list_path: Path) -> Path:
    """Concat demuxer manifest, one ``file`` line per clip"""
    lines = []
    for clip in clips:
        quoted = str(Path(clip).resolve()).replace("'", "'\\''")
        lines.append(f"file '{quoted}'")
    list_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return list_path


def build_final_command(
    concat_list: Path,
    audio: Path,
    subtitles: Path,
    output: Path,
    options: RenderOptions,
) -> FFmpegCommand:
    """Burn captions into the concatenated clips and mux the narration"""
    style = SubtitleStyle(font_size=options.subtitle_font_size)
    command = FFmpegCommand(output=output)
    command.add_input(concat_list, "-f", "concat", "-safe", "0")
    command.add_input(audio)
    command.filter_complex = (
        f"[0:v]subtitles=filename='{escape_filter_value(str(subtitles))}'"
        f":force_style='{style.force_style()}'[v]"
    )
    return command.add_output_options(
        "-map", "[v]",
        "-map", "1:a",
        "-c:v", "libx264",
        "-preset", "medium",
        "-crf", "23",
        "-b:v", options.video_bitrate,
        "-c:a", "aac",
        "-b:a", options.audio_bitrate,
        "-r", str(options.fps),
        "-pix_fmt", "yuv420p",
        "-movflags", "+faststart",
        "-shortest",
    )
