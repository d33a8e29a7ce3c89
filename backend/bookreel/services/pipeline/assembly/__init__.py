"""
Video Assembler - ffmpeg rendering of the final vertical video
"""

from .ffmpeg import (
    FFmpegCommand,
    RenderOptions,
    SubtitleStyle,
    build_clip_command,
    build_final_command,
    classify_tool_failure,
    escape_filter_value,
    read_duration,
    run_ffmpeg,
    run_tool,
    write_concat_list,
)
from .video_assembler import ClipInput, VideoArtifact, VideoAssembler

__all__ = [
    "FFmpegCommand",
    "RenderOptions",
    "SubtitleStyle",
    "build_clip_command",
    "build_final_command",
    "classify_tool_failure",
    "escape_filter_value",
    "read_duration",
    "run_ffmpeg",
    "run_tool",
    "write_concat_list",
    "ClipInput",
    "VideoArtifact",
    "VideoAssembler",
]
