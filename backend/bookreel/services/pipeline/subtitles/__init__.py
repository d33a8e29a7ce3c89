"""
Subtitle Timing Engine - caption units, timing and SRT rendering
"""

from .timing import (
    SubtitleSegment,
    align,
    align_by_speech_rate,
    split_caption_units,
    split_into_two_lines,
)
from .srt import (
    align_to_srt,
    format_srt_timestamp,
    parse_srt_timestamp,
    to_srt,
    validate_srt,
    subtitle_stats,
)

__all__ = [
    "SubtitleSegment",
    "align",
    "align_by_speech_rate",
    "align_to_srt",
    "split_caption_units",
    "split_into_two_lines",
    "format_srt_timestamp",
    "parse_srt_timestamp",
    "to_srt",
    "validate_srt",
    "subtitle_stats",
]
