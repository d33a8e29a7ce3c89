"""
SRT caption file rendering and checks.
"""

import re
from typing import Dict, List, Sequence, Tuple

from .timing import SubtitleSegment, align

_TIMESTAMP_RE = re.compile(r"^(\d{2}):(\d{2}):(\d{2}),(\d{3})$")
_TIMING_LINE_RE = re.compile(r"^(\S+) --> (\S+)$")


def format_srt_timestamp(seconds: float) -> str:
    """12.5 -> 00:00:12,500"""
    total_ms = int(round(max(0.0, seconds) * 1000))
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


def parse_srt_timestamp(value: str) -> float:
    match = _TIMESTAMP_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid SRT timestamp: {value!r}")
    hours, minutes, secs, millis = (int(part) for part in match.groups())
    return hours * 3600 + minutes * 60 + secs + millis / 1000


def to_srt(segments: Sequence[SubtitleSegment]) -> str:
    """Render segments as an SRT document (blank line between entries)."""
    entries = [
        f"{seg.index}\n"
        f"{format_srt_timestamp(seg.start)} --> {format_srt_timestamp(seg.end)}\n"
        f"{seg.text}\n"
        for seg in segments
    ]
    return "\n".join(entries)


def validate_srt(content: str) -> Tuple[bool, List[str]]:
    """Structural check of an SRT document.

    Returns (valid, problems). Checks sequential indices, timing line syntax,
    increasing contiguous times, 1-2 text lines per entry and a first entry
    starting at zero.
    """
    problems: List[str] = []
    blocks = [b for b in re.split(r"\n\s*\n", content.strip()) if b.strip()]
    if not blocks:
        return False, ["No subtitle entries"]

    previous_end = 0.0
    for position, block in enumerate(blocks, start=1):
        lines = block.split("\n")
        if len(lines) < 3:
            problems.append(f"Entry {position}: expected index, timing and text lines")
            continue
        if lines[0].strip() != str(position):
            problems.append(f"Entry {position}: index is {lines[0].strip()!r}")

        timing = _TIMING_LINE_RE.match(lines[1].strip())
        if not timing:
            problems.append(f"Entry {position}: malformed timing line")
            continue
        try:
            start = parse_srt_timestamp(timing.group(1))
            end = parse_srt_timestamp(timing.group(2))
        except ValueError as exc:
            problems.append(f"Entry {position}: {exc}")
            continue

        if position == 1 and start != 0:
            problems.append("First entry does not start at 00:00:00,000")
        if end < start:
            problems.append(f"Entry {position}: end is before start")
        if position > 1 and abs(start - previous_end) > 0.001:
            problems.append(f"Entry {position}: gap or overlap with previous entry")
        if len(lines) - 2 > 2:
            problems.append(f"Entry {position}: more than two text lines")
        previous_end = end

    return not problems, problems


def subtitle_stats(segments: Sequence[SubtitleSegment]) -> Dict[str, float]:
    if not segments:
        return {"segment_count": 0, "total_duration": 0.0, "average_duration": 0.0, "average_words": 0.0}
    total_words = sum(seg.word_count for seg in segments)
    return {
        "segment_count": len(segments),
        "total_duration": segments[-1].end,
        "average_duration": segments[-1].end / len(segments),
        "average_words": total_words / len(segments),
    }


def align_to_srt(script: str, total_duration: float) -> str:
    """Shortcut for ``to_srt(align(script, total_duration))``"""
    return to_srt(align(script, total_duration))
