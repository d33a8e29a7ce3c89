"""
Caption timing.

The narration is cut into caption units (lines of a punchy script, or
sentences of a standard one) and the audio duration is shared evenly between
them, with a one-second floor per unit. Segments always cover [0, total]
exactly: contiguous, no overlap, first segment at zero, last segment ending
at ``total``.
"""

import math
import re
from dataclasses import dataclass
from typing import List, Tuple

from ....core.exceptions import InputValidationError

MAX_LINE_CHARS = 42
MIN_SEGMENT_SECONDS = 1.0
# A script with more lines than this is treated as one caption per line
PUNCHY_LINE_THRESHOLD = 3
BREAK_WORDS = frozenset({"and", "but", "or", "so", "yet", "for", "nor"})

_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]*")


@dataclass(frozen=True)
class SubtitleSegment:
    index: int
    start: float
    end: float
    lines: Tuple[str, ...]

    @property
    def duration(self) -> float:
        return self.end - self.start

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def word_count(self) -> int:
        return sum(len(line.split()) for line in self.lines)


def split_caption_units(script: str) -> List[str]:
    """Punchy scripts split per line, everything else per sentence (punctuation kept)."""
    lines = [line.strip() for line in script.split("\n") if line.strip()]
    if len(lines) > PUNCHY_LINE_THRESHOLD:
        return lines

    flat = " ".join(lines)
    units = [m.group(0).strip() for m in _SENTENCE_RE.finditer(flat)]
    units = [u for u in units if u.strip(".!? ")]
    return units or [flat]


def split_into_two_lines(text: str, max_chars: int = MAX_LINE_CHARS) -> List[str]:
    """Wrap a caption unit into at most two display lines.

    Breaks before a coordinating conjunction within two words of the middle,
    otherwise at the middle word.
    """
    text = " ".join(text.split())
    if len(text) <= max_chars:
        return [text]

    words = text.split(" ")
    if len(words) < 2:
        return [text]

    mid = len(words) // 2
    split_at = mid
    for i in range(mid - 2, mid + 3):
        if 0 < i < len(words) and words[i].lower() in BREAK_WORDS:
            split_at = i
            break

    return [line for line in (" ".join(words[:split_at]), " ".join(words[split_at:])) if line]


def _validate(script: str, total_duration: float) -> None:
    if not script or not script.strip():
        raise InputValidationError("Script must not be empty", field="script")
    if not isinstance(total_duration, (int, float)) or not math.isfinite(total_duration) or total_duration <= 0:
        raise InputValidationError("Duration must be a positive number of seconds", field="duration")


def align(script: str, total_duration: float) -> List[SubtitleSegment]:
    """Time-align the script's caption units over ``total_duration`` seconds.

    Each unit gets ``max(1.0, total / N)`` seconds, one segment per unit. When
    the floor pushes past ``total`` the running end is clipped there, so the
    trailing units collapse onto ``total`` and the last segment always ends
    exactly at it.

    Raises:
        InputValidationError: Empty script or non-positive duration
    """
    _validate(script, total_duration)

    units = split_caption_units(script)
    step = max(MIN_SEGMENT_SECONDS, total_duration / len(units))

    segments, cursor = [], 0.0
    for i, unit in enumerate(units):
        end = total_duration if i == len(units) - 1 else min(cursor + step, total_duration)
        segments.append(
            SubtitleSegment(index=i + 1, start=cursor, end=end, lines=tuple(split_into_two_lines(unit)))
        )
        cursor = end
    return segments


def align_by_speech_rate(
    script: str,
    words_per_second: float = 2.5,
    min_segment: float = 1.5,
) -> List[SubtitleSegment]:
    """Estimate timing from word counts when the audio length is unknown."""
    if not script or not script.strip():
        raise InputValidationError("Script must not be empty", field="script")
    if words_per_second <= 0:
        raise InputValidationError("Speech rate must be positive", field="words_per_second")

    segments, cursor = [], 0.0
    for i, unit in enumerate(split_caption_units(script)):
        duration = max(min_segment, len(unit.split()) / words_per_second)
        segments.append(
            SubtitleSegment(
                index=i + 1,
                start=cursor,
                end=cursor + duration,
                lines=tuple(split_into_two_lines(unit)),
            )
        )
        cursor += duration
    return segments

