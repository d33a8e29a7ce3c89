"""
Tests for bookreel.services.pipeline.subtitles
"""

import math

import pytest

from bookreel.core.exceptions import InputValidationError
from bookreel.services.pipeline.subtitles import (
    align,
    align_by_speech_rate,
    align_to_srt,
    format_srt_timestamp,
    parse_srt_timestamp,
    split_caption_units,
    split_into_two_lines,
    subtitle_stats,
    validate_srt,
)

PUNCHY_SCRIPT = "\n".join([
    "Stop waiting for motivation.",
    "Start with one tiny habit.",
    "Do it every single day.",
    "Watch it compound.",
    "Read Atomic Habits today.",
])


def assert_partition(segments, total):
    assert segments[0].start == 0
    assert math.isclose(segments[-1].end, total)
    for previous, current in zip(segments, segments[1:]):
        assert math.isclose(previous.end, current.start)
    assert all(seg.end > seg.start for seg in segments)
    assert [seg.index for seg in segments] == list(range(1, len(segments) + 1))


class TestSplitCaptionUnits:
    """Test suite for caption unit detection"""

    def test_sentences(self):
        assert split_caption_units("Hello world. This is a test.") == ["Hello world.", "This is a test."]

    def test_punchy_lines(self):
        """More than three lines means one caption per line"""
        assert len(split_caption_units(PUNCHY_SCRIPT)) == 5

    def test_no_punctuation(self):
        assert split_caption_units("just words here") == ["just words here"]


class TestTwoLineSplit:
    """Test suite for split_into_two_lines"""

    def test_short_text_single_line(self):
        assert split_into_two_lines("Short caption") == ["Short caption"]

    def test_long_text_two_lines(self):
        lines = split_into_two_lines("This sentence is definitely longer than forty two characters overall")
        assert len(lines) == 2
        assert " ".join(lines) == "This sentence is definitely longer than forty two characters overall"

    def test_breaks_before_conjunction(self):
        lines = split_into_two_lines("You will build better habits every day and become who you want")
        assert lines[1].startswith("and")


class TestAlign:
    """Test suite for align"""

    def test_two_sentences_ten_seconds(self):
        segments = align("Hello world. This is a test.", 10)
        assert len(segments) == 2
        assert (segments[0].start, segments[0].end) == (0, 5)
        assert (segments[1].start, segments[1].end) == (5, 10)
        assert segments[0].text == "Hello world."

    def test_partition_punchy(self):
        segments = align(PUNCHY_SCRIPT, 23.7)
        assert len(segments) == 5
        assert_partition(segments, 23.7)

    def test_one_second_floor_clips_final_unit(self):
        """Three sentences over 2.5 seconds: one segment each, the last one clipped"""
        segments = align("One. Two. Three.", 2.5)
        assert [(seg.start, seg.end, seg.text) for seg in segments] == [
            (0.0, 1.0, "One."),
            (1.0, 2.0, "Two."),
            (2.0, 2.5, "Three."),
        ]

    def test_units_past_the_end_collapse_onto_it(self):
        """Seven sentences over 3 seconds keep one segment per sentence"""
        segments = align("One. Two. Three. Four. Five. Six. Seven.", 3)
        assert len(segments) == 7
        assert [(seg.start, seg.end) for seg in segments[:3]] == [(0.0, 1.0), (1.0, 2.0), (2.0, 3.0)]
        assert all(seg.start == seg.end == 3 for seg in segments[3:])
        for previous, current in zip(segments, segments[1:]):
            assert previous.end == current.start
        assert all(seg.end <= 3 for seg in segments)

    def test_clipped_track_renders_valid_srt(self):
        valid, problems = validate_srt(align_to_srt("One. Two. Three. Four.", 2))
        assert valid, problems

    def test_track_shorter_than_a_second(self):
        segments = align("One. Two.", 0.5)
        assert len(segments) == 2
        assert (segments[0].start, segments[0].end) == (0.0, 0.5)
        assert (segments[1].start, segments[1].end) == (0.5, 0.5)

    def test_at_most_two_lines(self):
        long_script = "This is a very long single sentence that will never fit on one caption line at all."
        assert all(len(seg.lines) <= 2 for seg in align(long_script, 8))

    @pytest.mark.parametrize("script, duration", [("", 10), ("   ", 10), ("Hello.", 0), ("Hello.", -1)])
    def test_invalid_input(self, script, duration):
        with pytest.raises(InputValidationError):
            align(script, duration)

    def test_nan_duration(self):
        with pytest.raises(InputValidationError):
            align("Hello.", float("nan"))


class TestAlignBySpeechRate:
    """Test suite for speech-rate estimation"""

    def test_minimum_segment(self):
        segments = align_by_speech_rate("Hi. Hello there friend and welcome to this.")
        assert segments[0].duration == 1.5
        assert segments[1].start == segments[0].end

    def test_invalid_rate(self):
        with pytest.raises(InputValidationError):
            align_by_speech_rate("Hello.", words_per_second=0)


class TestSrt:
    """Test suite for SRT rendering"""

    def test_timestamp_format(self):
        assert format_srt_timestamp(12.5) == "00:00:12,500"
        assert format_srt_timestamp(3725.042) == "01:02:05,042"
        assert parse_srt_timestamp("00:01:02,250") == 62.25

    def test_bad_timestamp(self):
        with pytest.raises(ValueError):
            parse_srt_timestamp("1:02.25")

    def test_rendered_document(self):
        srt = align_to_srt("Hello world. This is a test.", 10)
        assert srt == (
            "1\n00:00:00,000 --> 00:00:05,000\nHello world.\n"
            "\n"
            "2\n00:00:05,000 --> 00:00:10,000\nThis is a test.\n"
        )

    def test_rendered_document_is_valid(self):
        valid, problems = validate_srt(align_to_srt(PUNCHY_SCRIPT, 30))
        assert valid, problems

    def test_validate_detects_gap(self):
        content = "1\n00:00:00,000 --> 00:00:02,000\nA\n\n2\n00:00:03,000 --> 00:00:04,000\nB\n"
        valid, problems = validate_srt(content)
        assert not valid
        assert any("gap" in p for p in problems)

    def test_validate_empty(self):
        assert validate_srt("") == (False, ["No subtitle entries"])

    def test_stats(self):
        stats = subtitle_stats(align("Hello world. This is a test.", 10))
        assert stats["segment_count"] == 2
        assert stats["total_duration"] == 10
        assert stats["average_words"] == 3
