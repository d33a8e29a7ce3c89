"""
Tests for bookreel.services.pipeline.export
"""

import base64
import io
import zipfile
from unittest.mock import AsyncMock

import pytest

from bookreel.core.exceptions import InputValidationError
from bookreel.services.llm.completion import CompletionService
from bookreel.services.pipeline.export import (
    PACKAGE_FILENAME,
    PackageExporter,
    create_instructions,
    decode_audio,
    parse_duration,
)
from bookreel.services.pipeline.storyboard import StoryboardGenerator

AUDIO = b"ID3" + bytes(range(256)) * 8
AUDIO_B64 = base64.b64encode(AUDIO).decode("ascii")
SCRIPT = "Stop scrolling. Your habits shape your future. Read Atomic Habits today."


def offline_exporter() -> PackageExporter:
    return PackageExporter(StoryboardGenerator(CompletionService([])))


class TestDecodeAudio:
    """Test suite for decode_audio"""

    def test_base64(self):
        assert decode_audio(AUDIO_B64) == AUDIO

    def test_bytes_pass_through(self):
        assert decode_audio(b"raw") == b"raw"

    @pytest.mark.parametrize("value", [None, "", b""])
    def test_missing(self, value):
        with pytest.raises(InputValidationError, match="Voice audio is required"):
            decode_audio(value)

    def test_invalid(self):
        with pytest.raises(InputValidationError, match="Invalid audio data"):
            decode_audio("not base64 !!")


class TestParseDuration:
    """Test suite for parse_duration"""

    @pytest.mark.parametrize("value, expected", [(30, 30), ("45", 45), (59.9, 59), ("60.0", 60)])
    def test_numeric(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["thirty", None, 0, -5])
    def test_invalid(self, value):
        with pytest.raises(InputValidationError):
            parse_duration(value)


class TestInstructions:
    """Test suite for create_instructions"""

    def test_project_details(self):
        text = create_instructions("Atomic Habits", "Small changes", "Motivational", 30, SCRIPT)
        assert text.startswith("#")
        assert "## Atomic Habits" in text
        assert "**Script Length:** 11 words" in text
        assert "Vertical (9:16)" in text


@pytest.mark.asyncio
class TestPackageExporter:
    """Test suite for PackageExporter"""

    async def test_archive_contents(self):
        package = await offline_exporter().export("Atomic Habits", "Small changes", "Motivational", 30, SCRIPT, AUDIO_B64)

        assert package.filename == PACKAGE_FILENAME
        assert package.content_type == "application/zip"
        with zipfile.ZipFile(io.BytesIO(package.content)) as archive:
            assert sorted(archive.namelist()) == ["captions.srt", "instructions.md", "narration.mp3", "storyboard.txt"]
            assert archive.read("narration.mp3") == AUDIO
            captions = archive.read("captions.srt").decode("utf-8")
            storyboard = archive.read("storyboard.txt").decode("utf-8")
            assert all(info.compress_type == zipfile.ZIP_DEFLATED for info in archive.infolist())

        assert captions.startswith("1\n00:00:00,000 --> 00:00:10,000\nStop scrolling.")
        assert captions.rstrip().endswith("Read Atomic Habits today.")
        assert "PROJECT: Atomic Habits" in storyboard
        assert storyboard.count("SCENE ") == 3

    async def test_archive_is_deterministic(self):
        exporter = offline_exporter()
        first = await exporter.export("T", "d", "Calm", 45, SCRIPT, AUDIO_B64)
        second = await exporter.export("T", "d", "Calm", 45, SCRIPT, AUDIO_B64)
        with zipfile.ZipFile(io.BytesIO(first.content)) as a, zipfile.ZipFile(io.BytesIO(second.content)) as b:
            for name in a.namelist():
                assert a.read(name) == b.read(name)

    @pytest.mark.parametrize(
        "title, script, audio, duration, message",
        [
            ("", "", "", "x", "Title is required"),
            ("T", "  ", "", "x", "Script is required"),
            ("T", SCRIPT, "", "x", "Voice audio is required"),
            ("T", SCRIPT, "@@@", "x", "Invalid audio data"),
            ("T", SCRIPT, AUDIO_B64, "x", "Duration must be a number"),
        ],
    )
    async def test_validation_order(self, title, script, audio, duration, message):
        storyboard = AsyncMock()
        exporter = PackageExporter(storyboard)
        with pytest.raises(InputValidationError, match=message):
            await exporter.export(title, "d", "Calm", duration, script, audio)
        storyboard.generate.assert_not_called()
