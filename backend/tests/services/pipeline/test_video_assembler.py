"""
Tests for bookreel.services.pipeline.assembly.video_assembler
"""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from bookreel.core.exceptions import CodecError, InputValidationError, MediaToolError
from bookreel.services.pipeline.assembly import ClipInput, RenderOptions, VideoAssembler

MODULE = "bookreel.services.pipeline.assembly.video_assembler"


class RecordingFFmpeg:
    """Stands in for run_ffmpeg: records commands and writes their outputs"""

    def __init__(self, fail_on_call=None, error=None, write_final=True):
        self.commands = []
        self.fail_on_call = fail_on_call
        self.error = error
        self.write_final = write_final
        self.captions = None

    async def __call__(self, command, timeout=None):
        self.commands.append(command)
        if self.fail_on_call == len(self.commands):
            raise self.error
        if command.filter_complex:
            srt = next(p for p in command.output.parent.parent.rglob("captions.srt"))
            self.captions = srt.read_text(encoding="utf-8")
            if not self.write_final:
                return ""
        command.output.write_bytes(b"\x00" * 2048)
        return ""


@pytest.fixture
def workspace(tmp_path):
    narration = tmp_path / "narration.mp3"
    narration.write_bytes(b"ID3" + b"\x00" * 2000)
    clips = [ClipInput(tmp_path / "a.mp4"), ClipInput(tmp_path / "b.jpg", kind="image")]
    assembler = VideoAssembler(output_dir=tmp_path / "videos", work_dir=tmp_path / "work")
    return assembler, narration, clips, tmp_path


@pytest.mark.asyncio
class TestVideoAssembler:
    """Test suite for VideoAssembler"""

    async def test_render(self, workspace):
        assembler, narration, clips, tmp_path = workspace
        ffmpeg = RecordingFFmpeg()
        tracked = []
        with patch(f"{MODULE}.read_duration", AsyncMock(return_value=12.0)), patch(f"{MODULE}.run_ffmpeg", ffmpeg):
            artifact = await assembler.assemble(narration, clips, "Hello world. This is a test.", track=tracked.append)

        assert artifact.path.parent == tmp_path / "videos"
        assert artifact.path.suffix == ".mp4"
        assert artifact.video_url == f"/videos/{artifact.path.name}"
        assert artifact.duration == 12.0
        assert artifact.file_size == 2048
        assert len(ffmpeg.commands) == 3

        clip_argv = ffmpeg.commands[0].argv()
        assert clip_argv[clip_argv.index("-t") + 1] == "6.000"
        image_argv = ffmpeg.commands[1].argv()
        assert image_argv[3:5] == ["-loop", "1"]

        assert ffmpeg.captions.startswith("1\n00:00:00,000 --> 00:00:06,000\nHello world.")
        assert not any((tmp_path / "work").iterdir())
        assert tracked and tracked[0].name.startswith("render_")

    async def test_render_options_flow_to_commands(self, workspace):
        assembler, narration, clips, _ = workspace
        ffmpeg = RecordingFFmpeg()
        options = RenderOptions(width=720, height=1280, fps=24, subtitle_font_size=56)
        with patch(f"{MODULE}.read_duration", AsyncMock(return_value=10.0)), patch(f"{MODULE}.run_ffmpeg", ffmpeg):
            await assembler.assemble(narration, clips[:1], "Hello.", options=options)

        assert "scale=720:1280" in ffmpeg.commands[0].argv()[ffmpeg.commands[0].argv().index("-vf") + 1]
        assert "FontSize=56" in ffmpeg.commands[1].filter_complex

    async def test_no_clips(self, workspace):
        assembler, narration, _, _ = workspace
        with pytest.raises(InputValidationError) as exc_info:
            await assembler.assemble(narration, [], "Hello.")
        assert exc_info.value.field == "clips"

    async def test_missing_narration(self, workspace):
        assembler, _, clips, tmp_path = workspace
        with pytest.raises(InputValidationError):
            await assembler.assemble(tmp_path / "absent.mp3", clips, "Hello.")

    async def test_failure_cleans_up(self, workspace):
        assembler, narration, clips, tmp_path = workspace
        ffmpeg = RecordingFFmpeg(fail_on_call=3, error=CodecError("no libx264"))
        with patch(f"{MODULE}.read_duration", AsyncMock(return_value=8.0)), patch(f"{MODULE}.run_ffmpeg", ffmpeg):
            with pytest.raises(CodecError):
                await assembler.assemble(narration, clips, "Hello.")

        assert not any((tmp_path / "work").iterdir())
        assert list((tmp_path / "videos").iterdir()) == []

    async def test_missing_output(self, workspace):
        assembler, narration, clips, _ = workspace
        ffmpeg = RecordingFFmpeg(write_final=False)
        with patch(f"{MODULE}.read_duration", AsyncMock(return_value=8.0)), patch(f"{MODULE}.run_ffmpeg", ffmpeg):
            with pytest.raises(MediaToolError, match="without producing"):
                await assembler.assemble(narration, clips, "Hello.")

    async def test_run_wraps_failure(self, workspace):
        assembler, narration, _, _ = workspace
        result = await assembler.run(narration, [], "Hello.")
        assert result.ok is False
        assert isinstance(result.error, InputValidationError)


class TestClipInput:
    """Test suite for ClipInput"""

    def test_kind_from_extension(self):
        assert ClipInput.from_path(Path("x.MP4")).is_image is False
        assert ClipInput.from_path(Path("x.jpg")).is_image is True
