"""
Package Exporter

Bundles narration, captions, storyboard and instructions into one zip for
manual editing. Every input is validated before any entry is generated, so a
bad request never produces a partial archive.
"""

import base64
import binascii
import io
import zipfile
from dataclasses import dataclass
from typing import Optional, Union

from ....core.exceptions import InputValidationError
from ....core.logging import get_logger
from ..storyboard import StoryboardGenerator
from ..subtitles import align_to_srt
from .instructions import create_instructions

logger = get_logger(__name__, component="package_exporter")

PACKAGE_FILENAME = "capcut_assets.zip"
PACKAGE_CONTENT_TYPE = "application/zip"
AUDIO_ENTRY = "narration.mp3"
CAPTIONS_ENTRY = "captions.srt"
STORYBOARD_ENTRY = "storyboard.txt"
INSTRUCTIONS_ENTRY = "instructions.md"
STORYBOARD_SCENES = 8


@dataclass(frozen=True)
class ExportPackage:
    content: bytes
    filename: str = PACKAGE_FILENAME
    content_type: str = PACKAGE_CONTENT_TYPE

    @property
    def size(self) -> int:
        return len(self.content)


def decode_audio(audio: Union[bytes, str, None]) -> bytes:
    """Raw bytes pass through; strings are strict base64"""
    if audio is None or len(audio) == 0:
        raise InputValidationError("Voice audio is required", field="voice_audio")
    if isinstance(audio, bytes):
        return audio
    try:
        decoded = base64.b64decode(audio.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InputValidationError("Invalid audio data", field="voice_audio") from exc
    if not decoded:
        raise InputValidationError("Invalid audio data", field="voice_audio")
    return decoded


def parse_duration(duration: Union[int, float, str]) -> int:
    try:
        seconds = int(float(duration))
    except (TypeError, ValueError) as exc:
        raise InputValidationError("Duration must be a number of seconds", field="duration") from exc
    if seconds <= 0:
        raise InputValidationError("Duration must be positive", field="duration")
    return seconds


class PackageExporter:
    def __init__(self, storyboard: Optional[StoryboardGenerator] = None):
        self.storyboard = storyboard or StoryboardGenerator()

    async def export(
        self,
        title: str,
        description: str,
        tone: str,
        duration: Union[int, float, str],
        script: str,
        audio: Union[bytes, str, None],
    ) -> ExportPackage:
        """
        Raises:
            InputValidationError: Missing title, script or audio, bad base64
                audio, or a non-numeric duration
        """
        title = (title or "").strip()
        script = (script or "").strip()
        if not title:
            raise InputValidationError("Title is required", field="title")
        if not script:
            raise InputValidationError("Script is required", field="script")
        audio_bytes = decode_audio(audio)
        seconds = parse_duration(duration)
        description = (description or "").strip()

        logger.info(
            "Building export package",
            extra={"title": title, "duration": seconds, "audio_bytes": len(audio_bytes), "script_chars": len(script)},
        )

        captions = align_to_srt(script, seconds)
        storyboard = await self.storyboard.generate(
            title=title,
            description=description,
            script=script,
            tone=tone,
            duration=seconds,
            scene_count=STORYBOARD_SCENES,
        )
        instructions = create_instructions(title, description, tone, seconds, script)

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9) as archive:
            archive.writestr(AUDIO_ENTRY, audio_bytes)
            archive.writestr(CAPTIONS_ENTRY, captions)
            archive.writestr(STORYBOARD_ENTRY, storyboard)
            archive.writestr(INSTRUCTIONS_ENTRY, instructions)

        package = ExportPackage(content=buffer.getvalue())
        logger.info("Export package ready", extra={"package_bytes": package.size})
        return package
