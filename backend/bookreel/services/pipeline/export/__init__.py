"""
Package Exporter - zip bundle for manual editing
"""

from .instructions import create_instructions
from .package_exporter import (
    AUDIO_ENTRY,
    CAPTIONS_ENTRY,
    INSTRUCTIONS_ENTRY,
    PACKAGE_CONTENT_TYPE,
    PACKAGE_FILENAME,
    STORYBOARD_ENTRY,
    ExportPackage,
    PackageExporter,
    decode_audio,
    parse_duration,
)

__all__ = [
    "create_instructions",
    "AUDIO_ENTRY",
    "CAPTIONS_ENTRY",
    "INSTRUCTIONS_ENTRY",
    "PACKAGE_CONTENT_TYPE",
    "PACKAGE_FILENAME",
    "STORYBOARD_ENTRY",
    "ExportPackage",
    "PackageExporter",
    "decode_audio",
    "parse_duration",
]
