"""
Storyboard Generator - scene plans for sourcing stock footage
"""

from .generator import (
    DEFAULT_SCENE_COUNT,
    MIN_STORYBOARD_CHARS,
    StoryboardGenerator,
    StoryboardScene,
    build_template_scenes,
    split_sentences,
)
from .library import STOCK_FOOTAGE_LIBRARY, FootageEntry, library_for, visual_notes
from .report import format_storyboard, format_timestamp

__all__ = [
    "DEFAULT_SCENE_COUNT",
    "MIN_STORYBOARD_CHARS",
    "StoryboardGenerator",
    "StoryboardScene",
    "build_template_scenes",
    "split_sentences",
    "STOCK_FOOTAGE_LIBRARY",
    "FootageEntry",
    "library_for",
    "visual_notes",
    "format_storyboard",
    "format_timestamp",
]
