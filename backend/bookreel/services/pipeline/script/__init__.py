"""
Script Synthesizer - narration text from a brief
"""

from .keywords import extract_keywords
from .synthesizer import (
    ScriptResult,
    ScriptSynthesizer,
    enforce_punchy_format,
    estimate_word_count,
    punchy_word_target,
)

__all__ = [
    "ScriptResult",
    "ScriptSynthesizer",
    "enforce_punchy_format",
    "estimate_word_count",
    "punchy_word_target",
    "extract_keywords",
]
