"""
Tests for bookreel.services.pipeline.storyboard
"""

from datetime import datetime

import pytest

from bookreel.models import Tone
from bookreel.services.llm.base import LLMProvider, LLMResponse, ProviderType
from bookreel.services.llm.completion import CompletionService
from bookreel.services.pipeline.storyboard import (
    STOCK_FOOTAGE_LIBRARY,
    StoryboardGenerator,
    build_template_scenes,
    format_storyboard,
    format_timestamp,
    library_for,
    split_sentences,
    visual_notes,
)

SCRIPT = (
    "Stop scrolling. Your habits shape your future. Small changes add up. "
    "One percent better every day. Read Atomic Habits today."
)


class CannedProvider(LLMProvider):
    provider_type = ProviderType.OLLAMA

    def __init__(self, text):
        self.text = text

    async def generate(self, prompt, config=None, **kwargs):
        return LLMResponse(text=self.text, model="fake", provider=self.provider_type)

    def is_available(self):
        return True

    def list_models(self):
        return ["fake"]


class TestLibrary:
    """Test suite for the curated footage library"""

    def test_tone_lookup_case_insensitive(self):
        assert library_for("Calm") is STOCK_FOOTAGE_LIBRARY["calm"]

    def test_unknown_tone_uses_motivational(self):
        assert library_for("whimsical") is STOCK_FOOTAGE_LIBRARY["motivational"]

    def test_notes_by_position(self):
        assert visual_notes(0, 5).startswith("Hook shot")
        assert visual_notes(4, 5).startswith("CTA shot")
        assert visual_notes(1, 5).startswith("Medium shot")


class TestTemplateScenes:
    """Test suite for build_template_scenes"""

    def test_one_scene_per_sentence(self):
        scenes = build_template_scenes(SCRIPT, Tone.MOTIVATIONAL, 30)
        assert len(scenes) == 5
        assert [s.number for s in scenes] == [1, 2, 3, 4, 5]
        assert scenes[0].start == 0
        assert scenes[-1].end == 30
        assert all(s.duration == 6 for s in scenes)

    def test_scene_count_caps_sentences(self):
        assert len(build_template_scenes(SCRIPT, Tone.CALM, 30, scene_count=3)) == 3

    def test_opening_and_closing(self):
        scenes = build_template_scenes(SCRIPT, Tone.MOTIVATIONAL, 30)
        assert scenes[0].description.startswith("OPENING HOOK: Person climbing rocky mountain")
        assert 'Bold text overlay appears: "Stop scrolling..."' in scenes[0].description
        assert scenes[0].search_terms[-1] == "cinematic opening"
        assert scenes[-1].description.startswith("CLOSING CTA:")
        assert scenes[-1].search_terms[-1] == "inspirational ending"
        assert 'Caption overlay: "Your habits shape your future..."' in scenes[1].description

    def test_library_rotates(self):
        scenes = build_template_scenes(SCRIPT, "Emotional", 30)
        assert scenes[2].description.startswith("Parent and child holding hands")

    def test_empty_script_gives_single_scene(self):
        scenes = build_template_scenes("", Tone.CALM, 45)
        assert len(scenes) == 1
        assert scenes[0].end == 45

    def test_render(self):
        scene = build_template_scenes(SCRIPT, Tone.MOTIVATIONAL, 30)[1]
        lines = scene.render().split("\n")
        assert lines[0] == "SCENE 2: 00:06-00:12"
        assert lines[2].startswith("STOCK SEARCH: running motivation, athlete training")
        assert lines[-1] == "---"

    def test_deterministic(self):
        first = StoryboardGenerator.generate_from_template("T", "d", SCRIPT, "Calm", 30, 8)
        second = StoryboardGenerator.generate_from_template("T", "d", SCRIPT, "Calm", 30, 8)
        assert first == second


class TestReport:
    """Test suite for the storyboard document"""

    def test_timestamp(self):
        assert format_timestamp(0, 5.9) == "00:00-00:05"
        assert format_timestamp(59.5, 75) == "00:59-01:15"

    def test_split_sentences(self):
        assert split_sentences("One. Two!\nThree?") == ["One", "Two", "Three"]

    def test_document_sections(self):
        document = format_storyboard("Atomic Habits", "Small changes", "Motivational", 30, "SCENE 1: 00:00-00:30")
        assert "PROJECT: Atomic Habits" in document
        assert "DURATION: 30 seconds" in document
        assert "SCENES:\n\nSCENE 1: 00:00-00:30" in document
        assert "STOCK FOOTAGE SOURCING GUIDE:" in document
        assert "Generated:" not in document

    def test_timestamp_line_optional(self):
        document = format_storyboard("T", "d", "Calm", 30, "x", generated_at=datetime(2025, 1, 2, 3, 4, 5))
        assert "Generated: 2025-01-02 03:04:05" in document


@pytest.mark.asyncio
class TestStoryboardGenerator:
    """Test suite for StoryboardGenerator"""

    async def test_llm_content_used(self):
        content = "SCENE 1: 00:00-00:05\nVISUAL: Sunrise over mountains\nSTOCK SEARCH: sunrise\nNOTES: hook\n---"
        generator = StoryboardGenerator(CompletionService([CannedProvider(content)]))
        result = await generator.run("T", "d", SCRIPT, Tone.CALM, 30)
        assert result.source == "ai"
        assert result.value == content

    async def test_short_llm_output_falls_back(self):
        generator = StoryboardGenerator(CompletionService([CannedProvider("Too short")]))
        result = await generator.run("T", "d", SCRIPT, Tone.CALM, 30)
        assert result.source == "template"
        assert result.value.startswith("SCENE 1: 00:00-00:06")

    async def test_no_provider_document(self):
        document = await StoryboardGenerator(CompletionService([])).generate(
            "Atomic Habits", "Small changes", SCRIPT, Tone.MOTIVATIONAL, 30
        )
        assert document.count("SCENE ") == 5
        assert "TONE: Motivational" in document
