"""
Storyboard Generator

Turns a brief and its script into a scene plan for sourcing stock footage.
The LLM is asked for the scenes first; when it is unavailable or answers
with too little, scenes are drawn round-robin from the curated library.
Either way the scenes are wrapped in the same report.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple, Union

from ....config.models import get_model_config
from ....core.exceptions import UpstreamError
from ....core.logging import get_logger
from ....models.generation import Tone
from ...llm.completion import CompletionService
from ..fallback import FallbackChain, Provider
from ..results import StageResult
from .library import library_for, visual_notes
from .report import format_storyboard, format_timestamp

logger = get_logger(__name__, component="storyboard_generator")

DEFAULT_SCENE_COUNT = 8
MIN_STORYBOARD_CHARS = 50
_SENTENCE_SPLIT = re.compile(r"[.!?\n]+")

SYSTEM_PROMPT = (
    "You are a professional video storyboard artist specializing in stock footage sourcing. "
    "You create generic, copyright-free visual descriptions optimized for stock video platforms."
)

PROMPT = """Create a storyboard with {scene_count} visual scenes for a {duration}-second {tone} video about "{title}".

Script: "{script}"

Tone: {tone}
Description: {description}

CRITICAL REQUIREMENTS:
- Each scene MUST use generic, stock footage-friendly descriptions
- NO copyrighted characters, brands, or logos
- Use searchable terms like "person climbing mountain", "sunrise over ocean", "hands holding plant"
- Focus on universal, relatable visuals
- Optimize for Pexels/Unsplash search terms

For each scene, provide:
1. Scene number
2. Timestamp (format: 00:00-00:05)
3. Generic visual description (stock footage friendly)
4. Stock search terms (3-5 keywords for finding footage)
5. Shot notes (camera angles, text overlays)

Make it engaging, visual, and optimized for short-form video (TikTok/Reels/Shorts).

Format each scene as:
SCENE [number]: [timestamp]
VISUAL: [generic stock-friendly description]
STOCK SEARCH: [keyword1, keyword2, keyword3]
NOTES: [shot notes]
---"""


@dataclass(frozen=True)
class StoryboardScene:
    number: int
    start: float
    end: float
    description: str
    search_terms: Tuple[str, ...]
    notes: str

    @property
    def timestamp(self) -> str:
        return format_timestamp(self.start, self.end)

    @property
    def duration(self) -> float:
        return self.end - self.start

    def render(self) -> str:
        return (
            f"SCENE {self.number}: {self.timestamp}\n"
            f"VISUAL: {self.description}\n"
            f"STOCK SEARCH: {', '.join(self.search_terms)}\n"
            f"NOTES: {self.notes}\n"
            "---"
        )


def split_sentences(script: str) -> List[str]:
    return [s.strip() for s in _SENTENCE_SPLIT.split(script or "") if s.strip()]


def build_template_scenes(
    script: str,
    tone: Union[Tone, str],
    duration: float,
    scene_count: int = DEFAULT_SCENE_COUNT,
) -> List[StoryboardScene]:
    """Deterministic scene plan: one sentence per scene, library entries in rotation"""
    tone_name = tone.value if isinstance(tone, Tone) else str(tone)
    sentences = split_sentences(script) or [tone_name]
    total = max(1, min(scene_count, len(sentences)))
    scene_duration = duration / total
    library = library_for(tone_name)

    scenes = []
    for index in range(total):
        text = sentences[index]
        entry = library[index % len(library)]
        terms = entry.search_terms
        if index == 0:
            description = f'OPENING HOOK: {entry.description}. Bold text overlay appears: "{text[:40]}..."'
            terms = terms + ("cinematic opening",)
        elif index == total - 1:
            description = f"CLOSING CTA: {entry.description}. Strong call-to-action text overlay with follow button"
            terms = terms + ("inspirational ending",)
        else:
            description = f'{entry.description}. Caption overlay: "{text[:50]}..."'

        scenes.append(
            StoryboardScene(
                number=index + 1,
                start=index * scene_duration,
                end=(index + 1) * scene_duration,
                description=description,
                search_terms=terms,
                notes=visual_notes(index, total),
            )
        )
    return scenes


class StoryboardGenerator:
    def __init__(self, completion: Optional[CompletionService] = None):
        self.completion = completion or CompletionService()

    async def generate(
        self,
        title: str,
        description: str,
        script: str,
        tone: Union[Tone, str],
        duration: int,
        scene_count: int = DEFAULT_SCENE_COUNT,
        generated_at: Optional[datetime] = None,
    ) -> str:
        """Storyboard document; falls back to the template, so never fails on generation"""
        content = (await self.run(title, description, script, tone, duration, scene_count)).unwrap()
        tone_name = tone.value if isinstance(tone, Tone) else str(tone)
        return format_storyboard(title, description, tone_name, duration, content, generated_at)

    async def run(
        self,
        title: str,
        description: str,
        script: str,
        tone: Union[Tone, str],
        duration: int,
        scene_count: int = DEFAULT_SCENE_COUNT,
    ) -> StageResult[str]:
        """Scene content without the surrounding report"""
        chain = FallbackChain(
            "storyboard",
            [
                Provider("ai", self._generate_with_llm),
                Provider("template", self.generate_from_template),
            ],
        )
        result = await chain.run(title, description, script, tone, duration, scene_count)
        if result.ok:
            logger.info("Storyboard ready", extra={"source": result.source, "scene_count": scene_count})
        return result

    async def _generate_with_llm(
        self, title: str, description: str, script: str, tone, duration: int, scene_count: int
    ) -> str:
        tone_name = tone.value if isinstance(tone, Tone) else str(tone)
        prompt = PROMPT.format(
            scene_count=scene_count,
            duration=duration,
            tone=tone_name.lower(),
            title=title,
            script=script,
            description=description,
        )
        config = self.completion.config_for(get_model_config("storyboard_generation"), system_instruction=SYSTEM_PROMPT)
        response = await self.completion.complete(prompt, config)

        content = response.text.strip()
        if len(content) < MIN_STORYBOARD_CHARS:
            raise UpstreamError(
                f"Storyboard completion too short ({len(content)} characters)",
                service=response.provider.value,
            )
        return content

    @staticmethod
    def generate_from_template(
        title: str, description: str, script: str, tone, duration: int, scene_count: int
    ) -> str:
        scenes = build_template_scenes(script, tone, duration, scene_count)
        return "\n\n".join(scene.render() for scene in scenes)
