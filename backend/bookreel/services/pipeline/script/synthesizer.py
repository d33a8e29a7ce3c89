"""
Script Synthesizer

Produces narration text from a brief. The LLM path is tried first; any
failure there (no provider, auth, rate limit, empty or unusable output)
falls through to a deterministic template, so synthesis always succeeds.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ....config.models import get_model_config
from ....core.exceptions import UpstreamError
from ....core.logging import get_logger
from ....models.generation import Tone
from ...llm.completion import CompletionService
from ..fallback import FallbackChain, Provider
from ..results import StageResult
from . import templates
from .keywords import extract_keywords

logger = get_logger(__name__, component="script_synthesizer")

_SENTENCE_BREAK = re.compile(r"[.!?]+")
MAX_SCENES = 5
MIN_SCENE_CHARS = 10


@dataclass(frozen=True)
class ScriptResult:
    script: str
    keywords: Tuple[str, ...]
    scenes: Tuple[str, ...] = ()
    format: str = "standard"  # "standard" | "capcut"
    source: str = "template"  # "ai" | "template"

    @property
    def word_count(self) -> int:
        return len(self.script.split())


def estimate_word_count(duration: float) -> int:
    """Narration words for ``duration`` seconds at 150 words per minute"""
    return int(duration * templates.WORDS_PER_MINUTE / 60)


def punchy_word_target(duration: float) -> int:
    return int(estimate_word_count(duration) * templates.PUNCHY_WORD_FACTOR)


def enforce_punchy_format(script: str, max_words: int = templates.MAX_WORDS_PER_LINE) -> str:
    """One sentence per line, no line longer than ``max_words`` words.

    Long sentences are cut into consecutive chunks of ``max_words`` words.
    """
    lines = []
    for sentence in _SENTENCE_BREAK.split(script):
        words = sentence.split()
        for i in range(0, len(words), max_words):
            lines.append(" ".join(words[i:i + max_words]))
    return "\n".join(lines)


def wrap_lines(script: str, max_words: int = templates.MAX_WORDS_PER_LINE) -> str:
    """Chunk each existing line to ``max_words`` words, punctuation left in place"""
    lines = []
    for line in script.split("\n"):
        words = line.split()
        for i in range(0, len(words), max_words):
            lines.append(" ".join(words[i:i + max_words]))
    return "\n".join(lines)


def split_scenes(script: str) -> Tuple[str, ...]:
    sentences = [s.strip() for s in re.split(r"(?<=[.!?])\s+|\n+", script)]
    return tuple(s for s in sentences if len(s) > MIN_SCENE_CHARS)[:MAX_SCENES]


def first_clause(description: str, limit: int = 150) -> str:
    clause = description.split(".")[0]
    clause = clause.replace("<", "").replace(">", "")
    return clause[:limit].strip()


class ScriptSynthesizer:
    """Brief in, narration out"""

    def __init__(self, completion: Optional[CompletionService] = None):
        self.completion = completion or CompletionService()

    async def synthesize(
        self,
        title: str,
        description: str,
        tone: Union[Tone, str],
        duration: int,
        punchy: bool = False,
    ) -> ScriptResult:
        """Never raises for generation failures; the template path always answers."""
        return (await self.run(title, description, tone, duration, punchy)).unwrap()

    async def run(
        self,
        title: str,
        description: str,
        tone: Union[Tone, str],
        duration: int,
        punchy: bool = False,
    ) -> StageResult[ScriptResult]:
        chain = FallbackChain(
            "script",
            [
                Provider("ai", self._generate_with_llm),
                Provider("template", self.generate_from_template),
            ],
        )
        result = await chain.run(title, description, Tone(tone), duration, punchy)
        if result.ok:
            script = result.value
            logger.info(
                "Script ready",
                extra={"source": script.source, "format": script.format, "words": script.word_count},
            )
        return result

    async def _generate_with_llm(
        self, title: str, description: str, tone: Tone, duration: int, punchy: bool
    ) -> ScriptResult:
        if punchy:
            target = punchy_word_target(duration)
            model = get_model_config("script_generation_punchy")
            prompt_template, system = templates.PUNCHY_PROMPT, templates.PUNCHY_SYSTEM_PROMPT
        else:
            target = estimate_word_count(duration)
            model = get_model_config("script_generation")
            prompt_template, system = templates.STANDARD_PROMPT, templates.STANDARD_SYSTEM_PROMPT

        prompt = prompt_template.format(
            duration=duration,
            tone=tone.value.lower(),
            title=title,
            description=description,
            target_words=target,
            tone_instruction=templates.TONE_INSTRUCTIONS[tone],
        )
        config = self.completion.config_for(model, system_instruction=system, max_tokens=int(target * 1.5))
        response = await self.completion.complete(prompt, config)

        script = response.text.strip()
        if punchy:
            script = enforce_punchy_format(script)
        if not script:
            raise UpstreamError("LLM returned an unusable script", service=response.provider.value)

        return self._result(script, title, punchy, source="ai")

    def generate_from_template(
        self, title: str, description: str, tone: Tone, duration: int, punchy: bool
    ) -> ScriptResult:
        """Deterministic script built from tone-keyed fragments"""
        tone = Tone(tone)
        if punchy:
            # The title is caller text, so the climax line can run long
            script = wrap_lines("\n".join([
                templates.PUNCHY_HOOKS[tone][0],
                templates.PUNCHY_BUILDS[tone][0],
                templates.PUNCHY_BUILDS[tone][1],
                templates.PUNCHY_CLIMAX.format(title=title),
                templates.PUNCHY_CLOSINGS[tone][0],
            ]))
        else:
            clause = first_clause(description)
            middle = f"This book teaches you {clause.lower()}." if clause else templates.DEFAULT_MIDDLE
            script = " ".join([
                templates.STANDARD_INTROS[tone].format(title=title),
                middle,
                templates.STANDARD_CLOSINGS[tone],
            ])
        return self._result(script, title, punchy, source="template")

    @staticmethod
    def _result(script: str, title: str, punchy: bool, source: str) -> ScriptResult:
        return ScriptResult(
            script=script,
            keywords=tuple(extract_keywords(script, title)),
            scenes=split_scenes(script),
            format="capcut" if punchy else "standard",
            source=source,
        )
