"""
GenerateScriptUseCase - narration for a brief, without voice or video
"""

from typing import Optional

from ...models.generation import ScriptRequest, ScriptResponse
from ..pipeline.script import ScriptSynthesizer
from .base import UseCase


class GenerateScriptUseCase(UseCase[ScriptRequest, ScriptResponse]):
    def __init__(self, synthesizer: Optional[ScriptSynthesizer] = None):
        self.synthesizer = synthesizer or ScriptSynthesizer()

    async def execute(self, request: ScriptRequest) -> ScriptResponse:
        result = await self.synthesizer.synthesize(
            title=request.title,
            description=request.description,
            tone=request.tone,
            duration=request.duration,
            punchy=request.punchy,
        )
        return ScriptResponse(
            script=result.script,
            keywords=list(result.keywords),
            format=result.format,
            source=result.source,
            scenes=list(result.scenes),
            word_count=result.word_count,
        )
