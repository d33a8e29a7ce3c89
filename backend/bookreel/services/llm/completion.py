"""
Text completion service

Runs a prompt through every configured LLM provider in order until one
returns non-empty text.
"""

from typing import List, Optional

from ...config.models import ModelConfig
from ...core.exceptions import ConfigurationError, UpstreamError
from ..pipeline.fallback import FallbackChain, Provider
from ..pipeline.results import StageFailure, StageSuccess
from .base import LLMConfig, LLMProvider, LLMResponse
from .factory import get_completion_providers


class CompletionService:
    """Prompt in, text out, across the provider fallback chain"""

    def __init__(self, providers: Optional[List[LLMProvider]] = None):
        self._providers = providers

    @property
    def providers(self) -> List[LLMProvider]:
        if self._providers is None:
            return get_completion_providers()
        return self._providers

    def is_configured(self) -> bool:
        return bool(self.providers)

    @staticmethod
    def config_for(model: ModelConfig, system_instruction: Optional[str] = None, **overrides) -> LLMConfig:
        return LLMConfig(
            model=model.model_name,
            temperature=overrides.get("temperature", model.temperature),
            max_tokens=overrides.get("max_tokens", model.max_output_tokens),
            system_instruction=system_instruction,
        )

    async def complete(self, prompt: str, config: LLMConfig) -> LLMResponse:
        """Return the first non-empty completion

        Raises:
            ConfigurationError: No provider is configured
            UpstreamError: Every provider failed or returned nothing
        """
        providers = self.providers
        if not providers:
            raise ConfigurationError(
                "No LLM provider configured. Set GEMINI_API_KEY or OLLAMA_HOST.",
                service="llm",
            )

        async def _call(provider: LLMProvider) -> LLMResponse:
            response = await provider.generate(prompt, config)
            if not response.text.strip():
                raise UpstreamError(f"{provider.name} returned an empty completion", provider.name)
            return response

        chain = FallbackChain(
            "completion",
            [Provider(p.name, lambda p=p: _call(p)) for p in providers],
        )
        match await chain.run():
            case StageSuccess(value=response):
                return response
            case StageFailure(error=error):
                raise error
