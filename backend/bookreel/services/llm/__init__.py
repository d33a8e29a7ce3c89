"""
LLM Service - Abstraction layer for text-completion providers

Providers:
- Gemini (google-genai)
- Ollama (local models over HTTP)

Usage:
    from bookreel.services.llm import CompletionService, LLMConfig

    service = CompletionService()
    response = await service.complete("Your prompt here", LLMConfig(model="gemini-2.5-flash"))
    print(response.text)
"""

from .base import (
    LLMProvider,
    LLMResponse,
    LLMConfig,
    ProviderType,
    UsageStats,
)
from .completion import CompletionService
from .factory import (
    get_llm_provider,
    get_default_provider_type,
    get_completion_providers,
    clear_provider_cache,
)
from .gemini_provider import GeminiProvider
from .ollama_provider import OllamaProvider

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "LLMConfig",
    "ProviderType",
    "UsageStats",
    "CompletionService",
    "GeminiProvider",
    "OllamaProvider",
    "get_llm_provider",
    "get_default_provider_type",
    "get_completion_providers",
    "clear_provider_cache",
]
