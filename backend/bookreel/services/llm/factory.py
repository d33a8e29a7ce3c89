"""
LLM Provider Factory

Creates and caches provider instances and builds the ordered completion chain.
"""

import os
from typing import Dict, List, Optional

from ...config import GEMINI_API_KEY
from .base import LLMProvider, ProviderType
from .gemini_provider import GeminiProvider
from .ollama_provider import OllamaProvider


_provider_cache: Dict[ProviderType, LLMProvider] = {}


def get_default_provider_type() -> ProviderType:
    """Preferred provider: LLM_PROVIDER if set, else Gemini when a key exists, else Ollama"""
    provider_env = os.getenv("LLM_PROVIDER", "").lower()
    if provider_env == "ollama":
        return ProviderType.OLLAMA
    if provider_env == "gemini":
        return ProviderType.GEMINI
    if os.getenv("GEMINI_API_KEY") or GEMINI_API_KEY:
        return ProviderType.GEMINI
    return ProviderType.OLLAMA


def get_llm_provider(
    provider_type: Optional[ProviderType] = None,
    use_cache: bool = True,
) -> LLMProvider:
    """Get an LLM provider instance

    Raises:
        ValueError: Unknown provider type
    """
    if provider_type is None:
        provider_type = get_default_provider_type()

    if use_cache and provider_type in _provider_cache:
        return _provider_cache[provider_type]

    provider: LLMProvider
    if provider_type == ProviderType.GEMINI:
        provider = GeminiProvider(api_key=os.getenv("GEMINI_API_KEY"))
    elif provider_type == ProviderType.OLLAMA:
        provider = OllamaProvider(base_url=os.getenv("OLLAMA_HOST"))
    else:
        raise ValueError(f"Unknown provider type: {provider_type}")

    if use_cache:
        _provider_cache[provider_type] = provider
    return provider


def get_provider_order() -> List[ProviderType]:
    """All provider types, preferred one first"""
    preferred = get_default_provider_type()
    return [preferred] + [p for p in ProviderType if p != preferred]


def get_completion_providers() -> List[LLMProvider]:
    """Configured providers in fallback order

    Ollama only joins the chain when it is the preferred provider or
    OLLAMA_HOST is set explicitly, so an unconfigured host never adds a
    slow connection failure to every request.
    """
    providers = []
    for provider_type in get_provider_order():
        if (
            provider_type == ProviderType.OLLAMA
            and get_default_provider_type() != ProviderType.OLLAMA
            and not os.getenv("OLLAMA_HOST")
        ):
            continue
        provider = get_llm_provider(provider_type)
        if provider.is_available():
            providers.append(provider)
    return providers


def clear_provider_cache():
    _provider_cache.clear()
