"""
Gemini LLM Provider

Implementation of LLMProvider for Google's Gemini models via google-genai.
"""

import asyncio
from typing import Any, List, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ...config import GEMINI_API_KEY
from ...core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    RateLimitError,
    UpstreamError,
)
from ...core.logging import get_logger
from .base import LLMConfig, LLMProvider, LLMResponse, ProviderType, UsageStats

logger = get_logger(__name__, component="gemini_provider")


class GeminiProvider(LLMProvider):
    """Google Gemini LLM Provider"""

    provider_type = ProviderType.GEMINI

    AVAILABLE_MODELS = [
        "gemini-2.5-flash",
        "gemini-2.5-pro",
        "gemini-flash-lite-latest",
        "gemini-2.0-flash",
    ]
    DEFAULT_MODEL = "gemini-2.5-flash"

    def __init__(self, api_key: Optional[str] = None, client: Any = None):
        """Initialize Gemini provider

        Args:
            api_key: Gemini API key. Defaults to GEMINI_API_KEY
            client: Pre-built genai client (tests)
        """
        self.api_key = api_key or GEMINI_API_KEY
        self.client = client
        if self.client is None and self.api_key:
            self.client = genai.Client(api_key=self.api_key)

    def is_available(self) -> bool:
        return self.client is not None

    def list_models(self) -> List[str]:
        return self.AVAILABLE_MODELS.copy()

    def resolve_model(self, model: str) -> str:
        return model if model.startswith("gemini") else self.DEFAULT_MODEL

    def _build_generation_config(self, config: LLMConfig) -> types.GenerateContentConfig:
        kwargs = {"temperature": config.temperature}
        if config.max_tokens:
            kwargs["max_output_tokens"] = config.max_tokens
        if config.system_instruction:
            kwargs["system_instruction"] = config.system_instruction
        return types.GenerateContentConfig(**kwargs)

    def _extract_usage(self, response: Any) -> Optional[UsageStats]:
        usage = getattr(response, "usage_metadata", None)
        if not usage:
            return None
        return UsageStats(
            input_tokens=getattr(usage, "prompt_token_count", 0) or 0,
            output_tokens=getattr(usage, "candidates_token_count", 0) or 0,
        )

    async def generate(
        self,
        prompt: str,
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        if not self.is_available():
            raise ConfigurationError("GEMINI_API_KEY is not configured", service="gemini")

        config = config or LLMConfig(model=self.DEFAULT_MODEL)
        model = self.resolve_model(kwargs.get("model", config.model))

        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(
                    self.client.models.generate_content,
                    model=model,
                    contents=prompt,
                    config=self._build_generation_config(config),
                ),
                timeout=config.timeout,
            )
        except asyncio.TimeoutError as exc:
            raise UpstreamError(
                f"Gemini request timed out after {config.timeout:.0f}s", service="gemini"
            ) from exc
        except genai_errors.APIError as exc:
            status = getattr(exc, "code", None)
            if status in (401, 403):
                raise AuthenticationError("Gemini rejected the API key", "gemini", status) from exc
            if status == 429:
                raise RateLimitError("Gemini rate limit exceeded", "gemini", status) from exc
            raise UpstreamError(f"Gemini API error: {exc}", "gemini", status) from exc

        logger.debug("Gemini completion received", extra={"model": model})
        return LLMResponse(
            text=response.text.strip() if response.text else "",
            model=model,
            provider=self.provider_type,
            usage=self._extract_usage(response),
            raw_response=response,
        )
