"""
Ollama LLM Provider

Implementation of LLMProvider for local models served by Ollama.
"""

from typing import Any, Dict, List, Optional

import httpx

from ...config import OLLAMA_HOST
from ...core.exceptions import UpstreamError
from ...core.logging import get_logger
from .base import LLMConfig, LLMProvider, LLMResponse, ProviderType, UsageStats

logger = get_logger(__name__, component="ollama_provider")


class OllamaProvider(LLMProvider):
    """Ollama provider for local models (gemma3, llama, mistral, ...)"""

    provider_type = ProviderType.OLLAMA

    DEFAULT_MODEL = "gemma3:12b"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Ollama provider

        Args:
            base_url: Ollama server URL. Defaults to OLLAMA_HOST
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self.base_url = (base_url or OLLAMA_HOST).rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._available_models: Optional[List[str]] = None

    def is_available(self) -> bool:
        """Configured whenever a host is set; reachability is checked per call"""
        return bool(self.base_url)

    def list_models(self) -> List[str]:
        return self._available_models or [self.DEFAULT_MODEL]

    def resolve_model(self, model: str) -> str:
        # Gemini names mean "use the local default"
        return self.DEFAULT_MODEL if model.startswith("gemini") else model

    def _build_options(self, config: LLMConfig) -> Dict[str, Any]:
        options: Dict[str, Any] = {"temperature": config.temperature}
        if config.max_tokens:
            options["num_predict"] = config.max_tokens
        options.update(config.extra_options)
        return options

    def _parse_response(self, data: Dict[str, Any], model: str) -> LLMResponse:
        usage = None
        if "prompt_eval_count" in data or "eval_count" in data:
            usage = UsageStats(
                input_tokens=data.get("prompt_eval_count", 0),
                output_tokens=data.get("eval_count", 0),
            )
        return LLMResponse(
            text=(data.get("response") or "").strip(),
            model=model,
            provider=self.provider_type,
            usage=usage,
            raw_response=data,
        )

    async def generate(
        self,
        prompt: str,
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        config = config or LLMConfig(model=self.DEFAULT_MODEL)
        model = self.resolve_model(kwargs.get("model", config.model))

        payload: Dict[str, Any] = {
            "model": model,
            "prompt": prompt,
            "stream": False,
            "options": self._build_options(config),
        }
        if config.system_instruction:
            payload["system"] = config.system_instruction

        try:
            async with httpx.AsyncClient(
                timeout=min(self.timeout, config.timeout), transport=self._transport
            ) as client:
                response = await client.post(f"{self.base_url}/api/generate", json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            raise UpstreamError(
                f"Ollama returned {exc.response.status_code}", "ollama", exc.response.status_code
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Ollama request failed: {exc}", "ollama") from exc

        return self._parse_response(data, model)
