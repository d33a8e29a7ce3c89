"""
Tests for the Gemini and Ollama providers
"""

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest

from bookreel.core.exceptions import ConfigurationError, UpstreamError
from bookreel.services.llm.base import LLMConfig, ProviderType
from bookreel.services.llm.gemini_provider import GeminiProvider
from bookreel.services.llm.ollama_provider import OllamaProvider


@pytest.mark.asyncio
class TestGeminiProvider:
    """Test suite for GeminiProvider with an injected client"""

    async def test_generate(self):
        client = MagicMock()
        client.models.generate_content.return_value = SimpleNamespace(
            text="  A script.  ",
            usage_metadata=SimpleNamespace(prompt_token_count=10, candidates_token_count=5),
        )
        provider = GeminiProvider(client=client)

        response = await provider.generate("prompt", LLMConfig(model="gemini-2.5-pro", system_instruction="sys"))

        assert response.text == "A script."
        assert response.model == "gemini-2.5-pro"
        assert response.provider is ProviderType.GEMINI
        assert response.usage.total_tokens == 15
        kwargs = client.models.generate_content.call_args.kwargs
        assert kwargs["contents"] == "prompt"
        assert kwargs["config"].system_instruction == "sys"

    async def test_non_gemini_model_resolved(self):
        client = MagicMock()
        client.models.generate_content.return_value = SimpleNamespace(text="ok", usage_metadata=None)
        response = await GeminiProvider(client=client).generate("p", LLMConfig(model="gemma3:12b"))
        assert response.model == GeminiProvider.DEFAULT_MODEL

    async def test_unconfigured(self):
        provider = GeminiProvider(api_key="")
        assert provider.is_available() is False
        with pytest.raises(ConfigurationError):
            await provider.generate("p")


def _ollama_transport(captured, status=200, body=None):
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(status, json=body if body is not None else {})
    return httpx.MockTransport(handler)


@pytest.mark.asyncio
class TestOllamaProvider:
    """Test suite for OllamaProvider against a mock transport"""

    async def test_generate(self):
        captured = []
        transport = _ollama_transport(
            captured, body={"response": " Local script ", "prompt_eval_count": 3, "eval_count": 4}
        )
        provider = OllamaProvider(base_url="http://ollama:11434/", transport=transport)

        response = await provider.generate(
            "prompt", LLMConfig(model="gemini-2.5-flash", max_tokens=50, system_instruction="sys")
        )

        assert response.text == "Local script"
        assert response.model == OllamaProvider.DEFAULT_MODEL
        assert response.usage.total_tokens == 7
        request = captured[0]
        assert str(request.url) == "http://ollama:11434/api/generate"
        payload = json.loads(request.content)
        assert payload["stream"] is False
        assert payload["system"] == "sys"
        assert payload["options"]["num_predict"] == 50

    async def test_http_error(self):
        provider = OllamaProvider(base_url="http://ollama:11434", transport=_ollama_transport([], status=500))
        with pytest.raises(UpstreamError) as exc_info:
            await provider.generate("prompt")
        assert exc_info.value.service == "ollama"
        assert exc_info.value.status_code == 500
