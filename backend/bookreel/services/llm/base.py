"""
Base classes for LLM providers

Defines the abstract interface that all text-completion providers implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ProviderType(str, Enum):
    """Supported LLM providers"""
    GEMINI = "gemini"
    OLLAMA = "ollama"


@dataclass
class LLMConfig:
    """Configuration for an LLM request"""
    model: str
    temperature: float = 0.7
    max_tokens: Optional[int] = None
    system_instruction: Optional[str] = None
    timeout: float = 60.0

    # Provider-specific options
    extra_options: Dict[str, Any] = field(default_factory=dict)


@dataclass
class UsageStats:
    """Token usage statistics"""
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0

    def __post_init__(self):
        if self.total_tokens == 0:
            self.total_tokens = self.input_tokens + self.output_tokens


@dataclass
class LLMResponse:
    """Unified response from any LLM provider"""
    text: str
    model: str
    provider: ProviderType
    usage: Optional[UsageStats] = None
    raw_response: Any = None


class LLMProvider(ABC):
    """Abstract base class for LLM providers"""

    provider_type: ProviderType

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate a completion for ``prompt``

        Raises:
            ConfigurationError: Provider is not configured
            UpstreamError: The provider call failed
        """

    @abstractmethod
    def is_available(self) -> bool:
        """True if the provider is configured and can be called"""

    @abstractmethod
    def list_models(self) -> List[str]:
        """Model names this provider can serve"""

    def resolve_model(self, model: str) -> str:
        """Translate a configured model name to one this provider serves"""
        return model

    @property
    def name(self) -> str:
        return self.provider_type.value
