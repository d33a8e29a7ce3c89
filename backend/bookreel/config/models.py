"""
Model Configuration for Pipeline Steps

Each LLM-backed pipeline step has its own model configuration so wording
quality can be tuned per step without touching the step itself.

=== PROVIDER CONFIGURATION ===

Set LLM_PROVIDER environment variable to choose the preferred provider:
    - "gemini" : Google Gemini API (requires GEMINI_API_KEY)
    - "ollama" : Local Ollama models (OLLAMA_HOST, default http://localhost:11434)

Other configured providers are still tried, in order, when the preferred
one fails.
"""

import os
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class ModelConfig:
    """Configuration for a single LLM-backed step"""
    model_name: str
    temperature: float = 0.7
    max_output_tokens: Optional[int] = None
    ollama_model: Optional[str] = None
    description: str = ""


_DEFAULT_GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
_DEFAULT_OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "gemma3:12b")


PIPELINE_MODELS: Dict[str, ModelConfig] = {
    "script_generation": ModelConfig(
        model_name=_DEFAULT_GEMINI_MODEL,
        temperature=0.8,
        ollama_model=_DEFAULT_OLLAMA_MODEL,
        description="Narration script for the standard format",
    ),
    "script_generation_punchy": ModelConfig(
        model_name=_DEFAULT_GEMINI_MODEL,
        temperature=0.9,
        ollama_model=_DEFAULT_OLLAMA_MODEL,
        description="Caption-first script, one short sentence per line",
    ),
    "storyboard_generation": ModelConfig(
        model_name=_DEFAULT_GEMINI_MODEL,
        temperature=0.7,
        max_output_tokens=1500,
        ollama_model=_DEFAULT_OLLAMA_MODEL,
        description="Stock-footage friendly scene plan",
    ),
}


def get_model_config(step: str) -> ModelConfig:
    """Get the model configuration for a pipeline step

    Raises:
        KeyError: If the step has no configuration
    """
    return PIPELINE_MODELS[step]
