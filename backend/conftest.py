import os
import tempfile
from pathlib import Path

import pytest

# Keep every test run away from real credentials and the real output tree.
# bookreel.config reads these once at import, so they are set before any test
# module imports the package; load_dotenv never overrides an existing value.
_TEST_ROOT = Path(tempfile.mkdtemp(prefix="bookreel-tests-"))
os.environ["OUTPUT_DIR"] = str(_TEST_ROOT / "outputs")
os.environ["BOOKREEL_TEMP_DIR"] = str(_TEST_ROOT / "tmp")
for _key in (
    "GEMINI_API_KEY",
    "ELEVENLABS_API_KEY",
    "PEXELS_API_KEY",
    "UNSPLASH_ACCESS_KEY",
    "OLLAMA_HOST",
    "LLM_PROVIDER",
):
    os.environ[_key] = ""


@pytest.fixture(autouse=True)
def offline_llm_env(monkeypatch):
    """No LLM provider is reachable unless a test injects one"""
    from bookreel.services.llm.factory import clear_provider_cache
    from bookreel.services.pipeline.audio import default_voice_cache

    monkeypatch.setenv("LLM_PROVIDER", "gemini")
    monkeypatch.setenv("GEMINI_API_KEY", "")
    monkeypatch.setenv("OLLAMA_HOST", "")
    clear_provider_cache()
    default_voice_cache.clear()
    yield
    clear_provider_cache()
    default_voice_cache.clear()
