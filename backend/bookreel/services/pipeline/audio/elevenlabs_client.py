"""
ElevenLabs HTTP client

Thin async wrapper over the two endpoints the pipeline needs: the voice
list and text-to-speech. HTTP failures are translated into the typed
exceptions from ``core.exceptions``.
"""

from typing import Any, Dict, List, Optional

import httpx

from ....config import ELEVENLABS_API_KEY, HTTP_TIMEOUT_SECONDS, TTS_TIMEOUT_SECONDS
from ....core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ContentPolicyError,
    RateLimitError,
    UpstreamError,
    UpstreamValidationError,
)
from ....core.logging import get_logger

logger = get_logger(__name__, component="elevenlabs")

ELEVENLABS_API_URL = "https://api.elevenlabs.io/v1"
MIN_API_KEY_LENGTH = 20
SERVICE = "elevenlabs"

_POLICY_MARKERS = ("policy", "moderation", "safety", "inappropriate", "violat")


class VoiceListPermissionError(UpstreamError):
    """The key works but may not list voices (missing_permissions)."""


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:300]
    detail = body.get("detail", body) if isinstance(body, dict) else body
    if isinstance(detail, dict):
        parts = [str(detail.get(key)) for key in ("status", "message") if detail.get(key)]
        return ": ".join(parts) or str(detail)
    return str(detail)


class ElevenLabsClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = ELEVENLABS_API_URL,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        tts_timeout: float = TTS_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else ELEVENLABS_API_KEY
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.tts_timeout = tts_timeout
        self._transport = transport

    def require_key(self) -> str:
        """Raises ConfigurationError when the key is missing or obviously malformed"""
        if not self.api_key:
            raise ConfigurationError("ELEVENLABS_API_KEY environment variable is not set", service=SERVICE)
        if len(self.api_key.strip()) < MIN_API_KEY_LENGTH:
            raise ConfigurationError("ELEVENLABS_API_KEY looks malformed (too short)", service=SERVICE)
        return self.api_key.strip()

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={"xi-api-key": self.require_key()},
            timeout=timeout,
            transport=self._transport,
        )

    async def list_voices(self) -> List[Dict[str, Any]]:
        """Raw voice dicts from GET /voices

        Raises:
            VoiceListPermissionError: 401 caused by missing permissions
            AuthenticationError: any other 401
            UpstreamError: other HTTP or network failure
        """
        try:
            async with self._client(self.timeout) as client:
                response = await client.get("/voices")
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Voice list request failed: {exc}", SERVICE) from exc

        if response.status_code == 401:
            detail = _error_detail(response)
            if "missing_permissions" in detail:
                raise VoiceListPermissionError(detail, SERVICE, 401)
            raise AuthenticationError(f"Authentication failed: {detail}", SERVICE, 401)
        if response.status_code >= 400:
            raise UpstreamError(
                f"Voice list returned {response.status_code}: {_error_detail(response)}",
                SERVICE,
                response.status_code,
            )
        return response.json().get("voices") or []

    async def text_to_speech(self, voice_id: str, payload: Dict[str, Any]) -> bytes:
        """POST /text-to-speech/{voice_id}, returns the MP3 bytes"""
        try:
            async with self._client(self.tts_timeout) as client:
                response = await client.post(
                    f"/text-to-speech/{voice_id}",
                    json=payload,
                    headers={"Accept": "audio/mpeg"},
                )
        except httpx.TimeoutException as exc:
            raise UpstreamError(f"Text-to-speech timed out after {self.tts_timeout:.0f}s", SERVICE) from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Text-to-speech request failed: {exc}", SERVICE) from exc

        status = response.status_code
        if status < 400:
            return response.content

        detail = _error_detail(response)
        logger.warning("Text-to-speech rejected", extra={"status_code": status, "detail": detail})
        if status == 401:
            raise AuthenticationError(f"ElevenLabs authentication failed: {detail}", SERVICE, status)
        if status == 429:
            raise RateLimitError(f"ElevenLabs quota or rate limit exceeded: {detail}", SERVICE, status)
        if status == 400 and any(marker in detail.lower() for marker in _POLICY_MARKERS):
            raise ContentPolicyError(f"Content rejected by ElevenLabs: {detail}", SERVICE, status)
        if status in (400, 422):
            raise UpstreamValidationError(f"ElevenLabs rejected the request: {detail}", SERVICE, status)
        raise UpstreamError(f"ElevenLabs returned {status}: {detail}", SERVICE, status)
