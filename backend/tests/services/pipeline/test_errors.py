"""
Tests for bookreel.services.pipeline.errors
"""

import pytest

from bookreel.core.exceptions import (
    AssetNotFoundError,
    AuthenticationError,
    CodecError,
    ConfigurationError,
    ContentPolicyError,
    EncodeTimeoutError,
    InputValidationError,
    OutputPermissionError,
    RateLimitError,
    ToolNotInstalledError,
    UpstreamError,
    UpstreamValidationError,
)
from bookreel.models import PipelineStep
from bookreel.services.pipeline.errors import (
    REMEDIATION,
    ErrorCode,
    classify_error,
    classify_validation_errors,
    error_code_for,
)

S = PipelineStep


class TestErrorCodes:
    """Test suite for the failure classification table"""

    @pytest.mark.parametrize(
        "exc, step, code",
        [
            (InputValidationError("x", field="title"), S.VALIDATING_INPUTS, ErrorCode.MISSING_TITLE),
            (InputValidationError("x", field="duration"), S.VALIDATING_INPUTS, ErrorCode.INVALID_DURATION),
            (InputValidationError("x", field="text"), S.GENERATING_VOICE, ErrorCode.TEXT_VALIDATION),
            (InputValidationError("x", field="clips"), S.ASSEMBLING_VIDEO, ErrorCode.NO_ASSETS_FOUND),
            (ConfigurationError("x", service="elevenlabs"), S.GENERATING_VOICE, ErrorCode.ELEVENLABS_KEY_MISSING),
            (ConfigurationError("x", service="media"), S.FETCHING_ASSETS, ErrorCode.MEDIA_KEYS_MISSING),
            (ConfigurationError("x", service="llm"), S.GENERATING_SCRIPT, ErrorCode.LLM_KEY_MISSING),
            (RateLimitError("x", "elevenlabs", 429), S.GENERATING_VOICE, ErrorCode.ELEVENLABS_QUOTA),
            (ContentPolicyError("x", "elevenlabs", 400), S.GENERATING_VOICE, ErrorCode.CONTENT_MODERATION),
            (UpstreamValidationError("x", "elevenlabs", 422), S.GENERATING_VOICE, ErrorCode.TEXT_VALIDATION),
            (AuthenticationError("x", "elevenlabs", 401), S.GENERATING_VOICE, ErrorCode.ELEVENLABS_API),
            (UpstreamError("x", "pexels", 500), S.FETCHING_ASSETS, ErrorCode.MEDIA_FETCH),
            (RateLimitError("x", "unsplash", 429), S.FETCHING_ASSETS, ErrorCode.MEDIA_RATE_LIMIT),
            (RateLimitError("x", "pexels", 429), S.FETCHING_ASSETS, ErrorCode.MEDIA_RATE_LIMIT),
            (UpstreamError("x", "gemini"), S.GENERATING_SCRIPT, ErrorCode.LLM_API),
            (AssetNotFoundError("x"), S.FETCHING_ASSETS, ErrorCode.NO_ASSETS_FOUND),
            (ToolNotInstalledError("x"), S.ASSEMBLING_VIDEO, ErrorCode.FFMPEG_MISSING),
            (CodecError("x"), S.ASSEMBLING_VIDEO, ErrorCode.CODEC),
            (OutputPermissionError("x"), S.ASSEMBLING_VIDEO, ErrorCode.PERMISSION),
            (PermissionError("x"), S.ASSEMBLING_VIDEO, ErrorCode.PERMISSION),
            (EncodeTimeoutError("x"), S.ASSEMBLING_VIDEO, ErrorCode.VIDEO_CREATION),
            (RuntimeError("x"), S.GENERATING_SCRIPT, ErrorCode.SCRIPT_GENERATION),
            (RuntimeError("x"), S.CLEANUP, ErrorCode.UNKNOWN),
        ],
    )
    def test_code_for(self, exc, step, code):
        assert error_code_for(exc, step) is code

    def test_message_does_not_depend_on_exception_text(self):
        """Wording changes in upstream errors never change the code or message"""
        first = classify_error(RateLimitError("quota_exceeded", "elevenlabs", 429), S.GENERATING_VOICE)
        second = classify_error(RateLimitError("Too many requests", "elevenlabs", 429), S.GENERATING_VOICE)
        assert first.code is second.code
        assert first.message == second.message
        assert first.details == "quota_exceeded"

    def test_every_code_has_a_remedy(self):
        assert set(REMEDIATION) == set(ErrorCode)


class TestClassifyError:
    """Test suite for classify_error"""

    def test_failure_envelope(self):
        failure = classify_error(ConfigurationError("ELEVENLABS_API_KEY not set", "elevenlabs"), S.GENERATING_VOICE)
        assert failure.status_code == 503
        response = failure.to_response().model_dump(by_alias=True)
        assert response == {
            "success": False,
            "error": "ElevenLabs API key not configured",
            "step": "generating voice-over",
            "code": "ERR_ELEVENLABS_KEY_MISSING",
            "details": "ELEVENLABS_API_KEY not set",
            "suggestion": "Add ELEVENLABS_API_KEY to your .env file and restart the server.",
        }

    def test_empty_message_uses_type_name(self):
        assert classify_error(CodecError(""), S.ASSEMBLING_VIDEO).details == "CodecError"

    def test_runtime_failures_are_500(self):
        assert classify_error(CodecError("x"), S.ASSEMBLING_VIDEO).status_code == 500


class TestClassifyValidationErrors:
    """Test suite for request validation mapping"""

    def test_first_field_wins(self):
        failure = classify_validation_errors(
            [{"loc": ("tone",), "msg": "bad tone"}, {"loc": ("title",), "msg": "missing"}]
        )
        assert failure.code is ErrorCode.INVALID_TONE
        assert failure.step is S.VALIDATING_INPUTS
        assert failure.status_code == 400
        assert failure.details == "tone: bad tone"

    def test_unknown_field(self):
        failure = classify_validation_errors([{"loc": ("body", "extra"), "msg": "bad"}])
        assert failure.code is ErrorCode.INVALID_JSON
        assert failure.step is S.PARSING_REQUEST
