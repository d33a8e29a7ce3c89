"""
Core Exceptions
Standardized exception hierarchy for the application.

Pipeline stages raise these; the orchestrator maps each type to one error
code (see services/pipeline/errors.py), so new failure causes get a new
class rather than a new message pattern.
"""

from typing import Optional


class BookReelError(Exception):
    """Base exception for all application errors."""


class InputValidationError(BookReelError):
    """Caller-supplied input is missing or out of range. Never retried."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ConfigurationError(BookReelError):
    """A required credential or setting for an external service is missing."""

    def __init__(self, message: str, service: str):
        super().__init__(message)
        self.service = service


class UpstreamError(BookReelError):
    """An external service answered with an error or could not be reached."""

    def __init__(self, message: str, service: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.service = service
        self.status_code = status_code


class AuthenticationError(UpstreamError):
    """Credential rejected by the external service."""


class RateLimitError(UpstreamError):
    """External service quota or rate limit reached."""


class ContentPolicyError(UpstreamError):
    """External service refused the content."""


class UpstreamValidationError(UpstreamError):
    """External service rejected the request payload."""


class AssetNotFoundError(BookReelError):
    """No usable result could be produced from any source."""


class MediaToolError(BookReelError):
    """Base exception for ffmpeg / ffprobe failures."""

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


class ToolNotInstalledError(MediaToolError):
    """The media binary is not on PATH."""


class CodecError(MediaToolError):
    """Encoder or codec missing or failing."""


class OutputPermissionError(MediaToolError):
    """The media tool could not read or write a file."""


class EncodeTimeoutError(MediaToolError):
    """The media tool ran past its timeout and was killed."""
