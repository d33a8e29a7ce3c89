"""
Core Module - Cross-cutting concerns and shared infrastructure

Organization:
    - logging.py: Structured logging configuration and utilities
    - exceptions.py: Exception hierarchy raised by pipeline stages
    - runtime.py: Startup and per-request environment checks
    - cache.py: Time-boxed value cache
    - voice_catalog.py: Voice presets and per-tone settings

Usage:
    from bookreel.core import get_logger, InputValidationError
"""

# Logging
from .logging import (
    setup_logging,
    get_logger,
    set_request_id,
    set_job_id,
    clear_context,
    LogTimer,
)

# Exceptions
from .exceptions import (
    BookReelError,
    InputValidationError,
    ConfigurationError,
    UpstreamError,
    AuthenticationError,
    RateLimitError,
    ContentPolicyError,
    UpstreamValidationError,
    AssetNotFoundError,
    MediaToolError,
    ToolNotInstalledError,
    CodecError,
    OutputPermissionError,
    EncodeTimeoutError,
)

# Runtime checks
from .runtime import (
    REQUIRED_RENDER_TOOLS,
    RuntimeReport,
    parse_bool_env,
    locate_render_tools,
    missing_runtime_tools,
    ensure_writable_directory,
    run_startup_runtime_checks,
)

from .cache import TTLCache

__all__ = [
    "setup_logging",
    "get_logger",
    "set_request_id",
    "set_job_id",
    "clear_context",
    "LogTimer",
    "BookReelError",
    "InputValidationError",
    "ConfigurationError",
    "UpstreamError",
    "AuthenticationError",
    "RateLimitError",
    "ContentPolicyError",
    "UpstreamValidationError",
    "AssetNotFoundError",
    "MediaToolError",
    "ToolNotInstalledError",
    "CodecError",
    "OutputPermissionError",
    "EncodeTimeoutError",
    "REQUIRED_RENDER_TOOLS",
    "parse_bool_env",
    "missing_runtime_tools",
    "RuntimeReport",
    "locate_render_tools",
    "ensure_writable_directory",
    "run_startup_runtime_checks",
    "TTLCache",
]
