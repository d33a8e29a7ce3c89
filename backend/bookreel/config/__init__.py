"""
Application configuration and settings
"""

import os
import tempfile
from pathlib import Path

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

# Model configuration
from .models import (
    ModelConfig,
    PIPELINE_MODELS,
    get_model_config,
)

# Base directories
APP_DIR = Path(__file__).parent.parent
BACKEND_DIR = APP_DIR.parent
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(BACKEND_DIR / "outputs")))
VIDEO_OUTPUT_DIR = OUTPUT_DIR / "videos"
TEMP_DIR = Path(os.getenv("BOOKREEL_TEMP_DIR", str(Path(tempfile.gettempdir()) / "bookreel")))

# Ensure directories exist
OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
VIDEO_OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
TEMP_DIR.mkdir(parents=True, exist_ok=True)

# API settings
API_TITLE = "BookReel API"
API_DESCRIPTION = "Turn a book brief into a narrated, captioned vertical video"
API_VERSION = "1.0.0"
SERVICE_NAME = "BookReel"

# CORS origins
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:3001,http://localhost:5173",
    ).split(",")
    if origin.strip()
]

# LLM Provider settings
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "").lower() or None  # "gemini" or "ollama"
OLLAMA_HOST = os.getenv("OLLAMA_HOST", "http://localhost:11434")
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

# External media and voice services
ELEVENLABS_API_KEY = os.getenv("ELEVENLABS_API_KEY")
PEXELS_API_KEY = os.getenv("PEXELS_API_KEY")
UNSPLASH_ACCESS_KEY = os.getenv("UNSPLASH_ACCESS_KEY")

# Timeouts (seconds)
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
DOWNLOAD_TIMEOUT_SECONDS = float(os.getenv("DOWNLOAD_TIMEOUT_SECONDS", "120"))
TTS_TIMEOUT_SECONDS = float(os.getenv("TTS_TIMEOUT_SECONDS", "120"))
FFMPEG_TIMEOUT_SECONDS = float(os.getenv("FFMPEG_TIMEOUT_SECONDS", "600"))
FFPROBE_TIMEOUT_SECONDS = float(os.getenv("FFPROBE_TIMEOUT_SECONDS", "30"))

__all__ = [
    "ModelConfig",
    "PIPELINE_MODELS",
    "get_model_config",
    "APP_DIR",
    "BACKEND_DIR",
    "OUTPUT_DIR",
    "VIDEO_OUTPUT_DIR",
    "TEMP_DIR",
    "API_TITLE",
    "API_DESCRIPTION",
    "API_VERSION",
    "SERVICE_NAME",
    "CORS_ORIGINS",
    "LLM_PROVIDER",
    "OLLAMA_HOST",
    "GEMINI_API_KEY",
    "ELEVENLABS_API_KEY",
    "PEXELS_API_KEY",
    "UNSPLASH_ACCESS_KEY",
    "HTTP_TIMEOUT_SECONDS",
    "DOWNLOAD_TIMEOUT_SECONDS",
    "TTS_TIMEOUT_SECONDS",
    "FFMPEG_TIMEOUT_SECONDS",
    "FFPROBE_TIMEOUT_SECONDS",
]
