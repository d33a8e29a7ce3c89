"""
Routes module - contains all API route handlers
"""

from .script import router as script_router
from .voiceover import router as voiceover_router
from .video import router as video_router
from .export import router as export_router
from .media import router as media_router

__all__ = [
    "script_router",
    "voiceover_router",
    "video_router",
    "export_router",
    "media_router",
]
