"""
Use Cases package - business operations behind the HTTP routes.

Modules:
- base: Base use case abstract class
- generate_script_use_case: Narration for a brief
- generate_video_use_case: Full render pipeline
- export_package_use_case: Editor package
"""

from .base import UseCase
from .export_package_use_case import ExportPackageUseCase
from .generate_script_use_case import GenerateScriptUseCase
from .generate_video_use_case import GenerateVideoUseCase, VideoOutcome

__all__ = [
    "UseCase",
    "ExportPackageUseCase",
    "GenerateScriptUseCase",
    "GenerateVideoUseCase",
    "VideoOutcome",
]
