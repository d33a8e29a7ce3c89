"""
ExportPackageUseCase - zip bundle for finishing the video in an editor
"""

from typing import Optional

from ...core.logging import get_logger
from ...models.generation import ExportPackageRequest
from ..pipeline.export import ExportPackage, PackageExporter
from .base import UseCase

logger = get_logger(__name__, component="export_use_case")


class ExportPackageUseCase(UseCase[ExportPackageRequest, ExportPackage]):
    def __init__(self, exporter: Optional[PackageExporter] = None):
        self.exporter = exporter or PackageExporter()

    async def execute(self, request: ExportPackageRequest) -> ExportPackage:
        """
        Raises:
            InputValidationError: Missing title, script or audio, or audio
                that is not valid base64
        """
        return await self.exporter.export(
            title=request.title,
            description=request.description,
            tone=request.tone,
            duration=request.duration,
            script=request.script,
            audio=request.voice_audio,
        )
