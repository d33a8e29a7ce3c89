"""
Script generation routes
"""

from fastapi import APIRouter

from ..models import ScriptRequest, ScriptResponse
from ..services.use_cases import GenerateScriptUseCase

router = APIRouter(tags=["script"])


@router.post("/generate-script", response_model=ScriptResponse, response_model_by_alias=True)
async def generate_script(request: ScriptRequest):
    """Narration for a brief. Falls back to a template when no LLM answers."""
    return await GenerateScriptUseCase().execute(request)
