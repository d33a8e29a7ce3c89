"""
Stock media search route
"""

from fastapi import APIRouter, HTTPException

from ..core import AssetNotFoundError, ConfigurationError, UpstreamError, get_logger
from ..models import FetchMediaRequest, FetchMediaResponse, RemoteAssetResponse
from ..services.pipeline.media import VisualAssetAcquirer, build_search_query

router = APIRouter(tags=["media"])
logger = get_logger(__name__, component="media_routes")


@router.post("/fetch-media", response_model=FetchMediaResponse, response_model_by_alias=True)
async def fetch_media(request: FetchMediaRequest):
    """Search stock providers for a brief without downloading anything"""
    try:
        found = await VisualAssetAcquirer().search(request.title, request.description, count=request.count)
    except ConfigurationError as exc:
        raise HTTPException(
            status_code=503,
            detail="No stock media API key configured. Add PEXELS_API_KEY or UNSPLASH_ACCESS_KEY.",
        ) from exc
    except AssetNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except UpstreamError as exc:
        logger.warning("Media search failed", extra={"service": exc.service, "error": str(exc)})
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return FetchMediaResponse(
        query=build_search_query(request.title, request.description),
        assets=[
            RemoteAssetResponse(
                url=asset.download_url,
                type=asset.kind,
                source=asset.source,
                thumbnail=asset.thumbnail,
                attribution=asset.attribution,
            )
            for asset in found
        ],
    )
