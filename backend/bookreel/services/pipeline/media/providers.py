"""
Stock media providers

Each provider searches one stock service and returns download candidates.
Downloading is the acquirer's job.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, Sequence

import httpx

from ....config import HTTP_TIMEOUT_SECONDS, PEXELS_API_KEY, UNSPLASH_ACCESS_KEY
from ....core.exceptions import AuthenticationError, ConfigurationError, RateLimitError, UpstreamError
from ....core.logging import get_logger

logger = get_logger(__name__, component="media_providers")

Orientation = Literal["portrait", "landscape", "square"]
VideoQuality = Literal["sd", "hd", "uhd"]
ImageSize = Literal["small", "regular", "full"]

PEXELS_API_URL = "https://api.pexels.com/videos"
UNSPLASH_API_URL = "https://api.unsplash.com"


@dataclass(frozen=True)
class RemoteAsset:
    """A search hit that has not been downloaded yet"""
    download_url: str
    kind: Literal["video", "image"]
    source: str
    page_url: str
    width: int
    height: int
    attribution: str
    extension: str
    duration: Optional[float] = None
    thumbnail: Optional[str] = None


def quality_order(preferred: VideoQuality) -> Sequence[str]:
    """Preference order starting at ``preferred``; hd falls back to sd before uhd"""
    return {
        "uhd": ("uhd", "hd", "sd"),
        "hd": ("hd", "sd", "uhd"),
        "sd": ("sd", "hd", "uhd"),
    }[preferred]


def select_video_file(files: Sequence[Dict[str, Any]], order: Sequence[str]) -> Optional[Dict[str, Any]]:
    """First mp4 rendition in quality order, else any mp4"""
    mp4_files = [f for f in files if f.get("file_type") == "video/mp4" and f.get("link")]
    for quality in order:
        for item in mp4_files:
            if item.get("quality") == quality:
                return item
    return mp4_files[0] if mp4_files else None


def _raise_for_status(response: httpx.Response, service: str, label: str) -> None:
    status = response.status_code
    if status < 400:
        return
    if status in (401, 403):
        raise AuthenticationError(f"Invalid {label} API key", service, status)
    if status == 429:
        raise RateLimitError(f"{label} rate limit exceeded", service, status)
    raise UpstreamError(f"{label} API error: {status}", service, status)


class MediaProvider(ABC):
    name: str
    label: str

    def __init__(
        self,
        api_key: Optional[str],
        timeout: float = HTTP_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _require_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError(f"{self.label} API key is not configured", service=self.name)
        return self.api_key

    async def _get(self, url: str, params: Dict[str, Any], headers: Dict[str, str]) -> Dict[str, Any]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, params=params, headers=headers)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"{self.label} request failed: {exc}", self.name) from exc
        _raise_for_status(response, self.name, self.label)
        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError(f"{self.label} returned a non-JSON response", self.name, response.status_code) from exc
        if not isinstance(data, dict):
            raise UpstreamError(f"{self.label} returned an unexpected payload", self.name, response.status_code)
        return data

    def _malformed(self, exc: Exception) -> UpstreamError:
        return UpstreamError(f"{self.label} returned a malformed search result: {exc!r}", self.name)

    @abstractmethod
    async def search(
        self,
        query: str,
        count: int,
        orientation: Orientation = "portrait",
        video_quality: VideoQuality = "hd",
        image_size: ImageSize = "regular",
    ) -> List[RemoteAsset]:
        """Up to ``2 * count`` candidates, best first"""


class PexelsVideoProvider(MediaProvider):
    name = "pexels"
    label = "Pexels"
    MAX_PER_PAGE = 80

    def __init__(self, api_key: Optional[str] = None, **kwargs):
        super().__init__(api_key if api_key is not None else PEXELS_API_KEY, **kwargs)

    async def search(self, query, count, orientation="portrait", video_quality="hd", image_size="regular"):
        data = await self._get(
            f"{PEXELS_API_URL}/search",
            params={
                "query": query,
                "per_page": min(count * 2, self.MAX_PER_PAGE),
                "orientation": orientation,
            },
            headers={"Authorization": self._require_key()},
        )
        try:
            return self._candidates(data, query, quality_order(video_quality))
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise self._malformed(exc) from exc

    def _candidates(self, data: Dict[str, Any], query: str, order: Sequence[str]) -> List[RemoteAsset]:
        videos = data.get("videos") or []
        logger.info("Pexels search", extra={"query": query, "total_results": data.get("total_results", len(videos))})

        candidates = []
        for video in videos:
            chosen = select_video_file(video.get("video_files") or [], order)
            if not chosen:
                logger.debug("No mp4 rendition", extra={"pexels_id": video.get("id")})
                continue
            candidates.append(
                RemoteAsset(
                    download_url=chosen["link"],
                    kind="video",
                    source=self.name,
                    page_url=video.get("url", ""),
                    width=int(chosen.get("width") or video.get("width") or 0),
                    height=int(chosen.get("height") or video.get("height") or 0),
                    duration=float(video["duration"]) if video.get("duration") is not None else None,
                    attribution=f"Video by {(video.get('user') or {}).get('name', 'Unknown')} on Pexels",
                    extension="mp4",
                    thumbnail=video.get("image"),
                )
            )
        return candidates


class UnsplashPhotoProvider(MediaProvider):
    name = "unsplash"
    label = "Unsplash"
    MAX_PER_PAGE = 30

    def __init__(self, api_key: Optional[str] = None, **kwargs):
        super().__init__(api_key if api_key is not None else UNSPLASH_ACCESS_KEY, **kwargs)

    async def search(self, query, count, orientation="portrait", video_quality="hd", image_size="regular"):
        data = await self._get(
            f"{UNSPLASH_API_URL}/search/photos",
            params={
                "query": query,
                "per_page": min(count * 2, self.MAX_PER_PAGE),
                "orientation": "squarish" if orientation == "square" else orientation,
            },
            headers={"Authorization": f"Client-ID {self._require_key()}"},
        )
        try:
            return self._candidates(data, query, image_size)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise self._malformed(exc) from exc

    def _candidates(self, data: Dict[str, Any], query: str, image_size: ImageSize) -> List[RemoteAsset]:
        photos = data.get("results") or []
        logger.info("Unsplash search", extra={"query": query, "total_results": data.get("total", len(photos))})

        candidates = []
        for photo in photos:
            url = (photo.get("urls") or {}).get(image_size)
            if not url:
                continue
            candidates.append(
                RemoteAsset(
                    download_url=url,
                    kind="image",
                    source=self.name,
                    page_url=((photo.get("links") or {}).get("html")) or "",
                    width=int(photo.get("width") or 0),
                    height=int(photo.get("height") or 0),
                    attribution=f"Photo by {(photo.get('user') or {}).get('name', 'Unknown')} on Unsplash",
                    extension="jpg",
                    thumbnail=(photo.get("urls") or {}).get("thumb"),
                )
            )
        return candidates


def default_providers() -> List[MediaProvider]:
    """Video-focused source first, image-focused source fills the shortfall"""
    return [PexelsVideoProvider(), UnsplashPhotoProvider()]
