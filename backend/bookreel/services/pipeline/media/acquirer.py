"""
Visual Asset Acquirer

Searches the stock providers in order and downloads matching clips and
stills into a working directory. The first provider is asked for the full
count; each later provider only for what is still missing. Provider errors
are logged and the next provider runs; the stage fails only when nothing at
all was collected.
"""

import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import httpx

from ....config import DOWNLOAD_TIMEOUT_SECONDS, TEMP_DIR
from ....core.exceptions import (
    AssetNotFoundError,
    BookReelError,
    ConfigurationError,
    InputValidationError,
    UpstreamError,
)
from ....core.logging import get_logger
from ..results import StageFailure, StageResult, StageSuccess
from .providers import ImageSize, MediaProvider, Orientation, RemoteAsset, VideoQuality, default_providers

logger = get_logger(__name__, component="asset_acquirer")

DEFAULT_ASSET_COUNT = 8

# Curated terms that reliably return usable stock footage
SEARCH_KEYWORDS = (
    "success",
    "motivation",
    "inspiration",
    "achievement",
    "growth",
    "sunrise",
    "nature",
    "business",
    "fitness",
    "mindfulness",
)

DEFAULT_QUERY_TERMS = ("motivation", "inspiration")


def build_search_query(title: str, description: str, keywords: Sequence[str] = ()) -> str:
    """Two curated terms found in the brief plus the first two caller keywords"""
    text = f"{title} {description}".lower()
    matches = [keyword for keyword in SEARCH_KEYWORDS if keyword in text]
    terms = matches[:2] + [k.strip() for k in keywords if k and k.strip()][:2]
    return " ".join(terms or DEFAULT_QUERY_TERMS)


@dataclass(frozen=True)
class MediaAsset:
    """A downloaded asset ready for the assembler"""
    path: Path
    kind: str
    source: str
    width: int
    height: int
    attribution: str
    page_url: str = ""
    duration: Optional[float] = None

    @property
    def is_video(self) -> bool:
        return self.kind == "video"


@dataclass
class AcquireOptions:
    count: int = DEFAULT_ASSET_COUNT
    video_quality: VideoQuality = "hd"
    image_size: ImageSize = "regular"
    orientation: Orientation = "portrait"
    keywords: Sequence[str] = field(default_factory=tuple)


class VisualAssetAcquirer:
    def __init__(
        self,
        providers: Optional[Sequence[MediaProvider]] = None,
        download_timeout: float = DOWNLOAD_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.providers = list(providers) if providers is not None else default_providers()
        self.download_timeout = download_timeout
        self._transport = transport

    def configured_providers(self) -> List[MediaProvider]:
        return [p for p in self.providers if p.is_configured()]

    def require_configured(self) -> List[MediaProvider]:
        configured = self.configured_providers()
        if not configured:
            names = ", ".join(p.label for p in self.providers) or "no providers"
            raise ConfigurationError(f"No stock media API key configured ({names})", service="media")
        return configured

    async def search(
        self,
        title: str,
        description: str,
        count: int = 5,
        options: Optional[AcquireOptions] = None,
    ) -> List[RemoteAsset]:
        """Search without downloading; providers fill the shortfall in order"""
        options = options or AcquireOptions()
        query = build_search_query(title, description, options.keywords)
        found: List[RemoteAsset] = []
        last_error: Optional[UpstreamError] = None

        for provider in self.require_configured():
            shortfall = count - len(found)
            if shortfall <= 0:
                break
            try:
                candidates = await provider.search(
                    query, shortfall, options.orientation, options.video_quality, options.image_size
                )
            except UpstreamError as exc:
                logger.warning(
                    f"{provider.label} search failed",
                    extra={"provider": provider.name, "error": str(exc)},
                )
                last_error = exc
                continue
            found.extend(candidates[:shortfall])

        if not found:
            if last_error is not None:
                raise last_error
            raise AssetNotFoundError(f"No stock media found for '{query}'")
        return found

    async def acquire(
        self,
        title: str,
        description: str,
        download_dir: Optional[Path] = None,
        options: Optional[AcquireOptions] = None,
        track: Optional[Callable[[Path], object]] = None,
    ) -> List[MediaAsset]:
        """
        Download up to ``options.count`` assets

        Every file is passed to ``track`` before it is written, so a caller
        cleaning up on failure also removes partial downloads.

        Raises:
            ConfigurationError: No provider has a key
            AssetNotFoundError: Providers answered but nothing was usable
            UpstreamError: Every provider failed and nothing was collected
        """
        options = options or AcquireOptions()
        if options.count < 1:
            raise InputValidationError("Asset count must be at least 1", field="count")

        download_dir = Path(download_dir or TEMP_DIR)
        download_dir.mkdir(parents=True, exist_ok=True)
        query = build_search_query(title, description, options.keywords)
        logger.info("Acquiring assets", extra={"query": query, "count": options.count})

        assets: List[MediaAsset] = []
        last_error: Optional[BookReelError] = None

        async with httpx.AsyncClient(
            timeout=self.download_timeout, follow_redirects=True, transport=self._transport
        ) as client:
            for provider in self.require_configured():
                shortfall = options.count - len(assets)
                if shortfall <= 0:
                    break
                try:
                    candidates = await provider.search(
                        query, shortfall, options.orientation, options.video_quality, options.image_size
                    )
                except UpstreamError as exc:
                    logger.warning(
                        f"{provider.label} search failed, trying next provider",
                        extra={"provider": provider.name, "error": str(exc)},
                    )
                    last_error = exc
                    continue

                for candidate in candidates:
                    if len(assets) >= options.count:
                        break
                    target = download_dir / f"{candidate.source}_{uuid.uuid4().hex[:12]}.{candidate.extension}"
                    if track is not None:
                        track(target)
                    try:
                        await self._download(client, candidate.download_url, target)
                    except UpstreamError as exc:
                        logger.warning(
                            "Asset download failed, skipping",
                            extra={"provider": provider.name, "url": candidate.download_url, "error": str(exc)},
                        )
                        last_error = exc
                        continue
                    assets.append(
                        MediaAsset(
                            path=target,
                            kind=candidate.kind,
                            source=candidate.source,
                            width=candidate.width,
                            height=candidate.height,
                            attribution=candidate.attribution,
                            page_url=candidate.page_url,
                            duration=candidate.duration,
                        )
                    )

        if not assets:
            if last_error is not None:
                raise last_error
            raise AssetNotFoundError(f"No stock media found for '{query}'")

        logger.info(
            "Assets acquired",
            extra={
                "asset_count": len(assets),
                "videos": sum(1 for a in assets if a.is_video),
                "images": sum(1 for a in assets if not a.is_video),
            },
        )
        return assets

    async def run(self, title: str, description: str, **kwargs) -> StageResult[List[MediaAsset]]:
        try:
            return StageSuccess(await self.acquire(title, description, **kwargs), source="media")
        except BookReelError as exc:
            return StageFailure(error=exc)
        except Exception as exc:
            logger.exception("Unexpected asset acquisition failure")
            return StageFailure(error=exc)

    @staticmethod
    async def _download(client: httpx.AsyncClient, url: str, target: Path) -> None:
        try:
            async with client.stream("GET", url) as response:
                if response.status_code >= 400:
                    raise UpstreamError(f"Download failed: {response.status_code}", "media", response.status_code)
                with open(target, "wb") as fh:
                    async for chunk in response.aiter_bytes():
                        fh.write(chunk)
        except httpx.HTTPError as exc:
            target.unlink(missing_ok=True)
            raise UpstreamError(f"Download failed: {exc}", "media") from exc
        except UpstreamError:
            target.unlink(missing_ok=True)
            raise
        if target.stat().st_size == 0:
            target.unlink(missing_ok=True)
            raise UpstreamError("Downloaded file is empty", "media")
