"""
Visual Asset Acquirer - stock clips and stills for the video
"""

from .acquirer import (
    AcquireOptions,
    DEFAULT_QUERY_TERMS,
    SEARCH_KEYWORDS,
    MediaAsset,
    VisualAssetAcquirer,
    build_search_query,
)
from .providers import (
    MediaProvider,
    PexelsVideoProvider,
    RemoteAsset,
    UnsplashPhotoProvider,
    default_providers,
    quality_order,
    select_video_file,
)

__all__ = [
    "AcquireOptions",
    "DEFAULT_QUERY_TERMS",
    "SEARCH_KEYWORDS",
    "MediaAsset",
    "VisualAssetAcquirer",
    "build_search_query",
    "MediaProvider",
    "PexelsVideoProvider",
    "RemoteAsset",
    "UnsplashPhotoProvider",
    "default_providers",
    "quality_order",
    "select_video_file",
]
