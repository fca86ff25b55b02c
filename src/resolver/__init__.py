from src.resolver.base import AudioExtractor, VideoSearch
from src.resolver.extractors import (
    YtDlpCommandExtractor,
    YtDlpLibraryExtractor,
    build_extractor,
)
from src.resolver.pipeline import MediaResolver
from src.resolver.search import YouTubeSearch

__all__ = [
    "AudioExtractor",
    "VideoSearch",
    "MediaResolver",
    "YouTubeSearch",
    "YtDlpCommandExtractor",
    "YtDlpLibraryExtractor",
    "build_extractor",
]
