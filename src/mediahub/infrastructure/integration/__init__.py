"""Upstream search provider clients."""

from mediahub.infrastructure.integration.pansou_client import PanSouClient
from mediahub.infrastructure.integration.video_source_client import (
    VideoSourceClient,
)
from mediahub.infrastructure.integration.youtube_client import YouTubeClient

__all__ = ["PanSouClient", "VideoSourceClient", "YouTubeClient"]
