"""Admin schemas for cache and config maintenance."""

from pydantic import BaseModel, Field


class CacheClearRequest(BaseModel):
    """Clear every search cache, or only the entries for ``query``."""

    query: str | None = Field(default=None, description="Limit to one query")


class CacheClearResponse(BaseModel):
    success: bool = True
    deleted: int
    prefixes: list[str]
    query: str | None = None


class ConfigReloadResponse(BaseModel):
    success: bool = True
    sources: int
    netdisk_enabled: bool
    youtube_enabled: bool
    cache_entries_cleared: int


class YouTubeCacheClearResponse(BaseModel):
    success: bool = True
    message: str
    deleted: int
