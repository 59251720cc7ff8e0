"""Application data transfer objects."""

from mediahub.application.dtos.search_results import (
    CacheClearResult,
    GenericSearchResult,
)

__all__ = ["CacheClearResult", "GenericSearchResult"]
