"""Search result DTOs."""

from dataclasses import dataclass, field

from mediahub.domain.search import ResultRecord


@dataclass(frozen=True)
class GenericSearchResult:
    """Outcome of one generic search.

    ``cache_time_seconds`` is set when the response may be cached by
    downstream HTTP caches.
    """

    results: list[ResultRecord] = field(default_factory=list)
    cache_time_seconds: int | None = None
    from_cache: bool = False

    @property
    def cacheable(self) -> bool:
        return self.cache_time_seconds is not None


@dataclass(frozen=True)
class CacheClearResult:
    deleted: int
    prefixes: tuple[str, ...]
    query: str | None = None
