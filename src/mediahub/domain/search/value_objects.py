"""Search value objects."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

# Result records keep every upstream field; filtering removes whole records
# and never edits them.
ResultRecord = dict[str, Any]


class Feature(str, Enum):
    """Search features, each with its own upstream, TTL and response shape."""

    GENERIC = "generic"
    NETDISK = "netdisk"
    YOUTUBE = "youtube"

    @property
    def cache_prefix(self) -> str:
        return _CACHE_PREFIXES[self]


_CACHE_PREFIXES = {
    Feature.GENERIC: "search",
    Feature.NETDISK: "netdisk-search",
    Feature.YOUTUBE: "youtube-search",
}


@dataclass(frozen=True)
class SourceDescriptor:
    """A configured upstream video source.

    Attributes
    ----------
    key
        Stable identifier used in user restrictions and cache keys
    name
        Display name copied into every result record
    endpoint
        Base URL of the source's JSON API
    detail
        Optional detail page base URL
    timeout_seconds
        Per-source timeout for one aggregation
    enabled
        Disabled sources are never queried
    """

    key: str
    name: str
    endpoint: str
    detail: str | None = None
    timeout_seconds: float = 20.0
    enabled: bool = True
