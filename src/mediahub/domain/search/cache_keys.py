"""Cache key construction.

A key encodes every input that shapes a cached payload: the feature, the
query text and the configuration discriminators. Discriminators are
percent-quoted and sorted so that

* identical inputs give identical keys whatever order the caller used, and
* different discriminator sets never collide, because ``,`` and ``:`` are
  always escaped inside a component.
"""

from collections.abc import Iterable
from urllib.parse import quote

from mediahub.domain.search.value_objects import Feature

KEY_SEPARATOR = ":"


def _component(value: str) -> str:
    return quote(value, safe="")


def discriminator(name: str, value: object) -> str:
    """Render one ``name=value`` discriminator.

    Lists and sets are sorted and comma-joined (empty -> ``none``), booleans
    are lower-cased, ``None`` renders as ``none``.
    """
    if isinstance(value, bool):
        rendered = "true" if value else "false"
    elif value is None:
        rendered = "none"
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(str(v) for v in value)
        rendered = ",".join(items) if items else "none"
    else:
        rendered = str(value)
    return f"{name}={rendered}"


def cache_key_prefix(feature: Feature) -> str:
    return f"{feature.cache_prefix}{KEY_SEPARATOR}"


def build_cache_key(
    feature: Feature,
    query: str,
    discriminators: Iterable[str] = (),
) -> str:
    """Build the cache key for a feature/query/configuration triple."""
    parts = sorted({_component(d) for d in discriminators})
    return KEY_SEPARATOR.join(
        [feature.cache_prefix, _component(query), ",".join(parts)],
    )


def key_matches_query(key: str, query: str) -> bool:
    """True when ``key`` was built for exactly ``query``."""
    segments = key.split(KEY_SEPARATOR)
    return len(segments) >= 2 and segments[1] == _component(query)
