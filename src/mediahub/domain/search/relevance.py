"""Relevance filtering of upstream results.

This is a filter, not a ranker: records are kept or dropped, never reordered
and never modified.
"""

import re
from collections.abc import Iterable, Sequence
from typing import Any, Mapping

from mediahub.domain.search.value_objects import ResultRecord

YEAR_PATTERN = re.compile(r"^\d{4}$")

# Fields searched per feature, in test order. Dotted paths reach into
# nested objects.
GENERIC_FIELDS: tuple[str, ...] = ("title", "type_name", "class", "desc")
NETDISK_FIELDS: tuple[str, ...] = ("title", "filename", "note", "desc")
YOUTUBE_FIELDS: tuple[str, ...] = (
    "snippet.title",
    "snippet.channelTitle",
    "snippet.description",
)


def _lookup(record: Mapping[str, Any], path: str) -> Any:
    value: Any = record
    for part in path.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(part)
    return value


def is_relevant(
    record: Mapping[str, Any],
    query: str | None,
    fields: Sequence[str] = GENERIC_FIELDS,
    year_field: str | None = "year",
) -> bool:
    """Decide whether ``record`` matches ``query``.

    An empty or whitespace-only query matches everything. Otherwise the
    lower-cased query must be a substring of one of ``fields``, or, for a
    four digit query, equal the record's ``year_field``.
    """
    if not query:
        return True
    needle = query.strip().lower()
    if not needle:
        return True

    for path in fields:
        value = _lookup(record, path)
        if isinstance(value, str) and needle in value.lower():
            return True

    if year_field and YEAR_PATTERN.match(needle):
        year = _lookup(record, year_field)
        if year is not None and str(year) == needle:
            return True

    return False


def filter_relevant(
    records: Iterable[ResultRecord],
    query: str | None,
    fields: Sequence[str] = GENERIC_FIELDS,
    year_field: str | None = "year",
) -> list[ResultRecord]:
    return [r for r in records if is_relevant(r, query, fields, year_field)]


def filter_merged_by_type(data: Any, query: str | None) -> Any:
    """Filter a NetDisk ``merged_by_type`` payload.

    Every list under ``merged_by_type`` is filtered, types left empty are
    dropped, non-list values are kept as they are and ``total`` is
    recomputed. Payloads without ``merged_by_type`` pass through unchanged.
    """
    if not query or not isinstance(data, dict) or not data.get("merged_by_type"):
        return data

    merged: dict[str, Any] = {}
    for cloud_type, resources in data["merged_by_type"].items():
        if isinstance(resources, list):
            kept = filter_relevant(resources, query, NETDISK_FIELDS, year_field=None)
            if kept:
                merged[cloud_type] = kept
        else:
            merged[cloud_type] = resources

    total = sum(len(v) for v in merged.values() if isinstance(v, list))
    return {**data, "merged_by_type": merged, "total": total}
