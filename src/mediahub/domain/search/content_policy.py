"""Content policy filter for the generic search feature."""

from collections.abc import Iterable, Sequence

from mediahub.domain.search.value_objects import ResultRecord

# Category labels used by adult-content sections of common video source APIs.
DEFAULT_BLOCKED_CATEGORIES: tuple[str, ...] = (
    "伦理片",
    "福利",
    "里番动漫",
    "门事件",
    "萝莉少女",
    "制服诱惑",
    "国产传媒",
    "cosplay",
    "黑丝诱惑",
    "无码",
    "日本无码",
    "有码",
    "日本有码",
    "SWAG",
    "网红主播",
    "色情片",
    "同性片",
    "福利视频",
    "福利片",
)


def is_blocked(record: ResultRecord, blocklist: Sequence[str]) -> bool:
    type_name = record.get("type_name") or ""
    if not isinstance(type_name, str):
        return False
    return any(word in type_name for word in blocklist)


def filter_blocked_categories(
    records: Iterable[ResultRecord],
    blocklist: Sequence[str] = DEFAULT_BLOCKED_CATEGORIES,
) -> list[ResultRecord]:
    return [r for r in records if not is_blocked(r, blocklist)]
