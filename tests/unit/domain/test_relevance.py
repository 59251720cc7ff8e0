"""Unit tests for relevance and content-policy filtering."""

import pytest

from mediahub.domain.search import (
    NETDISK_FIELDS,
    YOUTUBE_FIELDS,
    filter_blocked_categories,
    filter_merged_by_type,
    filter_relevant,
    is_relevant,
)

RECORD = {
    "title": "The Matrix",
    "type_name": "Sci-Fi",
    "class": "Action",
    "desc": "A hacker learns the truth",
    "year": "1999",
}


class TestIsRelevant:
    """Tests for the per-record relevance check."""

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_empty_query_always_matches(self, query):
        assert is_relevant({}, query) is True
        assert is_relevant(RECORD, query) is True

    def test_title_match_is_case_insensitive(self):
        assert is_relevant(RECORD, "matrix")
        assert is_relevant(RECORD, "MATRIX")

    def test_matches_on_later_fields(self):
        assert is_relevant(RECORD, "sci-fi")
        assert is_relevant(RECORD, "action")
        assert is_relevant(RECORD, "hacker")

    def test_no_match(self):
        assert not is_relevant(RECORD, "inception")

    def test_four_digit_query_matches_year_exactly(self):
        assert is_relevant(RECORD, "1999")
        assert not is_relevant(RECORD, "2003")

    def test_year_field_can_be_disabled(self):
        assert not is_relevant({"year": "1999"}, "1999", year_field=None)

    def test_non_string_fields_are_ignored(self):
        assert not is_relevant({"title": 42}, "42")

    def test_dotted_paths_reach_nested_fields(self):
        video = {"snippet": {"title": "Lo-fi beats", "channelTitle": "Chill"}}

        assert is_relevant(video, "chill", YOUTUBE_FIELDS, year_field=None)

    def test_netdisk_fields_include_note(self):
        resource = {"note": "Planet Earth II 4K"}

        assert is_relevant(resource, "planet earth", NETDISK_FIELDS, year_field=None)


class TestFilterRelevant:
    """Tests for list filtering."""

    def test_keeps_order_and_does_not_modify_records(self):
        records = [
            {"title": "Matrix Reloaded"},
            {"title": "Inception"},
            {"title": "The Matrix"},
        ]
        snapshot = [dict(r) for r in records]

        kept = filter_relevant(records, "matrix")

        assert kept == [records[0], records[2]]
        assert records == snapshot

    def test_result_is_subset_of_input(self):
        records = [{"title": f"Movie {i}"} for i in range(10)]

        kept = filter_relevant(records, "movie 1")

        assert all(r in records for r in kept)


class TestFilterMergedByType:
    """Tests for NetDisk merged_by_type filtering."""

    def test_drops_empty_types_and_recomputes_total(self):
        data = {
            "total": 3,
            "merged_by_type": {
                "baidu": [{"note": "Matrix 1080p"}, {"note": "Other"}],
                "quark": [{"note": "Unrelated"}],
            },
        }

        filtered = filter_merged_by_type(data, "matrix")

        assert filtered["merged_by_type"] == {"baidu": [{"note": "Matrix 1080p"}]}
        assert filtered["total"] == 1

    def test_non_list_values_are_kept(self):
        data = {"merged_by_type": {"meta": {"x": 1}, "baidu": []}}

        filtered = filter_merged_by_type(data, "q")

        assert filtered["merged_by_type"] == {"meta": {"x": 1}}
        assert filtered["total"] == 0

    def test_payload_without_merged_by_type_passes_through(self):
        data = {"total": 0}

        assert filter_merged_by_type(data, "q") is data

    def test_empty_query_passes_through(self):
        data = {"merged_by_type": {"baidu": [{"note": "x"}]}}

        assert filter_merged_by_type(data, "") is data


class TestContentPolicy:
    """Tests for the category blocklist."""

    def test_blocked_categories_are_removed(self):
        records = [
            {"title": "A", "type_name": "动作片"},
            {"title": "B", "type_name": "伦理片"},
            {"title": "C", "type_name": "日本有码"},
        ]

        kept = filter_blocked_categories(records)

        assert [r["title"] for r in kept] == ["A"]

    def test_custom_blocklist(self):
        records = [{"type_name": "Horror"}, {"type_name": "Comedy"}]

        kept = filter_blocked_categories(records, ["Horror"])

        assert kept == [{"type_name": "Comedy"}]

    def test_records_without_type_are_kept(self):
        assert filter_blocked_categories([{"title": "x"}]) == [{"title": "x"}]
