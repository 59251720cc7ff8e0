"""Unit tests for cache key construction."""

from mediahub.domain.search import (
    Feature,
    build_cache_key,
    cache_key_prefix,
    discriminator,
    key_matches_query,
)


class TestDiscriminator:
    """Tests for rendering a single discriminator."""

    def test_list_values_are_sorted(self):
        assert discriminator("types", ["quark", "baidu"]) == "types=baidu,quark"

    def test_empty_list_renders_none(self):
        assert discriminator("regions", []) == "regions=none"

    def test_booleans_are_lower_case(self):
        assert discriminator("enabled", True) == "enabled=true"
        assert discriminator("enabled", False) == "enabled=false"

    def test_none_renders_none(self):
        assert discriminator("region", None) == "region=none"


class TestBuildCacheKey:
    """Tests for full cache keys."""

    def test_key_starts_with_feature_prefix(self):
        key = build_cache_key(Feature.NETDISK, "matrix", ["enabled=true"])

        assert key.startswith(cache_key_prefix(Feature.NETDISK))

    def test_discriminator_order_does_not_matter(self):
        a = build_cache_key(
            Feature.YOUTUBE,
            "cats",
            [discriminator("order", "date"), discriminator("regions", ["US", "JP"])],
        )
        b = build_cache_key(
            Feature.YOUTUBE,
            "cats",
            [discriminator("regions", ["JP", "US"]), discriminator("order", "date")],
        )

        assert a == b

    def test_different_configurations_do_not_collide(self):
        a = build_cache_key(
            Feature.NETDISK,
            "q",
            [discriminator("cloud_types", ["baidu", "quark"])],
        )
        b = build_cache_key(
            Feature.NETDISK,
            "q",
            [discriminator("cloud_types", ["baidu"])],
        )

        assert a != b

    def test_separators_inside_values_cannot_forge_a_key(self):
        """A comma inside a value must not look like two discriminators."""
        joined = build_cache_key(Feature.GENERIC, "q", ["a=1,b=2"])
        split = build_cache_key(Feature.GENERIC, "q", ["a=1", "b=2"])

        assert joined != split

    def test_query_with_colon_is_escaped(self):
        key = build_cache_key(Feature.GENERIC, "a:b", [])

        assert key.count(":") == 2

    def test_features_never_share_keys(self):
        generic = build_cache_key(Feature.GENERIC, "q", [])
        netdisk = build_cache_key(Feature.NETDISK, "q", [])

        assert generic != netdisk


class TestKeyMatchesQuery:
    """Tests for matching keys to the query they were built for."""

    def test_matches_exact_query(self):
        key = build_cache_key(Feature.GENERIC, "the matrix", ["x=1"])

        assert key_matches_query(key, "the matrix")

    def test_does_not_match_other_query(self):
        key = build_cache_key(Feature.GENERIC, "the matrix", ["x=1"])

        assert not key_matches_query(key, "matrix")

    def test_unicode_queries(self):
        key = build_cache_key(Feature.NETDISK, "流浪地球", [])

        assert key_matches_query(key, "流浪地球")
