"""Argument expansion into nested query parameters."""

from __future__ import annotations

from facetrouter.routing.arguments import expand_arguments
from facetrouter.routing.types import FacetList, Node


def test_plain_query_path_nests_value():
    tree = expand_arguments({"brand": "acme"}, {"brand": "filter/type"}, "tx_solr", ",")

    assert tree.to_params() == {"tx_solr": {"filter": {"type": "acme"}}}


def test_facet_marker_encodes_multiple_values():
    tree = expand_arguments({"brand": "acme,nike"}, {"brand": "filter-brand"}, "tx_solr", ",")

    assert tree.to_params() == {"tx_solr": {"filter": ["brand:acme", "brand:nike"]}}
    assert tree.entries["tx_solr"].entries["filter"] == FacetList(["brand:acme", "brand:nike"])


def test_facet_key_ends_the_chain():
    tree = expand_arguments({"brand": "acme"}, {"brand": "filter-brand/ignored/keys"}, "tx_solr", ",")

    assert tree.to_params() == {"tx_solr": {"filter": ["brand:acme"]}}


def test_facet_name_splits_at_first_marker():
    tree = expand_arguments({"size": "xl"}, {"size": "filter-size-eu"}, "tx_solr", ",")

    assert tree.to_params() == {"tx_solr": {"filter": ["size-eu:xl"]}}


def test_fields_accumulate_in_declaration_order():
    tree = expand_arguments(
        {"color": "red|blue", "brand": "acme"},
        {"brand": "filter-brand", "color": "filter-color"},
        "tx_solr",
        "|",
    )

    assert tree.to_params() == {"tx_solr": {"filter": ["brand:acme", "color:red", "color:blue"]}}


def test_duplicates_are_kept():
    tree = expand_arguments({"brand": "acme,acme"}, {"brand": "filter-brand"}, "tx_solr", ",")

    assert tree.to_params() == {"tx_solr": {"filter": ["brand:acme", "brand:acme"]}}


def test_unmapped_placeholder_is_dropped():
    tree = expand_arguments(
        {"category": "household", "page": "2"},
        {"category": "filter/category"},
        "tx_solr",
        ",",
    )

    assert tree.to_params() == {"tx_solr": {"filter": {"category": "household"}}}


def test_argument_without_value_is_skipped():
    tree = expand_arguments({}, {"category": "filter/category"}, "tx_solr", ",")

    assert tree.to_params() == {}


def test_empty_namespace_writes_at_root():
    tree = expand_arguments({"q": "shoes"}, {"q": "q"}, "", ",")

    assert tree.to_params() == {"q": "shoes"}


def test_nested_mapping_and_facets_share_a_key():
    # category arrives first and makes ``filter`` a mapping; facet tokens
    # are then appended to it under integer positions.
    tree = expand_arguments(
        {"category": "household", "facet": "shoes"},
        {"category": "filter/category", "facet": "filter-type"},
        "tx_solr",
        ",",
    )

    assert tree.to_params() == {"tx_solr": {"filter": {"category": "household", 0: "type:shoes"}}}


def test_facet_token_keeps_the_whole_segment():
    # The value is the raw path segment; the facet name from the key is
    # prefixed as is, so ``type-shoes`` becomes ``type:type-shoes``.
    tree = expand_arguments(
        {"category": "household", "facet": "type-shoes"},
        {"category": "filter/category", "facet": "filter-type"},
        "tx_solr",
        ",",
    )

    assert tree.to_params() == {"tx_solr": {"filter": {"category": "household", 0: "type:type-shoes"}}}


def test_facets_then_nested_mapping_share_a_key():
    tree = expand_arguments(
        {"facet": "shoes,boots", "category": "household"},
        {"facet": "filter-type", "category": "filter/category"},
        "tx_solr",
        ",",
    )

    assert tree.to_params() == {
        "tx_solr": {"filter": {0: "type:shoes", 1: "type:boots", "category": "household"}}
    }


def test_last_scalar_write_wins():
    tree = expand_arguments(
        {"a": "first", "b": "second"},
        {"a": "sort", "b": "sort"},
        "tx_solr",
        ",",
    )

    assert tree.to_params() == {"tx_solr": {"sort": "second"}}


def test_facets_replace_scalar_under_base_key():
    tree = expand_arguments(
        {"a": "relevance", "b": "acme"},
        {"a": "filter", "b": "filter-brand"},
        "tx_solr",
        ",",
    )

    assert tree.to_params() == {"tx_solr": {"filter": ["brand:acme"]}}


def test_node_positions_continue_after_existing_ones():
    node = Node({"category": "household", 0: "type:shoes"})
    node.append("type:boots")

    assert node.entries == {"category": "household", 0: "type:shoes", 1: "type:boots"}
