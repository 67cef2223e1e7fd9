"""Splitting request paths against route patterns."""

from __future__ import annotations

import pytest

from facetrouter.routing.errors import MalformedPlaceholderToken
from facetrouter.routing.paths import decompose_path, degenerate_placeholder, parse_placeholder
from facetrouter.routing.types import ParsedPath


def test_splits_tail_by_pattern():
    parsed = decompose_path("/products/household/type-shoes", "/{category}/{facet}", "/products")

    assert parsed.slug == "/products"
    assert parsed.segments == ("household", "type-shoes")
    assert parsed.values() == {"category": "household", "facet": "type-shoes"}


def test_path_equal_to_slug_has_no_segments():
    assert decompose_path("/products", "/{category}/{facet}", "/products") == ParsedPath(slug="/products")


def test_decomposition_is_idempotent_on_the_slug():
    first = decompose_path("/products/household/type-shoes", "/{category}/{facet}", "/products")
    again = decompose_path(first.slug, "/{category}/{facet}", first.slug)

    assert again.segments == ()


def test_extra_segments_stay_in_slug():
    parsed = decompose_path("/shop/products/household/type-shoes", "/{category}/{facet}", "/shop")

    assert parsed.slug == "/shop/products"
    assert parsed.values() == {"category": "household", "facet": "type-shoes"}


def test_short_path_passes_through():
    parsed = decompose_path("/products/household", "/{category}/{facet}/{brand}", "/products")

    assert parsed.segments == ()
    assert parsed.slug == "/products"


def test_tail_may_not_eat_into_page_slug():
    parsed = decompose_path("/products/household", "/{category}/{facet}", "/products")

    assert parsed.segments == ()


def test_single_placeholder_pattern():
    parsed = decompose_path("/products/brand-acme,nike", "/{facet}", "/products")

    assert parsed.slug == "/products"
    assert parsed.values() == {"facet": "brand-acme,nike"}


def test_trailing_slash_yields_empty_value():
    parsed = decompose_path("/products/household/", "/{category}/{facet}", "/products")

    assert parsed.values() == {"category": "household", "facet": ""}


def test_parse_placeholder():
    assert parse_placeholder("{category}") == "category"
    assert parse_placeholder("<category>", ("<", ">")) == "category"


@pytest.mark.parametrize("segment", ["", "{}", "category", "{category", "category}", "{a}{b}"])
def test_parse_placeholder_rejects_malformed_segments(segment):
    with pytest.raises(MalformedPlaceholderToken):
        parse_placeholder(segment)


def test_malformed_segment_keeps_degenerate_name(caplog):
    parsed = decompose_path("/products/household", "/[category]", "/products")

    assert parsed.values() == {"category": "household"}
    assert degenerate_placeholder("ab") == ""
    assert "malformed segment" in caplog.text


def test_strict_mode_passes_malformed_pattern_through():
    parsed = decompose_path("/products/household", "/[category]", "/products", strict=True)

    assert parsed.segments == ()
