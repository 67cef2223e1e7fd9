"""Routing settings and site document loading."""

from __future__ import annotations

import pytest

from facetrouter.routing.arguments import FACET_MARKER
from facetrouter.routing.config import DEFAULTS, default_language, load_settings, load_site_document
from facetrouter.routing.errors import ConfigurationError
from facetrouter.routing.paths import DEFAULT_DELIMITERS


def test_settings_merge_over_defaults():
    settings = load_settings({"DEFAULT_NAMESPACE": "search", "PLACEHOLDER_DELIMITERS": ["<", ">"]})

    assert settings.default_namespace == "search"
    assert settings.delimiters == ("<", ">")
    assert settings.enhancer_type == "CombinedFacetEnhancer"
    assert settings.default_separator == ","
    assert settings.facet_marker == "-"
    assert settings.strict_placeholders is False
    assert DEFAULTS["DEFAULT_NAMESPACE"] == "tx_solr"


def test_module_defaults_come_from_settings_defaults():
    assert FACET_MARKER == DEFAULTS["FACET_MARKER"] == load_settings().facet_marker
    assert DEFAULT_DELIMITERS == load_settings().delimiters


def test_load_site_document(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "base: 'https://shop.example.com/'\n"
        "routeEnhancers:\n"
        "  ProductFacets:\n"
        "    type: CombinedFacetEnhancer\n"
        "    routePath: '/{category}'\n",
        encoding="utf-8",
    )

    document = load_site_document(path)

    assert document["base"] == "https://shop.example.com/"
    assert document["routeEnhancers"]["ProductFacets"]["routePath"] == "/{category}"


@pytest.mark.parametrize(
    "text",
    [
        "base: [unclosed",
        "- just\n- a list\n",
        "routeEnhancers: {}\n",
        "base: /\nrouteEnhancers: [a]\n",
    ],
)
def test_invalid_site_documents(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_site_document(path)


def test_missing_site_document(tmp_path):
    with pytest.raises(ConfigurationError):
        load_site_document(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "document, expected",
    [
        ({}, "en"),
        ({"languages": [{"locale": "de_DE.UTF-8"}]}, "de"),
        ({"languages": [{"iso-639-1": "FR", "locale": "de_DE"}]}, "fr"),
        ({"languages": [{"locale": "en-US"}]}, "en"),
    ],
)
def test_default_language(document, expected):
    assert default_language(document) == expected
