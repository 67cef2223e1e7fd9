"""Configuration helpers for the routing pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .errors import ConfigurationError


@dataclass(frozen=True)
class RoutingSettings:
    """Typed wrapper around the ``FACET_ROUTING`` settings dictionary."""

    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def default_namespace(self) -> str:
        return self.raw["DEFAULT_NAMESPACE"]

    @property
    def enhancer_type(self) -> str:
        return self.raw["ENHANCER_TYPE"]

    @property
    def default_separator(self) -> str:
        return self.raw["DEFAULT_FACET_VALUE_SEPARATOR"]

    @property
    def facet_marker(self) -> str:
        return self.raw["FACET_MARKER"]

    @property
    def delimiters(self) -> Tuple[str, str]:
        opening, closing = self.raw["PLACEHOLDER_DELIMITERS"]
        return opening, closing

    @property
    def strict_placeholders(self) -> bool:
        return bool(self.raw["STRICT_PLACEHOLDERS"])


DEFAULTS: Dict[str, Any] = {
    "DEFAULT_NAMESPACE": "tx_solr",
    "ENHANCER_TYPE": "CombinedFacetEnhancer",
    "DEFAULT_FACET_VALUE_SEPARATOR": ",",
    "FACET_MARKER": "-",
    "PLACEHOLDER_DELIMITERS": ("{", "}"),
    "STRICT_PLACEHOLDERS": False,
}


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> RoutingSettings:
    """Return routing settings with ``overrides`` merged over the defaults."""

    data: Dict[str, Any] = DEFAULTS.copy()
    if overrides:
        merge_into(data, dict(overrides))
    return RoutingSettings(data)


def merge_into(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Recursively merge override into base dict."""

    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_into(base[key], value)
        else:
            base[key] = value


@dataclass(frozen=True)
class EnhancerConfig:
    """A single route enhancer declaration, normalised for one request."""

    name: str
    type: str
    route_path: str
    arguments: Dict[str, str]
    limit_to_pages: Tuple[int, ...]
    namespace: str
    facet_value_separator: str

    @classmethod
    def from_raw(cls, name: str, raw: Mapping[str, Any], settings: RoutingSettings) -> "EnhancerConfig":
        """Build a config from a declaration as stored in the site configuration.

        ``extensionKey`` replaces the namespace whenever it is present, so an
        empty string disables namespacing. The separator lives under
        ``solr.facetValueSeparator``; an empty one falls back to the default.
        """

        arguments = raw.get("_arguments") if isinstance(raw.get("_arguments"), Mapping) else {}
        solr = raw.get("solr") if isinstance(raw.get("solr"), Mapping) else {}
        namespace = raw.get("extensionKey")
        if namespace is None:
            namespace = settings.default_namespace
        separator = solr.get("facetValueSeparator") or settings.default_separator

        return cls(
            name=str(name),
            type=str(raw.get("type") or ""),
            route_path=str(raw.get("routePath") or ""),
            arguments={str(key): str(value) for key, value in arguments.items()},
            limit_to_pages=tuple(_page_ids(raw.get("limitToPages"))),
            namespace=str(namespace),
            facet_value_separator=str(separator),
        )

    def applies_to(self, page_id: int) -> bool:
        return page_id in self.limit_to_pages


def _page_ids(values: Any) -> list[int]:
    if not isinstance(values, (list, tuple, set)):
        return []
    ids = []
    for value in values:
        try:
            ids.append(int(value))
        except (TypeError, ValueError):
            continue
    return ids


def load_site_document(path: str | Path) -> Dict[str, Any]:
    """Load a YAML site configuration document.

    The document follows the usual site ``config.yaml`` layout: ``base``,
    ``languages`` and ``routeEnhancers`` at the top level.
    """

    source = Path(path)
    if not source.exists():
        raise ConfigurationError(f"Site configuration not found: {source}")

    with source.open("r", encoding="utf-8") as stream:
        try:
            document = yaml.safe_load(stream) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {source}: {exc}") from exc

    if not isinstance(document, dict):
        raise ConfigurationError(f"Site configuration must be a mapping: {source}")
    if not document.get("base"):
        raise ConfigurationError(f"Site configuration has no base URL: {source}")

    enhancers = document.get("routeEnhancers")
    if enhancers is not None and not isinstance(enhancers, dict):
        raise ConfigurationError(f"routeEnhancers must be a mapping: {source}")
    return document


def default_language(document: Mapping[str, Any], fallback: str = "en") -> str:
    """Return the language code of the first declared site language."""

    languages = document.get("languages") or []
    if not isinstance(languages, list) or not languages or not isinstance(languages[0], Mapping):
        return fallback
    first = languages[0]
    code = first.get("iso-639-1") or first.get("twoLetterIsoCode") or first.get("locale") or ""
    code = str(code).split("_")[0].split(".")[0].split("-")[0]
    return code.lower() or fallback
