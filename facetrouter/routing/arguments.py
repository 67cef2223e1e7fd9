"""Expand dynamic path values into nested search query parameters.

Each enhancer argument maps a placeholder to a slash-delimited query
path such as ``filter/category``. A key containing the facet marker
(``filter-brand``) is a facet container: the value is split on the
facet separator and every part is appended as ``brand:<part>`` to the
sequence stored under ``filter``::

    /products/household/brand-acme,nike

    tx_solr:
        filter:
            category: household
            0: brand:acme
            1: brand:nike
"""

from __future__ import annotations

from typing import List, Mapping

from .config import DEFAULTS
from .types import FacetList, Node

FACET_MARKER: str = DEFAULTS["FACET_MARKER"]


def expand_arguments(
    values: Mapping[str, str],
    arguments: Mapping[str, str],
    namespace: str,
    separator: str,
    *,
    marker: str = FACET_MARKER,
) -> Node:
    """Build the query parameter tree for the given placeholder values.

    Arguments are applied in declaration order; fields without a value
    are skipped.
    """

    root = Node()
    for field_name, query_path in arguments.items():
        if values.get(field_name) is None:
            continue

        keys = query_path.split("/")
        if namespace:
            keys.insert(0, namespace)
        _apply(root, keys, values[field_name], separator, marker)

    return root


def _apply(node: Node, keys: List[str], value: str, separator: str, marker: str) -> None:
    key, rest = keys[0], keys[1:]

    if marker in key:
        base_key, facet_name = key.split(marker, 1)
        parts = value.split(separator) if separator else [value]
        tokens = [f"{facet_name}:{part}" for part in parts]
        _append_facets(node, base_key, tokens)
        return

    if not rest:
        node.entries[key] = value
        return

    child = node.entries.get(key)
    if isinstance(child, FacetList):
        child = child.to_node()
    elif not isinstance(child, Node):
        child = Node()
    node.entries[key] = child
    _apply(child, rest, value, separator, marker)


def _append_facets(node: Node, key: str, tokens: List[str]) -> None:
    target = node.entries.get(key)
    if isinstance(target, Node):
        for token in tokens:
            target.append(token)
    elif isinstance(target, FacetList):
        target.tokens.extend(tokens)
    else:
        node.entries[key] = FacetList(list(tokens))
