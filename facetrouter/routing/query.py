"""Bracketed query string handling.

The search layer reads nested parameters the way PHP does:
``tx_solr[filter][]=brand:acme`` decodes to
``{"tx_solr": {"filter": ["brand:acme"]}}``. These helpers convert
between flat ``(name, value)`` pairs and that nested form, and merge a
produced parameter tree into the parameters a request already carries.
"""

from __future__ import annotations

import copy
import re
from typing import Any, Dict, Iterable, List, Tuple, Union

Key = Union[str, int]

_NAME_RE = re.compile(r"^(?P<root>[^\[\]]+)(?P<subkeys>(?:\[[^\[\]]*\])*)$")
_SUBKEY_RE = re.compile(r"\[([^\[\]]*)\]")


def query_root(name: str) -> str:
    """Return the top-level parameter name of a bracketed key."""

    return name.split("[", 1)[0]


def is_nested_name(name: str) -> bool:
    """Return whether ``name`` decodes as a bracketed parameter name."""

    return _NAME_RE.match(name) is not None


def parse_nested_query(pairs: Iterable[Tuple[str, str]]) -> Dict[Key, Any]:
    """Decode flat pairs into nested parameters.

    ``[]`` appends, ``[name]`` nests and numeric keys become integer
    positions. Mappings whose keys are exactly ``0..n-1`` come back as
    lists. A repeated plain key keeps its last value.
    """

    result: Dict[Key, Any] = {}
    for name, value in pairs:
        match = _NAME_RE.match(name)
        if match is None:
            result[name] = value
            continue

        keys: List[str] = [match.group("root")] + _SUBKEY_RE.findall(match.group("subkeys"))
        container = result
        for position, raw_key in enumerate(keys):
            key = raw_key if position == 0 else _coerce_key(raw_key, container)
            if position == len(keys) - 1:
                container[key] = value
                break
            child = container.get(key)
            if not isinstance(child, dict):
                child = {}
                container[key] = child
            container = child

    return {key: _listify(value) for key, value in result.items()}


def encode_nested_query(params: Dict[Key, Any], prefix: str | None = None) -> List[Tuple[str, str]]:
    """Flatten nested parameters into bracketed ``(name, value)`` pairs."""

    pairs: List[Tuple[str, str]] = []
    if isinstance(params, dict):
        items: Iterable[Tuple[Key, Any]] = params.items()
    else:
        items = enumerate(params)

    for key, value in items:
        name = str(key) if prefix is None else f"{prefix}[{key}]"
        if isinstance(value, (dict, list)):
            pairs.extend(encode_nested_query(value, name))
        elif value is not None:
            pairs.append((name, str(value)))
    return pairs


def merge_query_params(existing: Dict[Key, Any], produced: Dict[Key, Any]) -> Dict[Key, Any]:
    """Merge ``produced`` into a copy of ``existing``.

    Sequences are extended, integer positions in ``produced`` are
    appended after the existing ones, and any other value in
    ``produced`` replaces the existing one.
    """

    merged: Dict[Key, Any] = copy.deepcopy(dict(existing))
    for key, value in produced.items():
        if isinstance(key, int):
            merged[_next_position(merged)] = copy.deepcopy(value)
        elif key in merged:
            merged[key] = _merge_value(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _merge_value(current: Any, incoming: Any) -> Any:
    if isinstance(current, list) and isinstance(incoming, list):
        return current + copy.deepcopy(incoming)
    if isinstance(current, list) and isinstance(incoming, dict):
        current = dict(enumerate(current))
    if isinstance(current, dict) and isinstance(incoming, list):
        incoming = dict(enumerate(incoming))
    if isinstance(current, dict) and isinstance(incoming, dict):
        return merge_query_params(current, incoming)
    return copy.deepcopy(incoming)


def _next_position(container: Dict[Key, Any]) -> int:
    positions = [key for key in container if isinstance(key, int)]
    return max(positions) + 1 if positions else 0


def _coerce_key(raw_key: str, container: Dict[Key, Any]) -> Key:
    if raw_key == "":
        return _next_position(container)
    if raw_key.isascii() and raw_key.isdigit() and (raw_key == "0" or not raw_key.startswith("0")):
        return int(raw_key)
    return raw_key


def _listify(value: Any) -> Any:
    if not isinstance(value, dict):
        return value
    converted = {key: _listify(child) for key, child in value.items()}
    if converted and list(converted) == list(range(len(converted))):
        return list(converted.values())
    return converted
