"""Normalize request query parameters to ``{name: [values]}``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl

QueryParams = dict[str, list[str]]


def normalize_query_params(source: Any) -> QueryParams:
    """Return a ``{name: [values]}`` dict from any supported source.

    Accepts a raw query string (with or without a leading ``?``), a mapping
    of names to a string or a list of strings, an object exposing
    ``multi_items()`` such as Starlette's ``QueryParams``, or a multi-value
    dict exposing ``getlist()`` (Werkzeug, Django). Values keep
    their order of appearance.
    """
    if source is None:
        return {}
    if isinstance(source, str):
        pairs = parse_qsl(source.lstrip("?"), keep_blank_values=True)
        return _group(pairs)
    if hasattr(source, "multi_items"):
        return _group(source.multi_items())
    if hasattr(source, "getlist"):
        # Werkzeug MultiDict / Django QueryDict: items() yields one value per key
        return {
            str(name): [str(v) for v in source.getlist(name)] for name in source.keys()
        }
    if isinstance(source, Mapping):
        out: QueryParams = {}
        for name, value in source.items():
            if isinstance(value, (list, tuple)):
                out[str(name)] = [str(v) for v in value]
            else:
                out[str(name)] = [str(value)]
        return out
    raise TypeError(f"Unsupported query parameter source: {type(source).__name__}")


def first_value(params: QueryParams, key: str) -> str:
    """First value for *key*, or ``""`` when absent."""
    values = params.get(key)
    return values[0] if values else ""


def _group(pairs: Any) -> QueryParams:
    out: QueryParams = {}
    for name, value in pairs:
        out.setdefault(name, []).append(value)
    return out
