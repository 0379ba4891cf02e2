"""Firestore REST typed values <-> plain Python values.

A REST Document carries ``{"fields": {name: Value}}`` where each Value is a
one-key object such as ``{"stringValue": "x"}`` or ``{"integerValue": "3"}``
(64-bit integers travel as strings). Maps and arrays nest Values.
"""

import base64
from collections.abc import Callable
from datetime import datetime
from typing import Any

from portfolio_api.shared.utils.datetime import format_rfc3339, parse_rfc3339


def to_value(v: Any) -> dict[str, Any]:
    """Wrap one Python value as a Firestore Value."""
    # bool before int: bool is an int subclass.
    if v is None:
        return {"nullValue": None}
    if isinstance(v, bool):
        return {"booleanValue": v}
    if isinstance(v, int):
        return {"integerValue": str(v)}
    if isinstance(v, float):
        return {"doubleValue": v}
    if isinstance(v, str):
        return {"stringValue": v}
    if isinstance(v, datetime):
        return {"timestampValue": format_rfc3339(v)}
    if isinstance(v, bytes):
        return {"bytesValue": base64.standard_b64encode(v).decode("ascii")}
    if isinstance(v, (list, tuple)):
        return {"arrayValue": {"values": [to_value(x) for x in v]}}
    if isinstance(v, dict):
        return {"mapValue": {"fields": {str(k): to_value(x) for k, x in v.items()}}}
    raise TypeError(f"Unsupported Firestore value type: {type(v).__name__}")


def _array(raw: dict) -> list[Any]:
    return [from_value(x) for x in (raw or {}).get("values") or []]


def _map(raw: dict) -> dict[str, Any]:
    return {k: from_value(x) for k, x in ((raw or {}).get("fields") or {}).items()}


_DECODERS: dict[str, Callable[[Any], Any]] = {
    "nullValue": lambda _: None,
    "booleanValue": bool,
    "integerValue": int,
    "doubleValue": float,
    "stringValue": str,
    "referenceValue": str,
    "timestampValue": parse_rfc3339,
    "bytesValue": base64.standard_b64decode,
    "geoPointValue": lambda raw: {
        "latitude": raw.get("latitude", 0.0),
        "longitude": raw.get("longitude", 0.0),
    },
    "arrayValue": _array,
    "mapValue": _map,
}


def from_value(value: dict[str, Any]) -> Any:
    """Unwrap a Firestore Value; unknown kinds decode to None."""
    for kind, raw in value.items():
        decoder = _DECODERS.get(kind)
        if decoder is not None:
            return decoder(raw)
    return None


def encode_document(data: dict[str, Any]) -> dict[str, Any]:
    """Python dict -> REST Document body (``{"fields": ...}``)."""
    return {"fields": {k: to_value(v) for k, v in data.items()}}


def decode_document(document: dict[str, Any] | None) -> dict[str, Any]:
    """REST Document (or query result document) -> Python dict of its fields."""
    if not document:
        return {}
    return _map(document)
