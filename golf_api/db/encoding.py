"""Render stored documents as plain JSON values."""

from __future__ import annotations

from base64 import b64encode
from typing import Any, Dict, Iterable, List, Mapping

from bson import (
    Binary,
    Code,
    DBRef,
    Decimal128,
    MaxKey,
    MinKey,
    ObjectId,
    Regex,
    Timestamp,
    json_util,
)
from bson.json_util import RELAXED_JSON_OPTIONS
from fastapi.encoders import jsonable_encoder


def _base64(value: bytes) -> str:
    return b64encode(bytes(value)).decode("ascii")


def _extended_json(value: Any) -> Any:
    return json_util.default(value, json_options=RELAXED_JSON_OPTIONS)


BSON_ENCODERS: Dict[Any, Any] = {
    ObjectId: str,
    Decimal128: lambda value: {"$numberDecimal": str(value)},
    Binary: _base64,
    bytes: _base64,
    Code: _extended_json,
    DBRef: _extended_json,
    Regex: _extended_json,
    Timestamp: _extended_json,
    MinKey: _extended_json,
    MaxKey: _extended_json,
}


def encode_document(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert every BSON value, at any depth, to its JSON form.

    Object ids become hex strings and datetimes ISO strings; keys are kept
    exactly as stored.
    """

    return jsonable_encoder(dict(document), custom_encoder=BSON_ENCODERS)


def encode_documents(documents: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    return [encode_document(document) for document in documents]


__all__ = ["BSON_ENCODERS", "encode_document", "encode_documents"]
