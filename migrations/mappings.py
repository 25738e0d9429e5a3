"""Elasticsearch 인덱스 매핑 생성.

Index 스키마로부터 ES 인덱스 매핑을 만듭니다.
텍스트 필드에는 정확 일치 필터용 `raw`(keyword) 하위 필드를 함께 둡니다.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core.schema import (
    BooleanField,
    DateTimeField,
    Field,
    FloatField,
    GeoPointField,
    IdentifierField,
    Index,
    IntegerField,
    ObjectField,
    TextField,
)

_SCALAR_TYPES: dict[type[Field], str] = {
    IdentifierField: "keyword",
    IntegerField: "integer",
    FloatField: "float",
    BooleanField: "boolean",
    DateTimeField: "date",
    GeoPointField: "geo_point",
}


def field_mapping(f: Field) -> dict[str, Any]:
    """필드 하나의 매핑."""
    if isinstance(f, TextField):
        return {
            "type": "text",
            "fields": {"raw": {"type": "keyword", "ignore_above": 256}},
        }
    if isinstance(f, ObjectField):
        return {"type": "object", "properties": _properties(f.fields)}

    for field_type, es_type in _SCALAR_TYPES.items():
        if isinstance(f, field_type):
            return {"type": es_type}
    raise ValueError(f"No mapping for field type {type(f).__name__}")


def _properties(fields: Mapping[str, Field]) -> dict[str, Any]:
    return {name: field_mapping(f) for name, f in fields.items()}


def index_mapping(index: Index) -> dict[str, Any]:
    """인덱스 생성 body (mappings)."""
    return {"mappings": {"properties": _properties(index.fields)}}


__all__ = [
    "field_mapping",
    "index_mapping",
]
