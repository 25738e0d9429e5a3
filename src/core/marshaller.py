"""문서 <-> 엔진 wire 표현 변환.

스키마에 선언된 필드만 변환합니다. geo point 필드는
{"latitude", "longitude"} 키를 엔진이 쓰는 키 이름으로 바꿉니다.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from core.schema import Field, GeoPointField, ObjectField

DEFAULT_GEO_POINT_FIELD_CONFIG = {"latitude": "latitude", "longitude": "longitude"}


class Marshaller:
    """스키마 기반 문서 변환기.

    Args:
        geo_point_field_config: {"latitude": wire 키, "longitude": wire 키}
    """

    def __init__(self, geo_point_field_config: Mapping[str, str] | None = None):
        config = dict(DEFAULT_GEO_POINT_FIELD_CONFIG)
        config.update(geo_point_field_config or {})
        self._to_wire = config
        self._from_wire = {wire: key for key, wire in config.items()}

    def marshall(self, fields: Mapping[str, Field], document: Mapping[str, Any]) -> dict[str, Any]:
        """문서를 엔진 wire 표현으로 변환."""
        return self._convert(fields, document, self._marshall_geo_point)

    def unmarshall(self, fields: Mapping[str, Field], raw: Mapping[str, Any]) -> dict[str, Any]:
        """엔진 wire 표현을 문서로 변환."""
        return self._convert(fields, raw, self._unmarshall_geo_point)

    def _convert(
        self,
        fields: Mapping[str, Field],
        data: Mapping[str, Any],
        geo: Callable[[Mapping[str, Any]], dict[str, Any]],
    ) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for name, f in fields.items():
            if name not in data:
                continue
            value = data[name]
            if value is None:
                out[name] = None
                continue

            if f.multiple:
                out[name] = [None if v is None else self._convert_value(f, v, geo) for v in value]
            else:
                out[name] = self._convert_value(f, value, geo)
        return out

    def _convert_value(
        self,
        f: Field,
        value: Any,
        geo: Callable[[Mapping[str, Any]], dict[str, Any]],
    ) -> Any:
        if isinstance(f, ObjectField):
            return self._convert(f.fields, value, geo)
        if isinstance(f, GeoPointField):
            return geo(value)
        return value

    def _marshall_geo_point(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return {
            self._to_wire["latitude"]: value["latitude"],
            self._to_wire["longitude"]: value["longitude"],
        }

    def _unmarshall_geo_point(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return {self._from_wire.get(k, k): v for k, v in value.items()}
