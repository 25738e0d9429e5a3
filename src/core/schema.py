"""인덱스 스키마 정의.

이 모듈은 검색 엔진에 의존하지 않습니다.
Index/Field는 설정에서 만들어져 읽기 전용으로 공유됩니다.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Field:
    """필드 기본 타입.

    Attributes:
        name: 필드명 (ObjectField 하위라면 부모 기준 상대 이름)
        multiple: 값이 리스트인지 여부
        searchable: 전문 검색 대상 여부
        filterable: 필터 조건 대상 여부
        sortable: 정렬 대상 여부
    """

    name: str
    multiple: bool = False
    searchable: bool = False
    filterable: bool = False
    sortable: bool = False


@dataclass(frozen=True)
class IdentifierField(Field):
    """문서 식별자 필드. 인덱스마다 정확히 하나."""

    filterable: bool = True
    sortable: bool = True


@dataclass(frozen=True)
class TextField(Field):
    """분석(analyzed) 텍스트 필드.

    엔진에는 정확 일치용 `raw` 하위 필드가 함께 존재합니다.
    """

    searchable: bool = True


@dataclass(frozen=True)
class IntegerField(Field):
    pass


@dataclass(frozen=True)
class FloatField(Field):
    pass


@dataclass(frozen=True)
class BooleanField(Field):
    pass


@dataclass(frozen=True)
class DateTimeField(Field):
    pass


@dataclass(frozen=True)
class GeoPointField(Field):
    """위경도 필드. 값은 {"latitude": ..., "longitude": ...} 형태."""


@dataclass(frozen=True)
class ObjectField(Field):
    """하위 필드를 가지는 객체 필드."""

    fields: Mapping[str, Field] = field(default_factory=dict)


def fields_by_name(*fields: Field) -> dict[str, Field]:
    """필드 목록을 {name: field} 매핑으로 변환."""
    return {f.name: f for f in fields}


@dataclass(frozen=True)
class Index:
    """인덱스 스키마.

    Attributes:
        name: 엔진 인덱스명
        fields: {필드명: Field} (선언 순서 유지)
    """

    name: str
    fields: Mapping[str, Field]

    def __post_init__(self) -> None:
        identifiers = [f for f in self.fields.values() if isinstance(f, IdentifierField)]
        if len(identifiers) != 1:
            raise ValueError(
                f'Index "{self.name}" must define exactly one identifier field, '
                f"got {len(identifiers)}."
            )

    def get_identifier_field(self) -> IdentifierField:
        """식별자 필드 반환."""
        return next(f for f in self.fields.values() if isinstance(f, IdentifierField))

    def get_field_by_path(self, path: str) -> Field:
        """점(.) 경로로 필드 조회. ObjectField를 따라 내려갑니다."""
        fields: Mapping[str, Field] = self.fields
        current: Field | None = None
        for part in path.split("."):
            current = fields.get(part)
            if current is None:
                raise ValueError(f'Field "{path}" not found in index "{self.name}".')
            fields = current.fields if isinstance(current, ObjectField) else {}
        return current  # type: ignore[return-value]
