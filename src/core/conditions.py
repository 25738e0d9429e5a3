"""검색 필터 조건 정의.

조건은 닫힌 타입 집합(Condition union)으로 표현되며,
AndCondition/OrCondition으로 트리를 구성합니다.

Usage:
    >>> OrCondition(
    ...     EqualCondition("status", "active"),
    ...     AndCondition(GreaterThanCondition("age", 18), LessThanCondition("age", 65)),
    ... )
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class IdentifierCondition:
    identifier: str


@dataclass(frozen=True)
class SearchCondition:
    """전문 검색 (query string)."""

    query: str


@dataclass(frozen=True)
class EqualCondition:
    field: str
    value: Any


@dataclass(frozen=True)
class NotEqualCondition:
    field: str
    value: Any


@dataclass(frozen=True)
class GreaterThanCondition:
    field: str
    value: Any


@dataclass(frozen=True)
class GreaterThanEqualCondition:
    field: str
    value: Any


@dataclass(frozen=True)
class LessThanCondition:
    field: str
    value: Any


@dataclass(frozen=True)
class LessThanEqualCondition:
    field: str
    value: Any


@dataclass(frozen=True)
class InCondition:
    field: str
    values: Sequence[Any]


@dataclass(frozen=True)
class NotInCondition:
    field: str
    values: Sequence[Any]


@dataclass(frozen=True)
class GeoDistanceCondition:
    """중심점으로부터 distance(미터) 이내의 문서."""

    field: str
    latitude: float
    longitude: float
    distance: int


@dataclass(frozen=True)
class GeoBoundingBoxCondition:
    """위경도 사각형 영역 내의 문서."""

    field: str
    north_latitude: float
    east_longitude: float
    south_latitude: float
    west_longitude: float


@dataclass(frozen=True, init=False)
class AndCondition:
    """하위 조건을 모두 만족 (AND)."""

    conditions: tuple[Condition, ...]

    def __init__(self, *conditions: Condition) -> None:
        object.__setattr__(self, "conditions", tuple(conditions))


@dataclass(frozen=True, init=False)
class OrCondition:
    """하위 조건 중 하나 이상 만족 (OR)."""

    conditions: tuple[Condition, ...]

    def __init__(self, *conditions: Condition) -> None:
        object.__setattr__(self, "conditions", tuple(conditions))


Condition = Union[
    IdentifierCondition,
    SearchCondition,
    EqualCondition,
    NotEqualCondition,
    GreaterThanCondition,
    GreaterThanEqualCondition,
    LessThanCondition,
    LessThanEqualCondition,
    InCondition,
    NotInCondition,
    GeoDistanceCondition,
    GeoBoundingBoxCondition,
    AndCondition,
    OrCondition,
]

__all__ = [
    "Condition",
    "IdentifierCondition",
    "SearchCondition",
    "EqualCondition",
    "NotEqualCondition",
    "GreaterThanCondition",
    "GreaterThanEqualCondition",
    "LessThanCondition",
    "LessThanEqualCondition",
    "InCondition",
    "NotInCondition",
    "GeoDistanceCondition",
    "GeoBoundingBoxCondition",
    "AndCondition",
    "OrCondition",
]
