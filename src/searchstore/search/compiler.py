"""필터 조건 트리 -> Elasticsearch query DSL 컴파일러.

조건 하나는 query 조각(fragment) 하나가 됩니다.
조각이 0개면 빈 query({}), 1개면 그 조각 그대로,
2개 이상이면 bool 그룹(must: AND / should: OR)으로 감쌉니다.
단일 조각을 bool로 감싸면 스코어링이 달라지므로 감싸지 않습니다.

Example:
    >>> compile_conditions(index, [EqualCondition("status", "active"), GreaterThanCondition("age", 18)])
    {'bool': {'must': [{'term': {'status': {'value': 'active'}}}, {'range': {'age': {'gt': 18}}}]}}
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from core.conditions import (
    AndCondition,
    Condition,
    EqualCondition,
    GeoBoundingBoxCondition,
    GeoDistanceCondition,
    GreaterThanCondition,
    GreaterThanEqualCondition,
    IdentifierCondition,
    InCondition,
    LessThanCondition,
    LessThanEqualCondition,
    NotEqualCondition,
    NotInCondition,
    OrCondition,
    SearchCondition,
)
from core.errors import UnsupportedConditionError
from core.schema import Index

from ..fields import resolve_filter_field

Query = dict[str, Any]

_RANGE_OPERATORS: dict[type, str] = {
    GreaterThanCondition: "gt",
    GreaterThanEqualCondition: "gte",
    LessThanCondition: "lt",
    LessThanEqualCondition: "lte",
}


def compile_conditions(
    index: Index, conditions: Sequence[Condition], conjunctive: bool = True
) -> Query:
    """조건 목록을 하나의 query로 컴파일.

    Args:
        index: 필드 해석에 사용할 인덱스 스키마
        conditions: 조건 목록
        conjunctive: True면 AND(must), False면 OR(should)로 결합

    Returns:
        query DSL. 조건이 없으면 빈 dict.

    Raises:
        UnsupportedConditionError: 알 수 없는 조건 타입
    """
    fragments: list[Query] = []
    for condition in conditions:
        fragment = _compile_condition(index, condition)
        if fragment:
            fragments.append(fragment)
    return _combine(fragments, conjunctive)


def _combine(fragments: list[Query], conjunctive: bool) -> Query:
    if not fragments:
        return {}
    if len(fragments) == 1:
        return fragments[0]
    return {"bool": {"must" if conjunctive else "should": fragments}}


def _compile_condition(index: Index, condition: Condition) -> Query:
    if isinstance(condition, AndCondition):
        return compile_conditions(index, condition.conditions, conjunctive=True)
    if isinstance(condition, OrCondition):
        return compile_conditions(index, condition.conditions, conjunctive=False)
    if isinstance(condition, IdentifierCondition):
        return {"ids": {"values": [condition.identifier]}}
    if isinstance(condition, SearchCondition):
        return {"bool": {"must": {"query_string": {"query": condition.query}}}}
    if isinstance(condition, EqualCondition):
        return {"term": {resolve_filter_field(index, condition.field): {"value": condition.value}}}
    if isinstance(condition, NotEqualCondition):
        field_name = resolve_filter_field(index, condition.field)
        return {"bool": {"must_not": {"term": {field_name: {"value": condition.value}}}}}
    if isinstance(
        condition,
        (GreaterThanCondition, GreaterThanEqualCondition, LessThanCondition, LessThanEqualCondition),
    ):
        operator = next(
            _RANGE_OPERATORS[t] for t in type(condition).__mro__ if t in _RANGE_OPERATORS
        )
        return {"range": {resolve_filter_field(index, condition.field): {operator: condition.value}}}
    if isinstance(condition, InCondition):
        return {"terms": {resolve_filter_field(index, condition.field): list(condition.values)}}
    if isinstance(condition, NotInCondition):
        field_name = resolve_filter_field(index, condition.field)
        return {"bool": {"must_not": {"terms": {field_name: list(condition.values)}}}}
    if isinstance(condition, GeoDistanceCondition):
        return {
            "geo_distance": {
                "distance": condition.distance,
                resolve_filter_field(index, condition.field): {
                    "lat": condition.latitude,
                    "lon": condition.longitude,
                },
            }
        }
    if isinstance(condition, GeoBoundingBoxCondition):
        return {
            "geo_bounding_box": {
                resolve_filter_field(index, condition.field): {
                    "top_left": {
                        "lat": condition.north_latitude,
                        "lon": condition.west_longitude,
                    },
                    "bottom_right": {
                        "lat": condition.south_latitude,
                        "lon": condition.east_longitude,
                    },
                }
            }
        }
    raise UnsupportedConditionError(condition)
