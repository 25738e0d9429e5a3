"""Core 타입 및 프로토콜.

이 모듈은 인프라에 의존하지 않습니다.
searchstore(Elasticsearch 어댑터), migrations 등 어디서든 import할 수 있습니다.
"""

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
from core.engine import Engine
from core.errors import (
    BulkOperationError,
    DocumentDeleteError,
    DocumentNotFoundError,
    UnsupportedConditionError,
)
from core.marshaller import Marshaller
from core.protocols import AdapterProtocol, IndexerProtocol, SearcherProtocol, WriteOptions
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
    fields_by_name,
)
from core.search import Result, Search, SearchBuilder
from core.task import SyncTask

__all__ = [
    # Schema
    "Index",
    "Field",
    "IdentifierField",
    "TextField",
    "IntegerField",
    "FloatField",
    "BooleanField",
    "DateTimeField",
    "GeoPointField",
    "ObjectField",
    "fields_by_name",
    # Conditions
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
    # Search
    "Search",
    "SearchBuilder",
    "Result",
    "SyncTask",
    "Marshaller",
    # Protocols
    "WriteOptions",
    "IndexerProtocol",
    "SearcherProtocol",
    "AdapterProtocol",
    "Engine",
    # Errors
    "UnsupportedConditionError",
    "DocumentDeleteError",
    "BulkOperationError",
    "DocumentNotFoundError",
]
