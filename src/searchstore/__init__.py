"""Elasticsearch 기반 검색 어댑터.

core의 엔진 독립 검색 추상화(조건 트리, Search, Result)를
Elasticsearch query DSL과 bulk API로 변환합니다.

주요 컴포넌트:
    - ElasticsearchSearcher: 조건 컴파일, 단일 ID 조회 최적화, 결과 변환
    - ElasticsearchIndexer: 단건 저장/삭제, 청크 단위 bulk
    - ElasticsearchAdapter: indexer + searcher 묶음

Usage:
    >>> from core import Engine, EqualCondition
    >>> from searchstore import create_adapter
    >>>
    >>> adapter = create_adapter("elasticsearch://localhost:9200")
    >>> engine = Engine(adapter, {"blog": blog_index})
    >>> engine.save_document("blog", {"id": "1", "title": "Hello"}, {"confirm": True})
    >>> result = engine.create_search_builder("blog").add_filter(EqualCondition("title", "Hello")).get_result()
"""

from searchstore.client import check_connection, create_es_client
from searchstore.config import ESConfig
from searchstore.factory import (
    ElasticsearchAdapter,
    create_adapter,
    create_adapter_from_config,
    parse_dsn,
)
from searchstore.fields import resolve_filter_field
from searchstore.indexer import ElasticsearchIndexer, split_bulk
from searchstore.search import ElasticsearchSearcher, HitDocuments, compile_conditions

__all__ = [
    # Config
    "ESConfig",
    # Client
    "create_es_client",
    "check_connection",
    # Adapter
    "ElasticsearchAdapter",
    "create_adapter",
    "create_adapter_from_config",
    "parse_dsn",
    # Search
    "ElasticsearchSearcher",
    "HitDocuments",
    "compile_conditions",
    "resolve_filter_field",
    # Indexer
    "ElasticsearchIndexer",
    "split_bulk",
]
