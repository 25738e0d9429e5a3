"""Search layer: 조건 컴파일과 Elasticsearch 검색 실행."""

from .compiler import compile_conditions
from .searcher import ElasticsearchSearcher, HitDocuments

__all__ = [
    "compile_conditions",
    "ElasticsearchSearcher",
    "HitDocuments",
]
