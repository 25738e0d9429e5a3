"""Indexer layer: 단건/대량 문서 쓰기."""

from .bulk import split_bulk
from .indexer import ElasticsearchIndexer

__all__ = [
    "ElasticsearchIndexer",
    "split_bulk",
]
