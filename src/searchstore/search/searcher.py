"""Elasticsearch 검색기.

Search 요청을 query DSL로 조립해 실행하고, 히트를 문서로 변환합니다.

- 단일 ID 조회(필터가 IdentifierCondition 하나, offset 0, limit 1)는
  search 대신 get API로 바로 조회합니다. 문서가 없으면 빈 결과입니다.
- 그 외에는 필터를 컴파일하고, 비어 있으면 match_all을 사용합니다.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

from elasticsearch import Elasticsearch, NotFoundError

from core.conditions import IdentifierCondition
from core.marshaller import Marshaller
from core.schema import Index
from core.search import Document, Result, Search

from .compiler import compile_conditions

logger = logging.getLogger(__name__)

GEO_POINT_FIELD_CONFIG = {"latitude": "lat", "longitude": "lon"}


class HitDocuments:
    """raw 히트 목록을 문서로 지연 변환하는 시퀀스.

    순회할 때마다 저장된 히트에서 다시 변환합니다 (엔진 재조회 없음).
    중간에 순회를 멈추면 나머지 히트는 변환하지 않습니다.
    """

    def __init__(self, marshaller: Marshaller, index: Index, hits: Sequence[dict[str, Any]]):
        self._marshaller = marshaller
        self._index = index
        self._hits = hits

    def __iter__(self) -> Iterator[Document]:
        for hit in self._hits:
            yield self._marshaller.unmarshall(self._index.fields, hit["_source"])


class ElasticsearchSearcher:
    """SearcherProtocol 구현체."""

    def __init__(self, es: Elasticsearch, marshaller: Marshaller | None = None):
        self.es = es
        self.marshaller = marshaller or Marshaller(geo_point_field_config=GEO_POINT_FIELD_CONFIG)

    def search(self, search: Search) -> Result:
        """검색 수행.

        Args:
            search: 검색 요청

        Returns:
            지연 변환되는 문서 시퀀스와 엔진이 보고한 전체 매치 수.
        """
        if self._is_single_identifier_lookup(search):
            return self._get_by_identifier(search)

        body = self.build_search_body(search)
        logger.debug(f"Searching index {search.index.name}: {body}")

        resp = self.es.search(index=search.index.name, **body)

        return Result(
            self.hits_to_documents(search.index, resp["hits"]["hits"]),
            resp["hits"]["total"]["value"],
        )

    def build_search_body(self, search: Search) -> dict[str, Any]:
        """search API 인자(query, sort, from_, size) 조립."""
        query = compile_conditions(search.index, search.filters, conjunctive=True)
        if not query:
            query = {"match_all": {}}

        body: dict[str, Any] = {
            "query": query,
            "sort": [{field_name: direction} for field_name, direction in search.sort_bys.items()],
        }
        if search.offset != 0:
            body["from_"] = search.offset
        if search.limit != 0:
            body["size"] = search.limit
        return body

    def hits_to_documents(self, index: Index, hits: Sequence[dict[str, Any]]) -> HitDocuments:
        return HitDocuments(self.marshaller, index, hits)

    @staticmethod
    def _is_single_identifier_lookup(search: Search) -> bool:
        return (
            len(search.filters) == 1
            and isinstance(search.filters[0], IdentifierCondition)
            and search.offset == 0
            and search.limit == 1
        )

    def _get_by_identifier(self, search: Search) -> Result:
        identifier = search.filters[0].identifier  # type: ignore[union-attr]
        logger.debug(f"Fetching document {identifier} from index {search.index.name}")
        try:
            resp = self.es.get(index=search.index.name, id=identifier)
        except NotFoundError:
            return Result.create_empty()

        return Result(self.hits_to_documents(search.index, [resp]), 1)
