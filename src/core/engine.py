"""인덱스 이름 기반 검색 엔진 파사드.

어댑터(indexer + searcher)와 스키마 목록을 묶어
호출부가 Index 객체를 직접 다루지 않아도 되게 합니다.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from core.conditions import IdentifierCondition
from core.errors import DocumentNotFoundError
from core.protocols import AdapterProtocol, WriteOptions
from core.schema import Index
from core.search import Search, SearchBuilder
from core.task import SyncTask


class Engine:
    def __init__(self, adapter: AdapterProtocol, indexes: Mapping[str, Index]):
        self.adapter = adapter
        self.indexes = dict(indexes)

    def get_index(self, index_name: str) -> Index:
        try:
            return self.indexes[index_name]
        except KeyError:
            raise ValueError(f'Index "{index_name}" is not configured.') from None

    def save_document(
        self, index_name: str, document: dict[str, Any], options: WriteOptions | None = None
    ) -> SyncTask | None:
        return self.adapter.indexer.save(self.get_index(index_name), document, options)

    def delete_document(
        self, index_name: str, identifier: str, options: WriteOptions | None = None
    ) -> SyncTask | None:
        return self.adapter.indexer.delete(self.get_index(index_name), identifier, options)

    def bulk(
        self,
        index_name: str,
        save_documents: Iterable[dict[str, Any]],
        delete_document_identifiers: Iterable[str],
        bulk_size: int = 100,
        options: WriteOptions | None = None,
    ) -> SyncTask | None:
        """저장 청크를 모두 처리한 뒤 삭제 청크를 처리합니다."""
        return self.adapter.indexer.bulk(
            self.get_index(index_name),
            save_documents,
            delete_document_identifiers,
            bulk_size,
            options,
        )

    def get_document(self, index_name: str, identifier: str) -> dict[str, Any]:
        """ID로 단일 문서 조회. 없으면 DocumentNotFoundError."""
        search = Search(
            index=self.get_index(index_name),
            filters=[IdentifierCondition(identifier)],
            limit=1,
        )
        for document in self.adapter.searcher.search(search):
            return document
        raise DocumentNotFoundError(identifier, index_name)

    def create_search_builder(self, index_name: str) -> SearchBuilder:
        return SearchBuilder(self.adapter.searcher, self.get_index(index_name))
