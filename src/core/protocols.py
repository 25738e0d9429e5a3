"""검색 계층 Protocol(인터페이스) 정의.

이 모듈은 인프라에 의존하지 않습니다.
어댑터(searchstore 등)는 이 Protocol을 상속하지 않아도
시그니처만 맞으면 호환됩니다 (구조적 서브타이핑).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from core.schema import Index
from core.search import Result, Search
from core.task import SyncTask

WriteOptions = Mapping[str, Any]
"""쓰기 옵션. 현재 "confirm"(bool)만 해석하며 나머지 키는 무시합니다."""


class IndexerProtocol(Protocol):
    """문서 저장/삭제 인터페이스."""

    def save(
        self, index: Index, document: dict[str, Any], options: WriteOptions | None = None
    ) -> SyncTask | None: ...

    def delete(
        self, index: Index, identifier: str, options: WriteOptions | None = None
    ) -> SyncTask | None: ...

    def bulk(
        self,
        index: Index,
        save_documents: Iterable[dict[str, Any]],
        delete_document_identifiers: Iterable[str],
        bulk_size: int = 100,
        options: WriteOptions | None = None,
    ) -> SyncTask | None: ...


class SearcherProtocol(Protocol):
    """검색 인터페이스."""

    def search(self, search: Search) -> Result: ...


class AdapterProtocol(Protocol):
    """엔진 어댑터 (indexer + searcher 묶음)."""

    @property
    def indexer(self) -> IndexerProtocol: ...

    @property
    def searcher(self) -> SearcherProtocol: ...


def wants_confirmation(options: WriteOptions | None) -> bool:
    """쓰기 결과를 즉시 조회 가능하게 확정할지 여부."""
    return bool((options or {}).get("confirm", False))
