"""Elasticsearch 문서 저장/삭제.

쓰기 옵션의 "confirm"이 True면 refresh="wait_for"로 요청해
변경이 검색에 반영된 뒤 반환하고, SyncTask를 돌려줍니다.
False(기본)면 refresh 없이 요청하고 None을 반환합니다.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Literal

from elasticsearch import Elasticsearch, NotFoundError

from core.errors import BulkOperationError, DocumentDeleteError
from core.marshaller import Marshaller
from core.protocols import WriteOptions, wants_confirmation
from core.schema import Index
from core.task import SyncTask

from ..search.searcher import GEO_POINT_FIELD_CONFIG
from .bulk import split_bulk

logger = logging.getLogger(__name__)


def _refresh(confirm: bool) -> Literal["wait_for", False]:
    return "wait_for" if confirm else False


class ElasticsearchIndexer:
    """IndexerProtocol 구현체."""

    def __init__(self, es: Elasticsearch, marshaller: Marshaller | None = None):
        self.es = es
        self.marshaller = marshaller or Marshaller(geo_point_field_config=GEO_POINT_FIELD_CONFIG)

    def save(
        self, index: Index, document: dict[str, Any], options: WriteOptions | None = None
    ) -> SyncTask | None:
        """단일 문서 upsert.

        식별자가 없으면 엔진이 부여한 ID를 사용합니다.
        """
        confirm = wants_confirmation(options)
        identifier_field = index.get_identifier_field()
        identifier = document.get(identifier_field.name)

        resp = self.es.index(
            index=index.name,
            id=str(identifier) if identifier is not None else None,
            document=self.marshaller.marshall(index.fields, document),
            refresh=_refresh(confirm),
        )

        if not confirm:
            return None

        return SyncTask({**document, identifier_field.name: resp["_id"]})

    def delete(
        self, index: Index, identifier: str, options: WriteOptions | None = None
    ) -> SyncTask | None:
        """단일 문서 삭제. 결과가 "deleted"가 아니면 DocumentDeleteError."""
        confirm = wants_confirmation(options)

        try:
            resp = self.es.delete(index=index.name, id=identifier, refresh=_refresh(confirm))
        except NotFoundError as e:
            logger.warning(f"Document {identifier} not found in index {index.name}")
            raise DocumentDeleteError(identifier, index.name, "not_found") from e

        if resp["result"] != "deleted":
            logger.warning(
                f"Unexpected delete result {resp['result']!r} for {identifier} in {index.name}"
            )
            raise DocumentDeleteError(identifier, index.name, resp["result"])

        if not confirm:
            return None

        return SyncTask(None)

    def bulk(
        self,
        index: Index,
        save_documents: Iterable[dict[str, Any]],
        delete_document_identifiers: Iterable[str],
        bulk_size: int = 100,
        options: WriteOptions | None = None,
    ) -> SyncTask | None:
        """대량 저장/삭제.

        저장 청크를 입력 순서대로 모두 처리한 뒤에 삭제 청크를 처리합니다.
        같은 ID가 양쪽에 있으면 삭제가 마지막에 적용됩니다.
        청크 응답의 errors 플래그가 켜지면 즉시 BulkOperationError를 던지고
        남은 청크는 보내지 않습니다.
        """
        confirm = wants_confirmation(options)
        identifier_name = index.get_identifier_field().name

        for chunk_no, documents in enumerate(split_bulk(save_documents, bulk_size)):
            operations: list[dict[str, Any]] = []
            for document in documents:
                raw = self.marshaller.marshall(index.fields, document)
                action: dict[str, Any] = {"_index": index.name}
                if raw.get(identifier_name) is not None:
                    action["_id"] = str(raw[identifier_name])
                operations.append({"index": action})
                operations.append(raw)

            logger.debug(f"Bulk indexing chunk {chunk_no} ({len(documents)} docs) into {index.name}")
            self._send_bulk(index, operations, confirm, "indexing")

        for chunk_no, identifiers in enumerate(split_bulk(delete_document_identifiers, bulk_size)):
            operations = [
                {"delete": {"_index": index.name, "_id": identifier}} for identifier in identifiers
            ]

            logger.debug(f"Bulk deleting chunk {chunk_no} ({len(identifiers)} ids) from {index.name}")
            self._send_bulk(index, operations, confirm, "deleting")

        if not confirm:
            return None

        return SyncTask(None)

    def _send_bulk(
        self, index: Index, operations: list[dict[str, Any]], confirm: bool, operation: str
    ) -> None:
        resp = self.es.bulk(operations=operations, refresh=_refresh(confirm))
        if resp["errors"]:
            logger.warning(f"Bulk {operation} reported errors for index {index.name}")
            raise BulkOperationError(index.name, operation)
