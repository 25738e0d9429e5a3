"""
Searchstore 팩토리.

DSN 또는 ESConfig로 Elasticsearch 어댑터(indexer + searcher)를 생성합니다.

DSN 형식:
    elasticsearch://[user:pass@]host[:port]
    elasticsearch://          (host가 비어 있으면 전달받은 client 사용)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote, urlsplit

from elasticsearch import Elasticsearch

from core.marshaller import Marshaller
from searchstore.client import create_es_client
from searchstore.config import ESConfig
from searchstore.indexer import ElasticsearchIndexer
from searchstore.search import ElasticsearchSearcher
from searchstore.search.searcher import GEO_POINT_FIELD_CONFIG

DEFAULT_PORT = 9200


@dataclass(frozen=True)
class ElasticsearchAdapter:
    """Elasticsearch 관련 컴포넌트 묶음 (AdapterProtocol 구현)."""

    es: Elasticsearch
    indexer: ElasticsearchIndexer
    searcher: ElasticsearchSearcher

    @classmethod
    def from_client(cls, es: Elasticsearch) -> ElasticsearchAdapter:
        marshaller = Marshaller(geo_point_field_config=GEO_POINT_FIELD_CONFIG)
        return cls(
            es=es,
            indexer=ElasticsearchIndexer(es, marshaller),
            searcher=ElasticsearchSearcher(es, marshaller),
        )


def parse_dsn(dsn: str) -> dict[str, Any]:
    """DSN 문자열을 {host, port, user, pass}로 분해."""
    parts = urlsplit(dsn)
    if parts.scheme != "elasticsearch":
        raise ValueError(f'Unsupported DSN scheme "{parts.scheme}", expected "elasticsearch".')

    parsed: dict[str, Any] = {"host": parts.hostname or ""}
    if parts.port is not None:
        parsed["port"] = parts.port
    if parts.username:
        parsed["user"] = unquote(parts.username)
    if parts.password:
        parsed["pass"] = unquote(parts.password)
    return parsed


def create_client_from_dsn(dsn: dict[str, Any], client: Elasticsearch | None = None) -> Elasticsearch:
    """파싱된 DSN으로 클라이언트 생성.

    Args:
        dsn: parse_dsn 결과
        client: host가 비어 있을 때 사용할 기존 클라이언트

    Raises:
        ValueError: host가 비어 있는데 client도 없는 경우.
    """
    if not dsn["host"]:
        if not isinstance(client, Elasticsearch):
            raise ValueError("Unknown Elasticsearch client.")
        return client

    hosts = [f"http://{dsn['host']}:{dsn.get('port', DEFAULT_PORT)}"]
    user = dsn.get("user", "")
    password = dsn.get("pass", "")

    if user or password:
        return Elasticsearch(hosts=hosts, basic_auth=(user, password))
    return Elasticsearch(hosts=hosts)


def create_adapter(dsn: str, client: Elasticsearch | None = None) -> ElasticsearchAdapter:
    """DSN으로 어댑터 생성."""
    return ElasticsearchAdapter.from_client(create_client_from_dsn(parse_dsn(dsn), client))


def create_adapter_from_config(config: ESConfig | None = None) -> ElasticsearchAdapter:
    """ESConfig(환경변수)로 어댑터 생성."""
    return ElasticsearchAdapter.from_client(create_es_client(config or ESConfig()))
