"""Elasticsearch 클라이언트 팩토리."""

from __future__ import annotations

import logging

from elasticsearch import Elasticsearch

from .config import ESConfig

logger = logging.getLogger(__name__)


def create_es_client(cfg: ESConfig | None = None) -> Elasticsearch:
    """Elasticsearch 클라이언트 생성.

    Args:
        cfg: ES 설정. None이면 기본 설정(환경변수) 사용.

    Returns:
        Elasticsearch 클라이언트 인스턴스.

    Raises:
        ValueError: ES_URL이 설정되지 않은 경우.
    """
    if cfg is None:
        cfg = ESConfig()

    if not cfg.es_url:
        raise ValueError("ES_URL 환경변수를 설정하세요.")

    # Basic Auth 사용
    if cfg.es_username and cfg.es_password:
        return Elasticsearch(
            hosts=[cfg.es_url],
            basic_auth=(cfg.es_username, cfg.es_password),
            verify_certs=cfg.verify_certs,
            request_timeout=cfg.request_timeout_s,
        )

    return Elasticsearch(
        hosts=[cfg.es_url],
        verify_certs=cfg.verify_certs,
        request_timeout=cfg.request_timeout_s,
    )


def check_connection(es: Elasticsearch) -> bool:
    """ES 연결 상태 확인.

    Returns:
        연결 성공 여부.
    """
    try:
        return bool(es.ping())
    except Exception as e:
        logger.warning(f"Elasticsearch ping failed: {e}")
        return False
