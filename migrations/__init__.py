"""Elasticsearch 인덱스 마이그레이션 모듈.

Index 스키마로부터 매핑을 만들고 인덱스를 생성/삭제합니다.

Usage:
    python -m migrations.migrate --schema myapp.search:INDEXES create
    python -m migrations.migrate --schema myapp.search:INDEXES status
    python -m migrations.migrate --schema myapp.search:INDEXES drop --confirm
"""

from .mappings import field_mapping, index_mapping
from .migrate import IndexInfo, Migrator, load_indexes

__all__ = [
    # Mappings
    "field_mapping",
    "index_mapping",
    # Migration
    "IndexInfo",
    "Migrator",
    "load_indexes",
]
