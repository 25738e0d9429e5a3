"""Elasticsearch 인덱스 마이그레이션 관리.

Index 스키마 목록을 받아 ES 인덱스 DDL 작업을 수행합니다.

Usage:
    python -m migrations.migrate --schema myapp.search:INDEXES status
    python -m migrations.migrate --schema myapp.search:INDEXES create
    python -m migrations.migrate --schema myapp.search:INDEXES drop --confirm
    python -m migrations.migrate --schema myapp.search:INDEXES recreate --confirm

`--schema`는 {이름: Index} 매핑을 가리키는 "모듈:속성" 경로입니다.

환경변수:
    ES_URL: Elasticsearch URL
    ES_USERNAME: Basic Auth 사용자명 (선택)
    ES_PASSWORD: Basic Auth 비밀번호 (선택)
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass

from elasticsearch import Elasticsearch

from core.schema import Index
from searchstore.client import create_es_client
from searchstore.config import ESConfig

from .mappings import index_mapping

logger = logging.getLogger(__name__)


@dataclass
class IndexInfo:
    """인덱스 정보."""

    name: str
    exists: bool
    doc_count: int = 0
    size_bytes: int = 0


class Migrator:
    """Elasticsearch 인덱스 마이그레이션 관리자."""

    def __init__(self, es: Elasticsearch, indexes: Mapping[str, Index]):
        self.es = es
        self.indexes = dict(indexes)

    def _get_index(self, key: str) -> Index:
        try:
            return self.indexes[key]
        except KeyError:
            raise ValueError(f'Index "{key}" is not configured.') from None

    def get_index_info(self, index_name: str) -> IndexInfo:
        """인덱스 정보 조회."""
        if not self.es.indices.exists(index=index_name):
            return IndexInfo(name=index_name, exists=False)

        stats = self.es.indices.stats(index=index_name)
        index_stats = stats["indices"].get(index_name, {}).get("primaries", {})
        return IndexInfo(
            name=index_name,
            exists=True,
            doc_count=index_stats.get("docs", {}).get("count", 0),
            size_bytes=index_stats.get("store", {}).get("size_in_bytes", 0),
        )

    def status(self) -> dict[str, IndexInfo]:
        """모든 관리 인덱스 상태 조회."""
        return {key: self.get_index_info(index.name) for key, index in self.indexes.items()}

    def create_index(self, key: str, *, skip_existing: bool = True) -> bool:
        """단일 인덱스 생성."""
        index = self._get_index(key)

        if self.es.indices.exists(index=index.name):
            if skip_existing:
                return True
            raise ValueError(f"인덱스 '{index.name}'이 이미 존재합니다.")

        self.es.indices.create(index=index.name, **index_mapping(index))
        logger.info(f"Created index {index.name}")
        return True

    def create_all(self, *, skip_existing: bool = True) -> dict[str, bool]:
        """모든 인덱스 생성."""
        return {key: self.create_index(key, skip_existing=skip_existing) for key in self.indexes}

    def drop_index(self, key: str) -> bool:
        """단일 인덱스 삭제."""
        index = self._get_index(key)

        if self.es.indices.exists(index=index.name):
            self.es.indices.delete(index=index.name)
            logger.info(f"Dropped index {index.name}")
        return True

    def drop_all(self) -> dict[str, bool]:
        """모든 인덱스 삭제."""
        return {key: self.drop_index(key) for key in self.indexes}

    def recreate_all(self) -> dict[str, bool]:
        """모든 인덱스 재생성 (drop + create)."""
        self.drop_all()
        return self.create_all(skip_existing=False)


# =============================================================================
# CLI
# =============================================================================


def load_indexes(path: str) -> dict[str, Index]:
    """"모듈:속성" 경로에서 {이름: Index} 매핑 로드."""
    module_name, _, attr = path.partition(":")
    if not attr:
        raise ValueError(f'Schema path must look like "module:attribute", got "{path}".')
    return dict(getattr(importlib.import_module(module_name), attr))


def _format_bytes(size_bytes: int | float) -> str:
    """바이트를 읽기 쉬운 형식으로 변환."""
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


def _print_results(results: dict[str, bool]) -> None:
    for key, success in results.items():
        emoji = "✅" if success else "❌"
        print(f"   {emoji} {key}")
    print("\n✨ Done!")


def cmd_status(migrator: Migrator) -> int:
    """인덱스 상태 출력."""
    print("\n📊 Elasticsearch Index Status")
    print("=" * 50)

    for key, info in migrator.status().items():
        emoji = "✅" if info.exists else "❌"
        print(f"\n{emoji} {key}: {info.name}")
        if info.exists:
            print(f"   Documents: {info.doc_count:,}")
            print(f"   Size: {_format_bytes(info.size_bytes)}")

    print()
    return 0


def cmd_create(migrator: Migrator) -> int:
    """인덱스 생성."""
    print("\n🔧 Creating indices...")
    results = migrator.create_all(skip_existing=True)
    _print_results(results)
    return 0 if all(results.values()) else 1


def cmd_drop(migrator: Migrator, confirm: bool) -> int:
    """인덱스 삭제."""
    if not confirm:
        print("\n⚠️  --confirm 플래그를 추가해야 삭제됩니다.")
        print("   이 작업은 모든 데이터를 삭제합니다!")
        return 1

    print("\n🗑️  Dropping indices...")
    _print_results(migrator.drop_all())
    return 0


def cmd_recreate(migrator: Migrator, confirm: bool) -> int:
    """인덱스 재생성."""
    if not confirm:
        print("\n⚠️  --confirm 플래그를 추가해야 재생성됩니다.")
        print("   이 작업은 모든 데이터를 삭제합니다!")
        return 1

    print("\n♻️  Recreating indices...")
    _print_results(migrator.recreate_all())
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI 진입점."""
    parser = argparse.ArgumentParser(
        description="Elasticsearch 인덱스 마이그레이션 도구",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
환경변수:
  ES_URL             Elasticsearch URL
  ES_USERNAME        Basic Auth 사용자명
  ES_PASSWORD        Basic Auth 비밀번호
""",
    )
    parser.add_argument("--schema", required=True, help='{이름: Index} 매핑 경로 ("모듈:속성")')
    subparsers = parser.add_subparsers(dest="command", help="명령어")

    subparsers.add_parser("status", help="인덱스 상태 확인")
    subparsers.add_parser("create", help="인덱스 생성")

    drop_parser = subparsers.add_parser("drop", help="인덱스 삭제")
    drop_parser.add_argument("--confirm", action="store_true", help="삭제 확인 (필수)")

    recreate_parser = subparsers.add_parser("recreate", help="인덱스 재생성")
    recreate_parser.add_argument("--confirm", action="store_true", help="재생성 확인 (필수)")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    indexes = load_indexes(args.schema)

    # ES 연결
    cfg = ESConfig()
    try:
        es = create_es_client(cfg)
        if not es.ping():
            print(f"\n❌ Elasticsearch 연결 실패: {cfg.es_url}")
            return 1
        print(f"\n🔗 Connected to: {cfg.es_url}")
    except Exception as e:
        print(f"\n❌ Elasticsearch 연결 오류: {e}")
        return 1

    migrator = Migrator(es, indexes)

    if args.command == "status":
        return cmd_status(migrator)
    elif args.command == "create":
        return cmd_create(migrator)
    elif args.command == "drop":
        return cmd_drop(migrator, args.confirm)
    elif args.command == "recreate":
        return cmd_recreate(migrator, args.confirm)

    return 1


if __name__ == "__main__":
    sys.exit(main())
