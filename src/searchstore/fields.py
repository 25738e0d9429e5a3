"""필터 필드명 해석."""

from __future__ import annotations

from core.schema import Index, TextField

RAW_SUFFIX = ".raw"


def resolve_filter_field(index: Index, path: str) -> str:
    """필터에 쓸 엔진 필드명 반환.

    텍스트 필드는 분석되므로 정확 일치용 `raw` 하위 필드로 보냅니다.
    그 외 필드는 경로를 그대로 사용합니다.
    """
    if isinstance(index.get_field_by_path(path), TextField):
        return path + RAW_SUFFIX
    return path
