"""쓰기 작업 완료 핸들."""

from __future__ import annotations

from typing import Any


class SyncTask:
    """이미 완료된(동기) 작업 핸들.

    쓰기 옵션에서 confirm을 요청한 경우에만 반환됩니다.
    """

    def __init__(self, result: Any = None):
        self._result = result

    def wait(self) -> Any:
        """작업 결과 반환 (이미 완료되어 있으므로 블로킹 없음)."""
        return self._result
