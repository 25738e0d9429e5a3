"""검색 계층 예외 타입.

전송 계층(elasticsearch) 예외는 감싸지 않고 그대로 전파합니다.
"""

from __future__ import annotations


class UnsupportedConditionError(NotImplementedError):
    """컴파일러가 모르는 조건 타입."""

    def __init__(self, condition: object):
        self.condition = condition
        super().__init__(f"{type(condition).__name__} filter not implemented.")


class DocumentDeleteError(RuntimeError):
    """삭제 결과가 "deleted"가 아닌 경우."""

    def __init__(self, identifier: str, index_name: str, result: str | None = None):
        self.identifier = identifier
        self.index_name = index_name
        self.result = result
        super().__init__(
            f'Unexpected error while delete document with identifier "{identifier}" '
            f'from Index "{index_name}".'
        )


class BulkOperationError(RuntimeError):
    """bulk 청크 응답의 errors 플래그가 켜진 경우. 개별 항목은 특정하지 않습니다."""

    def __init__(self, index_name: str, operation: str):
        self.index_name = index_name
        self.operation = operation
        super().__init__(
            f'Unexpected error while bulk {operation} documents for index "{index_name}".'
        )


class DocumentNotFoundError(LookupError):
    """Engine.get_document에서 문서가 없을 때."""

    def __init__(self, identifier: str, index_name: str):
        self.identifier = identifier
        self.index_name = index_name
        super().__init__(f'Document with identifier "{identifier}" not found in index "{index_name}".')
