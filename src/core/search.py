"""검색 요청/결과 타입과 SearchBuilder."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from core.conditions import Condition
from core.schema import Index

if TYPE_CHECKING:
    from core.protocols import SearcherProtocol

SortDirection = Literal["asc", "desc"]

Document = dict[str, Any]


@dataclass
class Search:
    """검색 요청.

    Attributes:
        index: 대상 인덱스 스키마
        filters: 최상위 필터 목록 (AND 결합)
        sort_bys: {필드: "asc"|"desc"} (입력 순서 유지)
        limit: 최대 반환 수. 0이면 엔진 기본값 사용
        offset: 건너뛸 문서 수
    """

    index: Index
    filters: list[Condition] = field(default_factory=list)
    sort_bys: dict[str, SortDirection] = field(default_factory=dict)
    limit: int = 0
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")


class Result(Iterable[Document]):
    """검색 결과.

    documents는 지연(lazy) 시퀀스이고, total은 엔진이 보고한 전체 매치 수입니다.
    페이지네이션 때문에 total이 실제 반환 문서 수보다 클 수 있습니다.
    """

    def __init__(self, documents: Iterable[Document], total: int):
        self._documents = documents
        self._total = total

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def total(self) -> int:
        return self._total

    @classmethod
    def create_empty(cls) -> Result:
        return cls([], 0)


class SearchBuilder:
    """Search를 단계적으로 조립하는 빌더.

    Example:
        >>> result = (
        ...     SearchBuilder(searcher, index)
        ...     .add_filter(EqualCondition("status", "active"))
        ...     .add_sort_by("created_at", "desc")
        ...     .limit(10)
        ...     .get_result()
        ... )
    """

    def __init__(self, searcher: SearcherProtocol, index: Index):
        self._searcher = searcher
        self._index = index
        self._filters: list[Condition] = []
        self._sort_bys: dict[str, SortDirection] = {}
        self._limit = 0
        self._offset = 0

    def add_filter(self, condition: Condition) -> SearchBuilder:
        self._filters.append(condition)
        return self

    def add_sort_by(self, field_name: str, direction: str = "asc") -> SearchBuilder:
        if direction not in ("asc", "desc"):
            raise ValueError(f'Sort direction must be "asc" or "desc", got "{direction}".')
        self._sort_bys[field_name] = direction  # type: ignore[assignment]
        return self

    def limit(self, limit: int) -> SearchBuilder:
        self._limit = limit
        return self

    def offset(self, offset: int) -> SearchBuilder:
        self._offset = offset
        return self

    def get_search(self) -> Search:
        return Search(
            index=self._index,
            filters=list(self._filters),
            sort_bys=dict(self._sort_bys),
            limit=self._limit,
            offset=self._offset,
        )

    def get_result(self) -> Result:
        return self._searcher.search(self.get_search())
