"""bulk 요청 분할 유틸리티."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import TypeVar

T = TypeVar("T")


def split_bulk(items: Iterable[T], bulk_size: int) -> Iterator[list[T]]:
    """입력을 최대 bulk_size개씩 잘라 순서대로 반환.

    입력 전체를 메모리에 올리지 않으므로 무한 이터레이터도 받을 수 있습니다.
    마지막 청크만 bulk_size보다 작을 수 있습니다.
    """
    if bulk_size < 1:
        raise ValueError(f"bulk_size must be >= 1, got {bulk_size}")

    iterator = iter(items)
    while chunk := list(islice(iterator, bulk_size)):
        yield chunk
