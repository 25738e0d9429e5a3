from __future__ import annotations

import pytest

from core.search import Result, Search


def test_result_total_may_exceed_documents():
    result = Result([{"id": "1"}], 10)

    assert list(result) == [{"id": "1"}]
    assert result.total() == 10


def test_empty_result():
    result = Result.create_empty()

    assert list(result) == []
    assert result.total() == 0


@pytest.mark.parametrize("kwargs", [{"limit": -1}, {"offset": -5}])
def test_search_rejects_negative_pagination(blog_index, kwargs):
    with pytest.raises(ValueError):
        Search(blog_index, **kwargs)
