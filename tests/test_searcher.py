from __future__ import annotations

import pytest
from elasticsearch import ConnectionError as ESConnectionError

from core.conditions import EqualCondition, GreaterThanCondition, IdentifierCondition
from core.search import Search
from fakes import make_not_found
from searchstore.search import ElasticsearchSearcher


def _hit(source):
    return {"_index": "blog", "_id": source["id"], "_source": source}


def test_fast_path_uses_get(es, blog_index):
    es.get_response = _hit({"id": "42", "title": "Hello", "location": {"lat": 1.0, "lon": 2.0}})
    searcher = ElasticsearchSearcher(es)

    result = searcher.search(Search(blog_index, [IdentifierCondition("42")], limit=1))

    assert es.calls == [("get", {"index": "blog", "id": "42"})]
    assert result.total() == 1
    assert list(result) == [
        {"id": "42", "title": "Hello", "location": {"latitude": 1.0, "longitude": 2.0}}
    ]


def test_fast_path_missing_document_is_empty_result(es, blog_index):
    es.get_response = make_not_found()
    searcher = ElasticsearchSearcher(es)

    result = searcher.search(Search(blog_index, [IdentifierCondition("42")], limit=1))

    assert result.total() == 0
    assert list(result) == []


def test_fast_path_propagates_other_transport_errors(es, blog_index):
    es.get_response = ESConnectionError("connection refused")
    searcher = ElasticsearchSearcher(es)

    with pytest.raises(ESConnectionError):
        searcher.search(Search(blog_index, [IdentifierCondition("42")], limit=1))


@pytest.mark.parametrize(
    "search_kwargs",
    [
        {"filters": [IdentifierCondition("42")], "limit": 2},
        {"filters": [IdentifierCondition("42")], "limit": 1, "offset": 1},
        {"filters": [IdentifierCondition("42")]},
        {"filters": [IdentifierCondition("42"), IdentifierCondition("43")], "limit": 1},
        {"filters": [EqualCondition("rating", 1)], "limit": 1},
    ],
)
def test_general_path_when_not_single_identifier_lookup(es, blog_index, search_kwargs):
    searcher = ElasticsearchSearcher(es)

    searcher.search(Search(blog_index, **search_kwargs))

    assert [name for name, _ in es.calls] == ["search"]


def test_empty_filters_match_all(es, blog_index):
    searcher = ElasticsearchSearcher(es)

    searcher.search(Search(blog_index))

    assert es.calls_named("search") == [{"index": "blog", "query": {"match_all": {}}, "sort": []}]


def test_offset_limit_and_sort_order(es, blog_index):
    searcher = ElasticsearchSearcher(es)

    searcher.search(
        Search(
            blog_index,
            [EqualCondition("published", True), GreaterThanCondition("rating", 18)],
            sort_bys={"rating": "desc", "title": "asc"},
            limit=10,
            offset=20,
        )
    )

    (call,) = es.calls_named("search")
    assert call["sort"] == [{"rating": "desc"}, {"title": "asc"}]
    assert call["from_"] == 20
    assert call["size"] == 10
    assert call["query"] == {
        "bool": {
            "must": [
                {"term": {"published": {"value": True}}},
                {"range": {"rating": {"gt": 18}}},
            ]
        }
    }


def test_zero_offset_and_limit_are_omitted(es, blog_index):
    searcher = ElasticsearchSearcher(es)

    searcher.search(Search(blog_index, [EqualCondition("rating", 1)]))

    (call,) = es.calls_named("search")
    assert "from_" not in call
    assert "size" not in call


def test_total_comes_from_engine(es, blog_index):
    es.search_response = {
        "hits": {
            "total": {"value": 57, "relation": "eq"},
            "hits": [_hit({"id": "1"}), _hit({"id": "2"})],
        }
    }
    searcher = ElasticsearchSearcher(es)

    result = searcher.search(Search(blog_index, limit=2))

    assert result.total() == 57
    assert [d["id"] for d in result] == ["1", "2"]


def test_fast_path_matches_general_path(es, blog_index):
    source = {"id": "42", "title": "Hello"}
    es.get_response = _hit(source)
    es.search_response = {"hits": {"total": {"value": 1}, "hits": [_hit(source)]}}
    searcher = ElasticsearchSearcher(es)

    fast = list(searcher.search(Search(blog_index, [IdentifierCondition("42")], limit=1)))
    general = list(searcher.search(Search(blog_index, [IdentifierCondition("42")], limit=2)))

    assert fast == general == [source]


def test_hits_are_unmarshalled_lazily_and_reiterable(blog_index):
    class CountingMarshaller:
        def __init__(self):
            self.calls = 0

        def unmarshall(self, fields, raw):
            self.calls += 1
            return dict(raw)

    marshaller = CountingMarshaller()
    searcher = ElasticsearchSearcher(es=None, marshaller=marshaller)  # type: ignore[arg-type]
    documents = searcher.hits_to_documents(blog_index, [_hit({"id": str(i)}) for i in range(3)])

    assert marshaller.calls == 0
    assert next(iter(documents)) == {"id": "0"}
    assert marshaller.calls == 1

    assert [d["id"] for d in documents] == ["0", "1", "2"]
    assert [d["id"] for d in documents] == ["0", "1", "2"]
    assert marshaller.calls == 7


def test_general_path_propagates_transport_errors(blog_index):
    class Unreachable:
        def search(self, **kwargs):
            raise ESConnectionError("connection refused")

    searcher = ElasticsearchSearcher(Unreachable())  # type: ignore[arg-type]

    with pytest.raises(ESConnectionError):
        searcher.search(Search(blog_index, [EqualCondition("rating", 1)]))
