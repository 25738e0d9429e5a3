from __future__ import annotations

import pytest

from core.schema import (
    BooleanField,
    GeoPointField,
    IdentifierField,
    Index,
    IntegerField,
    ObjectField,
    TextField,
    fields_by_name,
)
from fakes import FakeElasticsearch


@pytest.fixture
def blog_index() -> Index:
    return Index(
        name="blog",
        fields=fields_by_name(
            IdentifierField("id"),
            TextField("title", filterable=True, sortable=True),
            IntegerField("rating", filterable=True, sortable=True),
            BooleanField("published", filterable=True),
            TextField("tags", multiple=True, filterable=True),
            GeoPointField("location", filterable=True),
            ObjectField(
                "author",
                fields=fields_by_name(
                    TextField("name", filterable=True),
                    IntegerField("age", filterable=True),
                ),
            ),
        ),
    )


@pytest.fixture
def es() -> FakeElasticsearch:
    return FakeElasticsearch()
