from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from migrations import Migrator, index_mapping, load_indexes
from migrations.migrate import main


def test_index_mapping(blog_index):
    assert index_mapping(blog_index) == {
        "mappings": {
            "properties": {
                "id": {"type": "keyword"},
                "title": {
                    "type": "text",
                    "fields": {"raw": {"type": "keyword", "ignore_above": 256}},
                },
                "rating": {"type": "integer"},
                "published": {"type": "boolean"},
                "tags": {
                    "type": "text",
                    "fields": {"raw": {"type": "keyword", "ignore_above": 256}},
                },
                "location": {"type": "geo_point"},
                "author": {
                    "type": "object",
                    "properties": {
                        "name": {
                            "type": "text",
                            "fields": {"raw": {"type": "keyword", "ignore_above": 256}},
                        },
                        "age": {"type": "integer"},
                    },
                },
            }
        }
    }


@pytest.fixture
def es_mock():
    es = MagicMock()
    es.indices.exists.return_value = False
    return es


def test_create_all(es_mock, blog_index):
    migrator = Migrator(es_mock, {"blog": blog_index})

    assert migrator.create_all() == {"blog": True}
    es_mock.indices.create.assert_called_once_with(index="blog", **index_mapping(blog_index))


def test_create_existing_index(es_mock, blog_index):
    es_mock.indices.exists.return_value = True
    migrator = Migrator(es_mock, {"blog": blog_index})

    assert migrator.create_index("blog") is True
    es_mock.indices.create.assert_not_called()

    with pytest.raises(ValueError):
        migrator.create_index("blog", skip_existing=False)


def test_recreate_all(es_mock, blog_index):
    es_mock.indices.exists.side_effect = [True, False]
    migrator = Migrator(es_mock, {"blog": blog_index})

    migrator.recreate_all()

    es_mock.indices.delete.assert_called_once_with(index="blog")
    es_mock.indices.create.assert_called_once()


def test_status(es_mock, blog_index):
    es_mock.indices.exists.return_value = True
    es_mock.indices.stats.return_value = {
        "indices": {
            "blog": {"primaries": {"docs": {"count": 12}, "store": {"size_in_bytes": 2048}}}
        }
    }
    migrator = Migrator(es_mock, {"blog": blog_index})

    info = migrator.status()["blog"]

    assert (info.exists, info.doc_count, info.size_bytes) == (True, 12, 2048)


def test_unknown_index_key(es_mock, blog_index):
    with pytest.raises(ValueError, match="not configured"):
        Migrator(es_mock, {"blog": blog_index}).drop_index("news")


def test_load_indexes_requires_attribute():
    with pytest.raises(ValueError, match="module:attribute"):
        load_indexes("myapp.search")


def test_load_indexes():
    indexes = load_indexes("sample_schema:INDEXES")

    assert sorted(indexes) == ["news", "pages"]
    assert indexes["news"].name == "news"


@pytest.fixture
def cli_es(monkeypatch, es_mock):
    es_mock.ping.return_value = True
    monkeypatch.setattr("migrations.migrate.create_es_client", lambda cfg: es_mock)
    return es_mock


@pytest.mark.parametrize("command", ["drop", "recreate"])
def test_cli_destructive_commands_require_confirm(cli_es, command):
    assert main(["--schema", "sample_schema:INDEXES", command]) == 1
    cli_es.indices.delete.assert_not_called()


def test_cli_create(cli_es):
    assert main(["--schema", "sample_schema:INDEXES", "create"]) == 0
    created = sorted(c.kwargs["index"] for c in cli_es.indices.create.call_args_list)
    assert created == ["news", "pages"]


def test_cli_drop_with_confirm(cli_es):
    cli_es.indices.exists.return_value = True

    assert main(["--schema", "sample_schema:INDEXES", "drop", "--confirm"]) == 0
    assert cli_es.indices.delete.call_count == 2


def test_cli_status(cli_es, capsys):
    cli_es.indices.exists.side_effect = lambda index: index == "news"
    cli_es.indices.stats.return_value = {
        "indices": {"news": {"primaries": {"docs": {"count": 3}, "store": {"size_in_bytes": 1536}}}}
    }

    assert main(["--schema", "sample_schema:INDEXES", "status"]) == 0
    out = capsys.readouterr().out
    assert "Documents: 3" in out
    assert "1.5 KB" in out


def test_cli_failed_ping(cli_es):
    cli_es.ping.return_value = False

    assert main(["--schema", "sample_schema:INDEXES", "create"]) == 1
    cli_es.indices.create.assert_not_called()


def test_cli_without_command(cli_es):
    assert main(["--schema", "sample_schema:INDEXES"]) == 1
