from __future__ import annotations

from searchstore.fields import resolve_filter_field


def test_text_field_uses_raw_subfield(blog_index):
    assert resolve_filter_field(blog_index, "title") == "title.raw"


def test_nested_text_field_uses_raw_subfield(blog_index):
    assert resolve_filter_field(blog_index, "author.name") == "author.name.raw"


def test_non_text_fields_are_unchanged(blog_index):
    assert resolve_filter_field(blog_index, "id") == "id"
    assert resolve_filter_field(blog_index, "rating") == "rating"
    assert resolve_filter_field(blog_index, "location") == "location"
    assert resolve_filter_field(blog_index, "author.age") == "author.age"
