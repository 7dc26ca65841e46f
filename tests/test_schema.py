"""Unit Tests for the schema loader."""
import json

import pytest

import schema.schema as schema_module
from schema import BLOG_POST_SCHEMA, get_blog_post_schema


def test_blog_post_schema_loaded():
    assert BLOG_POST_SCHEMA["$schema"] == "http://json-schema.org/draft-07/schema#"
    assert set(BLOG_POST_SCHEMA["required"]) == {
        "slug", "title", "contentAsHTMLString", "excerpt", "coverImage", "date", "author"
    }
    assert BLOG_POST_SCHEMA["properties"]["date"]["format"] == "date-time"


def test_getter_returns_same_object():
    assert get_blog_post_schema() is BLOG_POST_SCHEMA


def test_load_missing_schema_raises():
    with pytest.raises(FileNotFoundError) as exc_info:
        schema_module._load_schema("does_not_exist.json")

    assert "does_not_exist.json" in str(exc_info.value)


def test_load_invalid_json_raises(tmp_path, monkeypatch):
    (tmp_path / "broken.json").write_text("{not json")
    monkeypatch.setattr(schema_module, "SCHEMA_DIR", tmp_path)

    with pytest.raises(json.JSONDecodeError) as exc_info:
        schema_module._load_schema("broken.json")

    assert "broken.json" in str(exc_info.value)
