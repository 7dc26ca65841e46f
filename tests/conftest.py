"""
Pytest configuration and shared fixtures for all tests.

Provides:
- Sample blog post and Notion page payloads loaded from tests/fixtures
- A MagicMock standing in for an authenticated notion_client.Client
"""
import copy
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _load_fixture(name):
    with open(FIXTURES_DIR / name, "r") as f:
        return json.load(f)


@pytest.fixture
def valid_blog_post():
    """A blog post that passes schema validation (fresh copy per test)."""
    return copy.deepcopy(_load_fixture("valid_blog_post.json"))


@pytest.fixture
def notion_page():
    """A full Notion page with title, rich_text, created_time and unsupported properties."""
    return copy.deepcopy(_load_fixture("notion_page.json"))


@pytest.fixture
def notion_client():
    """Mock Notion client exposing databases.query/retrieve and pages.retrieve."""
    return MagicMock()
