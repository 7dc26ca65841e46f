"""Notion Utilities Package.

A thin wrapper around an authenticated ``notion_client.Client`` that
normalizes the few read operations the blog datasource needs and unwraps
Notion's property model into plain values.

Usage:
    >>> from notion_client import Client
    >>> from notion_utils import create_notion_utils
    >>> nu = create_notion_utils(Client(auth=token))
    >>> pages = nu.get_database_records(database_id)
    >>> title = nu.get_page_property(pages[0], "Name", fallback="Untitled")
"""
from .notion_utils import (
    NotionUtils,
    NotionUtilsError,
    MissingPropertiesError,
    UnsupportedPropertyTypeError,
    SUPPORTED_PROPERTY_TYPES,
    create_notion_utils,
)

__all__ = [
    "NotionUtils",
    "NotionUtilsError",
    "MissingPropertiesError",
    "UnsupportedPropertyTypeError",
    "SUPPORTED_PROPERTY_TYPES",
    "create_notion_utils",
]
