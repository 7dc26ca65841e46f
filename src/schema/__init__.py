"""Schema Package - JSON Schema Loading.

Loads the JSON schemas used to validate blog content once at import time
and exposes them as module-level constants.

Available Schemas:
    BLOG_POST_SCHEMA: JSON Schema (Draft 7) for the display-ready blog post
        every datasource must produce.

Usage:
    from schema import BLOG_POST_SCHEMA
    Draft7Validator(BLOG_POST_SCHEMA).iter_errors(post)

If a schema file is missing or holds invalid JSON the import fails with
the offending path in the error message.
"""
from .schema import BLOG_POST_SCHEMA, get_blog_post_schema

__all__ = ["BLOG_POST_SCHEMA", "get_blog_post_schema"]
