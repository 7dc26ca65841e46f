"""
JSON Schema Loading Module.

Schema files live next to this module and are loaded when the module is
first imported. A missing file or a syntax error stops the import instead
of surfacing later during validation.

Error Handling:
    - FileNotFoundError: schema file doesn't exist at the expected path
    - json.JSONDecodeError: schema file contains invalid JSON
"""
import json
from pathlib import Path
from typing import Dict, Any

# Resolved from __file__ so loading works from any working directory
SCHEMA_DIR = Path(__file__).parent


def _load_schema(schema_filename: str) -> Dict[str, Any]:
    """
    Load a JSON schema file from the schema directory.

    Args:
        schema_filename: Name of the JSON schema file (e.g., "blog_post_schema.json")

    Returns:
        Parsed JSON schema as a dictionary, ready for use with jsonschema

    Raises:
        FileNotFoundError: If the schema file doesn't exist.
        json.JSONDecodeError: If the schema file contains invalid JSON. The
            message names the file alongside the parser's message.

    Example:
        >>> schema = _load_schema("blog_post_schema.json")
        >>> schema["$schema"]
        'http://json-schema.org/draft-07/schema#'
    """
    schema_path = SCHEMA_DIR / schema_filename

    if not schema_path.exists():
        raise FileNotFoundError(
            f"Schema file not found: {schema_path}. "
            f"Expected location: {SCHEMA_DIR}"
        )

    try:
        with open(schema_path, "r") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(
            f"Invalid JSON in schema file {schema_filename}: {e.msg}",
            e.doc,
            e.pos
        ) from e


# Blog Post Schema
# Required: slug, title, contentAsHTMLString, excerpt, coverImage (nullable),
# date (UTC date-time ending in Z), author {name, picture (nullable)}
# Unknown front-matter fields are allowed
BLOG_POST_SCHEMA = _load_schema("blog_post_schema.json")


def get_blog_post_schema() -> Dict[str, Any]:
    """
    Get the blog post JSON schema.

    Returns the same object as the BLOG_POST_SCHEMA constant; useful where a
    callable is easier to patch than a module attribute.

    Example:
        >>> schema = get_blog_post_schema()
        >>> "slug" in schema["required"]
        True
        >>> schema["properties"]["coverImage"]["type"]
        ['string', 'null']
    """
    return BLOG_POST_SCHEMA
