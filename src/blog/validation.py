"""
Blog Post Validation.

Checks blog posts against schema/blog_post_schema.json with a Draft 7
validator. The ``date`` field uses the ``date-time`` format, which is only
enforced because a FormatChecker is passed to the validator. A pattern
further restricts it to an uppercase ``T`` separator and a ``Z`` (UTC)
suffix; numeric offsets are rejected.

On failure the error message contains the post slug, an explanation and
every schema violation, one per ``<message> at path: <path>`` entry. The
same message is logged at ERROR level before raising.
"""
import logging
from typing import Any, List, Mapping, Optional, Union

from jsonschema import Draft7Validator, FormatChecker

from diagnostics import ContextLogger
from schema import BLOG_POST_SCHEMA

from .models import BlogPost

logger = logging.getLogger(__name__)

INVALID_POST_HINT = (
    "Some attributes of the blogpost are not valid, "
    "usually means that blogpost frontmatter has something wrong."
)

_validator = Draft7Validator(BLOG_POST_SCHEMA, format_checker=FormatChecker())


class BlogPostValidationError(Exception):
    """Raised when a blog post fails schema validation.

    Attributes:
        slug: Slug of the offending post (None if it has none)
        errors: One line per schema violation
    """

    def __init__(self, message: str, slug: Any = None, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.slug = slug
        self.errors = errors or []


def _describe_errors(post: Mapping[str, Any]) -> List[str]:
    errors = sorted(_validator.iter_errors(post), key=lambda e: [str(p) for p in e.path])
    descriptions = []
    for error in errors:
        path_str = ".".join(str(p) for p in error.path)
        descriptions.append(f"{error.message} at path: {path_str}")
    return descriptions


def validate_blog_post(post: Union[BlogPost, Mapping[str, Any]]) -> None:
    """Validate a blog post, raising if it doesn't match the schema.

    Args:
        post: BlogPost instance or mapping with the same keys

    Raises:
        BlogPostValidationError: If the post is structurally invalid

    Example:
        >>> validate_blog_post({"slug": "hello", "title": "Hello", ...})  # passes
        >>> validate_blog_post({"slug": "hello"})
        BlogPostValidationError: [BlogPost Not Valid] BlogPost slug: hello ...
    """
    if isinstance(post, BlogPost):
        post = post.to_dict()

    errors = _describe_errors(post)
    if not errors:
        return

    slug = post.get("slug") if isinstance(post, Mapping) else None
    log = ContextLogger("BlogPost Not Valid", logger)
    message = log.error(
        f"BlogPost slug: {slug}",
        INVALID_POST_HINT,
        "; ".join(errors),
    )
    raise BlogPostValidationError(message, slug=slug, errors=errors)
