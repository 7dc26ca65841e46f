"""Blog Post Package.

The display-ready BlogPost type and its load-time validation.

Every blog post datasource must produce objects of this shape; running
validate_blog_post() on them catches malformed front-matter before the
post reaches a template.

Key Components:
    BlogPost, Author: immutable value objects
    validate_blog_post: raises BlogPostValidationError for invalid posts
"""
from .models import Author, BlogPost
from .validation import BlogPostValidationError, validate_blog_post

__all__ = ["Author", "BlogPost", "BlogPostValidationError", "validate_blog_post"]
