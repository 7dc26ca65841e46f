"""
Blog Post Value Objects.

Field names follow the JSON shape checked by schema/blog_post_schema.json,
so converting with to_dict() gives exactly what the validator expects.
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class Author:
    name: str
    picture: Optional[str]


@dataclass(frozen=True)
class BlogPost:
    """A display-ready blog post.

    Attributes:
        slug: Unique identifier used in the post URL
        title: Post title
        contentAsHTMLString: Rendered post body
        excerpt: Short summary for listings
        coverImage: Cover image URL, or None
        date: Publication date as an ISO-8601 datetime string
        author: Post author
    """
    slug: str
    title: str
    contentAsHTMLString: str
    excerpt: str
    coverImage: Optional[str]
    date: str
    author: Author

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BlogPost":
        """Build a BlogPost from its mapping form.

        Keys outside the BlogPost fields are ignored. No validation is done
        here; run validate_blog_post() on the mapping first.
        """
        author = data["author"]
        return cls(
            slug=data["slug"],
            title=data["title"],
            contentAsHTMLString=data["contentAsHTMLString"],
            excerpt=data["excerpt"],
            coverImage=data["coverImage"],
            date=data["date"],
            author=Author(name=author["name"], picture=author["picture"]),
        )
