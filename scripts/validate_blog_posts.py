#!/usr/bin/env python3
"""Validate every JSON blog post in a directory against the blog post schema."""

import argparse
import json
import sys
from pathlib import Path

from blog import BlogPostValidationError, validate_blog_post
from config import load_config
from diagnostics import configure_logging


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--posts-path", default=None)
    parser.add_argument("--config", default=None)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    configure_logging(debug=args.debug)
    config = load_config(args.config)
    posts_path = Path(args.posts_path or config.get("blog", {}).get("posts_path", "./data/posts"))

    if not posts_path.is_dir():
        print(f"Posts directory not found: {posts_path}")
        return 1

    issues: list[str] = []
    checked = 0

    for path in sorted(posts_path.glob("*.json")):
        checked += 1
        try:
            post = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            issues.append(f"{path.name}: failed to parse ({exc})")
            continue

        try:
            validate_blog_post(post)
        except BlogPostValidationError as exc:
            issues.append(f"{path.name}: " + "; ".join(exc.errors))

    if issues:
        print("Blog post validation failed:")
        for issue in issues:
            print(f"- {issue}")
        return 1

    print(f"Blog post validation passed for {checked} post(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
