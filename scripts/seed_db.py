#!/usr/bin/env python3
"""
Create the SQLite schema and fill it with demo categories and posts,
enough to page through (and filter) in the browser.
"""

import argparse
import os
import sys
from datetime import datetime, timedelta

# Add the parent directory to sys.path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from post_browser.config import load_config
from post_browser.di import build_container
from post_browser.models.post import PostStatus
from post_browser.utils.formatters import slugify

DEMO_CATEGORIES = [
    ("Next.js", "nextjs"),
    ("Python", "python"),
    ("Databases", "databases"),
    ("DevOps", "devops"),
    ("Drafts only", "drafts-only"),
]


def seed(container, posts_per_category: int) -> int:
    """Insert demo rows; returns the number of posts created."""
    categories = container.category_repo
    posts = container.post_repo
    created = 0
    start = datetime(2024, 1, 1)

    for c_index, (name, slug) in enumerate(DEMO_CATEGORIES):
        category = categories.find_or_create(name=name, slug=slug)
        if category is None:
            print(f"Could not create category {slug}")
            continue

        status = PostStatus.DRAFT if slug == "drafts-only" else PostStatus.PUBLISHED
        for n in range(1, posts_per_category + 1):
            title = f"{name} notes #{n}"
            stored = posts.add(
                title=title,
                slug=slugify(title),
                description=f"Part {n} of the {name} series.",
                status=status,
                category_id=category.id,
                created_at=start + timedelta(days=n, hours=c_index),
            )
            if stored:
                created += 1

    return created


def main():
    parser = argparse.ArgumentParser(description="Seed the post browser database with demo data")
    parser.add_argument("--db", help="SQLite database path (defaults to the configured one)")
    parser.add_argument("--posts", type=int, default=40, help="Posts per category")
    args = parser.parse_args()

    config = load_config()
    if args.db:
        config["sqlite"]["db_path"] = args.db

    container = build_container(config)
    try:
        print(f"Seeding {config['sqlite']['db_path']}...")
        created = seed(container, args.posts)
        print(f"Created {created} posts in {len(DEMO_CATEGORIES)} categories")
    finally:
        container.close()


if __name__ == "__main__":
    main()
