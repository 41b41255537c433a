#!/usr/bin/env python3
# scripts/new_doc.py

from __future__ import annotations
import argparse
from pathlib import Path
import sys

# Add project root to path to allow importing from 'architect_docs'
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from architect_docs.models import COLLECTION_SCHEMAS
from architect_docs.utils import slugify
from architect_docs.constants import CONTENT_DIR

DOC_TEMPLATE = """---
title: "{title}"
description: "{description}"
order: {order}
icon: "{icon}"
---
## {title}

A short introduction to this page.
"""

PAGE_TEMPLATE = """---
title: "{title}"
description: "{description}"
---
## {title}
"""


def build_target(collection: str, title: str, version: str = "", content_dir: Path = CONTENT_DIR) -> Path:
    """Returns the markdown path for a new entry, e.g. content/docs/v0-16-1/ralph-loop.md."""
    slug = slugify(title)
    if not slug:
        raise ValueError(f"Could not generate a valid slug from '{title}'.")
    target_dir = Path(content_dir) / collection
    if version:
        target_dir = target_dir / version
    return target_dir / f"{slug}.md"


def render_template(collection: str, title: str, description: str, order: int, icon: str) -> str:
    if collection.startswith("docs"):
        return DOC_TEMPLATE.format(title=title, description=description, order=order, icon=icon)
    return PAGE_TEMPLATE.format(title=title, description=description)


def main():
    parser = argparse.ArgumentParser(description="Create a new documentation page scaffold.")
    parser.add_argument("title", help="The page title, e.g. 'Ralph Loop'")
    parser.add_argument("--collection", default="docs", choices=["docs", "docs-en", "pages", "pages-en"],
                        help="Target content collection")
    parser.add_argument("--version", default="", help="Version folder for docs (e.g. 'v0-16-1')")
    parser.add_argument("--description", default="A short description.", help="A one-line description")
    parser.add_argument("--order", type=int, default=99, help="Position in the docs index")
    parser.add_argument("--icon", default="📄", help="Icon shown next to the title")
    args = parser.parse_args()

    if args.collection not in COLLECTION_SCHEMAS:
        print(f"Error: Unknown collection '{args.collection}'.")
        sys.exit(1)

    try:
        target = build_target(args.collection, args.title, args.version)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if target.exists():
        print(f"Error: Page '{target}' already exists.")
        sys.exit(1)

    target.parent.mkdir(parents=True, exist_ok=True)
    content = render_template(args.collection, args.title, args.description, args.order, args.icon)
    target.write_text(content, encoding="utf-8")
    print(f"Scaffold created at: {target}")

if __name__ == "__main__":
    main()
