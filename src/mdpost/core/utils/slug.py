"""Slugs for document identifiers and heading anchors"""

import re
from pathlib import PurePath


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def slug_from_path(path: str) -> str:
    """Slug for a source path; 'posts/go-modules/index.md' names its directory."""
    p = PurePath(path)
    stem = p.parent.name if p.stem == 'index' and p.parent.name else p.stem
    return slugify(stem)
