"""Unit tests for core/utils/slug.py"""

import pytest

from mdpost.core.utils.slug import slug_from_path, slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-chrs"),
    ("", ""),
])
def test_slugify_basic(text, expected):
    """slugify converts text to lowercase hyphenated slug."""
    assert slugify(text) == expected


@pytest.mark.parametrize("path,expected", [
    ("organizing-go-modules.md", "organizing-go-modules"),
    ("posts/2021/Go Modules.mdx", "go-modules"),
    ("posts/go-modules/index.md", "go-modules"),
    ("index.md", "index"),
])
def test_slug_from_path(path, expected):
    """slug_from_path uses the file stem, or the directory name for index files."""
    assert slug_from_path(path) == expected
