"""Front matter extraction: split the YAML header from the markup body"""

from dataclasses import dataclass
from typing import Any

import yaml

from mdpost.errors import MalformedMetadata


MARKER = '---'


@dataclass(frozen=True)
class SplitDoc:
    """Raw front matter mapping plus the body that follows the closing marker."""
    frontmatter: dict[str, Any]
    body: str
    body_line: int      # 0-based line index of the first body line in the source text


def _is_marker(line: str) -> bool:
    return line.rstrip() == MARKER


def split_frontmatter(text: str) -> SplitDoc:
    """Return the parsed YAML header and body of text.

    The first line must be the marker; the next marker line closes the block.
    Raises MalformedMetadata when the block is missing, unterminated, not valid
    YAML, or not a mapping. An empty block yields an empty mapping.
    """
    lines = text.splitlines(keepends=True)
    if not lines or not _is_marker(lines[0]):
        raise MalformedMetadata("Front matter block is missing: expected '---' on the first line")

    end = next((i for i in range(1, len(lines)) if _is_marker(lines[i])), None)
    if end is None:
        raise MalformedMetadata("Front matter block is unterminated: no closing '---' line")

    try:
        fm = yaml.safe_load(''.join(lines[1:end]))
    except (yaml.YAMLError, ValueError) as e:
        # impossible timestamps such as 2021-02-30 surface as ValueError from datetime
        raise MalformedMetadata(f"Invalid YAML front matter: {e}") from e
    if fm is None:
        fm = {}
    if not isinstance(fm, dict):
        raise MalformedMetadata(f"Invalid YAML front matter: expected a mapping, got {type(fm).__name__}")
    bad_keys = [k for k in fm if not isinstance(k, str)]
    if bad_keys:
        raise MalformedMetadata(f"Invalid YAML front matter: non-string keys {bad_keys!r}")

    return SplitDoc(frontmatter=fm, body=''.join(lines[end + 1:]), body_line=end + 1)
