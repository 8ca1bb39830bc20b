"""Content loader: raw text in, render-ready Document out"""

import logging
import math
import re
from typing import Any, Optional, Union

from pydantic import ValidationError

from mdpost.core.frontmatter import split_frontmatter
from mdpost.core.models import REQUIRED_FIELDS, Document, PostMetadata
from mdpost.core.render import render_markdown
from mdpost.core.utils.hashing import sha256
from mdpost.core.utils.slug import slug_from_path, slugify
from mdpost.errors import ContentError, MalformedMetadata, MissingRequiredField


logger = logging.getLogger(__name__)

WORD_RE = re.compile(r'\w+')


def _decode(source: Union[str, bytes]) -> str:
    if isinstance(source, str):
        return source[1:] if source.startswith('\ufeff') else source
    try:
        return source.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        raise MalformedMetadata(f"Content is not valid UTF-8: {e}") from e


def estimate_time_to_read(body: str, words_per_minute: int = 200) -> int:
    """Whole minutes needed to read body, never less than one."""
    words = len(WORD_RE.findall(body))
    return max(1, math.ceil(words / words_per_minute))


def validate_metadata(frontmatter: dict) -> PostMetadata:
    """Check required keys, then coerce recognized keys into PostMetadata."""
    for name in REQUIRED_FIELDS:
        value = frontmatter.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MissingRequiredField(name)
    try:
        return PostMetadata.model_validate(frontmatter)
    except ValidationError as e:
        fields = ', '.join('.'.join(str(p) for p in err['loc']) for err in e.errors())
        raise MalformedMetadata(
            f"Invalid front matter values: {fields}",
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e


def resolve_slug(explicit: Any, path: Optional[str], title: str) -> str:
    """Front matter slug, else the path stem, else the title; always slugified.

    The result is never empty and never contains path separators; raises
    MalformedMetadata when nothing usable remains.
    """
    if explicit is not None and str(explicit).strip():
        slug = slugify(str(explicit))
    else:
        slug = (slug_from_path(path) if path else '') or slugify(title)
    if not slug:
        raise MalformedMetadata(f"Cannot derive a slug from {explicit or title!r}")
    return slug


def load_document(
    source: Union[str, bytes],
    path: Optional[str] = None,
    parser_config: str = 'gfm-like',
    heading_anchors: bool = True,
    words_per_minute: int = 200,
    ) -> Document:
    """Parse front matter, validate it, and render the body.

    path is only a label for slugs and error messages; nothing is read from
    disk. Raises MalformedMetadata, MissingRequiredField or MarkupRenderError
    with path attached; no partial Document is ever returned.
    """
    try:
        text = _decode(source)
        split = split_frontmatter(text)
        meta = validate_metadata(split.frontmatter)
        html = render_markdown(split.body, parser_config, heading_anchors, line_offset=split.body_line)
        slug = resolve_slug(split.frontmatter.get('slug'), path, meta.title)
    except ContentError as e:
        if e.path is None:
            e.path = path
        raise

    doc = Document(
        metadata=dict(split.frontmatter),
        meta=meta,
        body=split.body,
        rendered_body=html,
        slug=slug,
        path=path,
        hash=sha256(text),
        time_to_read=(
            meta.time_to_read if meta.time_to_read is not None
            else estimate_time_to_read(split.body, words_per_minute)
        ),
    )
    logger.debug("Loaded %s (slug=%s, draft=%s)", path or '<text>', doc.slug, doc.draft)
    return doc
