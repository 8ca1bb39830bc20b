"""Batch driver: discover content files, load them, and write build output"""

import logging
from pathlib import Path
from typing import Optional

from mdpost.config import Settings
from mdpost.core.export import write_doc, write_index
from mdpost.core.loader import load_document
from mdpost.core.models import Document


logger = logging.getLogger(__name__)

MD_EXTENSIONS = {'.md', '.mdx'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS and p.is_file())


def _label(p: Path, root: Path) -> str:
    """Source path label relative to the root being processed."""
    if root.is_file():
        return p.name
    return p.relative_to(root).as_posix()


def load_file(path: Path, settings: Optional[Settings] = None, label: Optional[str] = None) -> Document:
    """Read path and load it; ContentErrors carry the label (default: the path itself)."""
    settings = settings or Settings()
    return load_document(
        path.read_bytes(),
        path=label or str(path),
        parser_config=settings.parser_config,
        heading_anchors=settings.heading_anchors,
        words_per_minute=settings.words_per_minute,
    )


def load_dir(path: Path, settings: Optional[Settings] = None) -> list[Document]:
    """Load every content file under path. The first failure aborts the batch."""
    docs = [load_file(p, settings, _label(p, path)) for p in discover_files(path)]
    logger.info("Loaded %d document(s) from %s", len(docs), path)
    return docs


def run_build(
    path: Path,
    output_dir: Path,
    settings: Optional[Settings] = None,
    ) -> list[tuple[str, Path]]:
    """Load path and write HTML + sidecar JSON per document plus index.json.

    Drafts are written only when settings.include_drafts is set and never
    appear in index.json. Returns (slug, html_path) pairs.
    """
    settings = settings or Settings()
    docs = load_dir(path, settings)
    results = []
    for doc in docs:
        if doc.draft and not settings.include_drafts:
            logger.warning("Skipping draft %s", doc.path)
            continue
        html_path, _ = write_doc(doc, output_dir)
        logger.info("Wrote %s", html_path)
        results.append((doc.slug, html_path))
    index_path = write_index(docs, output_dir)
    logger.info("Wrote %s", index_path)
    return results
