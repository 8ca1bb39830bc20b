"""Export: HTML fragment, sidecar JSON, and published index files"""

import json
from pathlib import Path
from typing import Iterable

from mdpost.core.listing import listing_entry, published
from mdpost.core.models import Document


INDEX_FILE = "index.json"


def build_sidecar(doc: Document) -> dict:
    """Build the sidecar JSON dict: slug, path, hash, time_to_read, metadata.

    Dates in metadata are serialized as ISO strings.
    """
    return doc.model_dump(mode='json', include={'slug', 'path', 'hash', 'time_to_read', 'metadata'})


def write_doc(doc: Document, output_dir: Path) -> tuple[Path, Path]:
    """Write the rendered HTML fragment + sidecar JSON for a single document.

    Output path mirrors the source directory structure:
      output_dir / Path(doc.path).parent / doc.slug.{html|json}

    Returns (html_path, json_path).
    """
    dest_dir = output_dir / Path(doc.path).parent if doc.path else output_dir
    if not dest_dir.resolve().is_relative_to(output_dir.resolve()):
        raise ValueError(f"Refusing to write {doc.path!r} outside {output_dir}")
    dest_dir.mkdir(parents=True, exist_ok=True)

    html_path = dest_dir / f"{doc.slug}.html"
    json_path = dest_dir / f"{doc.slug}.json"
    html_path.write_text(doc.rendered_body, encoding='utf-8')
    json_path.write_text(json.dumps(build_sidecar(doc), indent=2, ensure_ascii=False), encoding='utf-8')
    return html_path, json_path


def write_index(docs: Iterable[Document], output_dir: Path) -> Path:
    """Write index.json with the published listing; drafts never appear in it."""
    output_dir.mkdir(parents=True, exist_ok=True)
    index_path = output_dir / INDEX_FILE
    entries = [listing_entry(d) for d in published(docs)]
    index_path.write_text(json.dumps(entries, indent=2, ensure_ascii=False), encoding='utf-8')
    return index_path
