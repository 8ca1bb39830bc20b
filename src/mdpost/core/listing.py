"""Published listings: draft filtering and newest-first ordering"""

from typing import Any, Iterable

from mdpost.core.models import Document


def _newest_first(doc: Document) -> tuple[int, str]:
    return (-doc.date.toordinal(), doc.slug)


def published(docs: Iterable[Document]) -> list[Document]:
    """Return non-draft documents, newest date first, ties broken by slug."""
    return sorted((d for d in docs if not d.draft), key=_newest_first)


def all_posts(docs: Iterable[Document]) -> list[Document]:
    """Return every document, drafts included, in listing order."""
    return sorted(docs, key=_newest_first)


def listing_entry(doc: Document) -> dict[str, Any]:
    """Summary fields a listing page needs for one post."""
    return {
        "slug": doc.slug,
        "title": doc.title,
        "date": doc.date.isoformat(),
        "authors": list(doc.meta.authors),
        "excerpt": doc.meta.excerpt,
        "hero": doc.meta.hero,
        "time_to_read": doc.time_to_read,
    }
