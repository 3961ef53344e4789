"""Ordering and filtering of documents into listings.

Every function here is pure and keeps the relative order of its input where
the sort key does not decide, so repeated runs over the same input produce
identical listings.
"""

from __future__ import annotations

from collections.abc import Iterable

from folio.core.types import CATEGORY_AXIS, TAG_AXIS, Document


def order_documents(docs: Iterable[Document]) -> list[Document]:
    """Sort by ascending ``menu_order``; equal values keep their input order."""
    return sorted(docs, key=lambda doc: doc.menu_order)


def published_listing(docs: Iterable[Document]) -> list[Document]:
    """Return the ordered listing of documents whose status is ``publish``."""
    return order_documents(doc for doc in docs if doc.is_published)


def draft_listing(docs: Iterable[Document]) -> list[Document]:
    """Return the ordered listing of every document that is not published."""
    return order_documents(doc for doc in docs if not doc.is_published)


def filter_by_taxonomy(docs: Iterable[Document], axis: str, label: str) -> list[Document]:
    return [doc for doc in docs if doc.has_label(axis, label)]


def by_category(docs: Iterable[Document], label: str) -> list[Document]:
    return filter_by_taxonomy(docs, CATEGORY_AXIS, label)


def by_tag(docs: Iterable[Document], label: str) -> list[Document]:
    return filter_by_taxonomy(docs, TAG_AXIS, label)


def taxonomy_index(docs: Iterable[Document], axis: str) -> dict[str, list[Document]]:
    """Group documents by label on ``axis``.

    Labels are sorted alphabetically; documents under a label keep input order.
    """
    index: dict[str, list[Document]] = {}
    for doc in docs:
        for label in doc.taxonomy.get(axis, []):
            index.setdefault(label, []).append(doc)
    return {label: index[label] for label in sorted(index)}
