"""In-memory document store and batch loading."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from folio.core import listing
from folio.core.exceptions import DocumentParseError
from folio.core.frontmatter import parse_document
from folio.core.types import BatchResult, Document, ParseFailure

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "**/*.md"


class DocumentStore:
    """Holds every loaded document in discovery order.

    Listings are computed views; drafts stay in the store even though the
    published listing leaves them out.
    """

    def __init__(
        self,
        documents: Iterable[Document] = (),
        failures: Iterable[ParseFailure] = (),
    ) -> None:
        self._documents: list[Document] = []
        self._by_slug: dict[str, Document] = {}
        self.failures: list[ParseFailure] = list(failures)
        for doc in documents:
            self.add(doc)

    @classmethod
    def from_batch(cls, result: BatchResult) -> DocumentStore:
        return cls(result.documents, result.failures)

    def add(self, doc: Document) -> None:
        self._documents.append(doc)
        slug = doc.slug
        if slug in self._by_slug:
            logger.warning(
                "Duplicate slug %r from %s; keeping %s",
                slug,
                doc.source or doc.title,
                self._by_slug[slug].source or self._by_slug[slug].title,
            )
            return
        self._by_slug[slug] = doc

    def get(self, slug: str) -> Document | None:
        return self._by_slug.get(slug)

    def all(self) -> list[Document]:
        return list(self._documents)

    def published(self) -> list[Document]:
        return listing.published_listing(self._documents)

    def drafts(self) -> list[Document]:
        return listing.draft_listing(self._documents)

    def by_category(self, label: str) -> list[Document]:
        return listing.order_documents(listing.by_category(self._documents, label))

    def by_tag(self, label: str) -> list[Document]:
        return listing.order_documents(listing.by_tag(self._documents, label))

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug


def parse_batch(sources: Iterable[tuple[str, str]]) -> BatchResult:
    """Parse (source identifier, text) pairs, collecting failures.

    A failure on one document never stops the rest of the batch.
    """
    documents: list[Document] = []
    failures: list[ParseFailure] = []

    for source, text in sources:
        try:
            documents.append(parse_document(text, source=source))
        except DocumentParseError as exc:
            logger.warning("Skipping %s: %s", source, exc.message)
            failures.append(ParseFailure(source=source, error=exc))

    return BatchResult(documents=documents, failures=failures)


def discover_files(root: Path, pattern: str = DEFAULT_PATTERN) -> list[Path]:
    """Return matching files under ``root`` in sorted (deterministic) order."""
    return sorted(path for path in root.glob(pattern) if path.is_file())


def load_directory(
    root: Path,
    *,
    pattern: str = DEFAULT_PATTERN,
    encoding: str = "utf-8",
) -> BatchResult:
    """Read and parse every document under ``root``.

    Source identifiers are POSIX paths relative to ``root``. Files that cannot
    be read or decoded are reported as failures alongside parse errors.

    Raises:
        FileNotFoundError: If ``root`` is not a directory.

    """
    root = Path(root)
    if not root.is_dir():
        msg = f"Content directory not found: {root}"
        raise FileNotFoundError(msg)

    documents: list[Document] = []
    failures: list[ParseFailure] = []
    for path in discover_files(root, pattern):
        source = path.relative_to(root).as_posix()
        try:
            text = path.read_text(encoding=encoding)
        except (UnicodeDecodeError, OSError) as exc:
            logger.warning("Skipping %s: could not read as %s text: %s", source, encoding, exc)
            failures.append(ParseFailure(source=source, error=exc))
            continue

        result = parse_batch([(source, text)])
        documents.extend(result.documents)
        failures.extend(result.failures)

    logger.info(
        "Loaded %d document(s) from %s (%d failure(s))",
        len(documents),
        root,
        len(failures),
    )
    return BatchResult(documents=documents, failures=failures)
