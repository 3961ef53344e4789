"""Parsing and encoding of YAML front-matter documents."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import frontmatter
import yaml
from pydantic import ValidationError

from folio.core.exceptions import (
    DocumentParseError,
    InvalidMetadataError,
    MalformedDocumentError,
    TruncatedMetadataError,
)
from folio.core.fields import FieldShape, FieldValue, decode_field, field_shape
from folio.core.types import Document
from folio.core.utils import normalize_body

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

OPENING_DELIMITER = "---"
CLOSING_DELIMITERS = frozenset({"---", "..."})

RECOGNIZED_FIELDS = ("title", "menu_order", "post_status", "featured_image", "taxonomy")

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _MetadataLoader(yaml.SafeLoader):
    """Safe loader that leaves dates and timestamps as plain strings."""


_MetadataLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def split_frontmatter(text: str) -> tuple[str, str]:
    """Split raw text into its metadata block and the remaining body.

    Args:
        text: Full document text.

    Returns:
        Tuple of (metadata block, raw body). Neither includes the delimiter lines.

    Raises:
        MalformedDocumentError: If the first line is not ``---``.
        TruncatedMetadataError: If no closing ``---`` (or ``...``) line follows.

    """
    if text.startswith("\ufeff"):
        text = text[1:]

    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != OPENING_DELIMITER:
        msg = f"document does not start with a '{OPENING_DELIMITER}' front-matter delimiter"
        raise MalformedDocumentError(msg)

    for index in range(1, len(lines)):
        if lines[index].rstrip() in CLOSING_DELIMITERS:
            return "".join(lines[1:index]), "".join(lines[index + 1 :])

    msg = "front-matter block is not closed before end of input"
    raise TruncatedMetadataError(msg)


def load_metadata(block: str) -> dict[str, FieldValue]:
    """Decode a metadata block into a mapping of field values.

    Raises:
        InvalidMetadataError: If the block is not valid YAML or not a mapping.
        UnsupportedFieldShapeError: If a value nests deeper than supported.

    """
    try:
        data = yaml.load(block, Loader=_MetadataLoader)  # noqa: S506 - SafeLoader subclass
    except yaml.YAMLError as exc:
        msg = f"front-matter is not valid YAML: {exc}"
        raise InvalidMetadataError(msg) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"front-matter must be a mapping, got {type(data).__name__}"
        raise InvalidMetadataError(msg)

    metadata: dict[str, FieldValue] = {}
    for key, raw in data.items():
        if not isinstance(key, str):
            msg = f"front-matter keys must be strings, got {key!r}"
            raise InvalidMetadataError(msg)
        metadata[key] = decode_field(key, raw)
    return metadata


def parse_document(text: str, source: str | None = None) -> Document:
    """Parse a front-matter document into a :class:`Document`.

    Args:
        text: Full document text.
        source: Optional identifier recorded on the document and on errors.

    Raises:
        DocumentParseError: One of its subclasses, tagged with ``source``.

    """
    try:
        block, body = split_frontmatter(text)
        metadata = load_metadata(block)
        return _build_document(metadata, body, source)
    except DocumentParseError as exc:
        if exc.source is None:
            exc.source = source
        raise


def parse_document_file(path: Path, *, encoding: str = "utf-8", source: str | None = None) -> Document:
    """Read a Markdown file and parse it.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid in ``encoding``.
        DocumentParseError: If the content cannot be parsed.

    """
    content = path.read_text(encoding=encoding)
    return parse_document(content, source=source if source is not None else str(path))


def _build_document(metadata: dict[str, FieldValue], body: str, source: str | None) -> Document:
    fields: dict[str, Any] = {key: metadata[key] for key in RECOGNIZED_FIELDS if key in metadata}
    extra = {key: value for key, value in metadata.items() if key not in RECOGNIZED_FIELDS}

    try:
        doc = Document.model_validate(
            {**fields, "extra": extra, "body": normalize_body(body), "source": source}
        )
    except ValidationError as exc:
        raise InvalidMetadataError(_describe_validation_error(exc)) from exc

    logger.debug("Parsed document %r (%s)", doc.title, source or "<text>")
    return doc


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "metadata"
        problems.append(f"{location}: {error['msg']}")
    return "invalid front-matter (" + "; ".join(problems) + ")"


def document_metadata(doc: Document) -> dict[str, Any]:
    """Return the front-matter mapping that :func:`dump_document` writes."""
    metadata: dict[str, Any] = {
        "title": doc.title,
        "menu_order": doc.menu_order,
        "post_status": doc.post_status.value,
    }
    if doc.featured_image is not None:
        metadata["featured_image"] = doc.featured_image
    if doc.taxonomy:
        metadata["taxonomy"] = {axis: list(labels) for axis, labels in doc.taxonomy.items()}
    for key, value in doc.extra.items():
        shape = field_shape(value)
        if shape is FieldShape.MAPPING:
            value = {sub_key: list(sub) if isinstance(sub, list) else sub for sub_key, sub in value.items()}
        elif shape is FieldShape.SEQUENCE:
            value = list(value)
        metadata[key] = value
    return metadata


def dump_document(doc: Document) -> str:
    """Encode a document back to front-matter text.

    Parsing the result with the same ``source`` yields an equal document.
    """
    post = frontmatter.Post(doc.body)
    post.metadata.update(document_metadata(doc))
    return frontmatter.dumps(post, sort_keys=False) + "\n"
