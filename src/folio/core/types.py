"""Core data types for Folio."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from folio.core.fields import FieldValue
from folio.core.utils import slugify

CATEGORY_AXIS = "category"
TAG_AXIS = "post_tag"


class PostStatus(str, Enum):
    PUBLISH = "publish"
    FUTURE = "future"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    TRASH = "trash"
    AUTO_DRAFT = "auto-draft"
    INHERIT = "inherit"


class Document(BaseModel):
    """One article: front-matter fields plus the Markdown body.

    Unrecognised front-matter keys are kept in ``extra`` so that new fields
    survive a parse/dump cycle.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    post_status: PostStatus
    menu_order: int = 0
    featured_image: str | None = None
    taxonomy: dict[str, list[str]] = Field(default_factory=dict)
    extra: dict[str, FieldValue] = Field(default_factory=dict)
    body: str = ""
    source: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _require_title(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str):
            value = value.strip()
            if not value:
                msg = "title must not be empty"
                raise ValueError(msg)
        return value

    @field_validator("menu_order", mode="before")
    @classmethod
    def _coerce_menu_order(cls, value: Any) -> Any:
        if value is None:
            return 0
        if isinstance(value, bool):
            msg = "menu_order must be an integer, not a boolean"
            raise ValueError(msg)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                msg = f"menu_order must be an integer, got {value!r}"
                raise ValueError(msg) from None
        return value

    @field_validator("taxonomy", mode="before")
    @classmethod
    def _normalize_taxonomy(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value

        normalized: dict[str, list[str]] = {}
        for axis, labels in value.items():
            if labels is None:
                labels = []
            elif not isinstance(labels, list):
                labels = [labels]

            seen: list[str] = []
            for label in labels:
                if isinstance(label, (int, float)) and not isinstance(label, bool):
                    label = str(label)
                if isinstance(label, str) and label in seen:
                    continue
                seen.append(label)
            normalized[axis] = seen
        return normalized

    @property
    def slug(self) -> str:
        explicit = self.extra.get("slug")
        if isinstance(explicit, str) and explicit.strip():
            return slugify(explicit)
        if self.source:
            return slugify(PurePath(self.source).stem)
        return slugify(self.title)

    @property
    def is_published(self) -> bool:
        return self.post_status == PostStatus.PUBLISH

    @property
    def categories(self) -> list[str]:
        return list(self.taxonomy.get(CATEGORY_AXIS, []))

    @property
    def tags(self) -> list[str]:
        return list(self.taxonomy.get(TAG_AXIS, []))

    def has_label(self, axis: str, label: str) -> bool:
        return label in self.taxonomy.get(axis, [])


class ParseFailure(BaseModel):
    """A document that could not be turned into a :class:`Document`."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    source: str
    error: Exception

    @property
    def kind(self) -> str:
        return type(self.error).__name__

    @property
    def message(self) -> str:
        return getattr(self.error, "message", None) or str(self.error)


class BatchResult(BaseModel):
    """Outcome of parsing several documents: successes and collected failures."""

    model_config = ConfigDict(frozen=True)

    documents: list[Document] = Field(default_factory=list)
    failures: list[ParseFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def failed_sources(self) -> list[str]:
        return [failure.source for failure in self.failures]
