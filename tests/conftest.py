"""Shared fixtures for Folio tests."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

POPOVER_ARTICLE = textwrap.dedent(
    """\
    ---
    title: "Popover API"
    menu_order: 2
    post_status: publish
    featured_image: /images/popover-api.png
    taxonomy:
      category:
        - JavaScript
        - Web APIs
      post_tag:
        - popover
        - html
    ---

    ## Table of contents

    - [Showing a popover](#showing-a-popover)

    <a id="showing-a-popover"></a>
    ```js
    document.getElementById("menu").showPopover();
    ```
    """
)


def make_article(
    title: str,
    menu_order: int | str = 0,
    status: str = "publish",
    body: str = "Body text.",
    extra: str = "",
) -> str:
    lines = ["---", f'title: "{title}"', f"menu_order: {menu_order}", f"post_status: {status}"]
    if extra:
        lines.append(extra.rstrip("\n"))
    lines.extend(["---", "", body, ""])
    return "\n".join(lines)


@pytest.fixture
def article() -> Callable[..., str]:
    """Factory producing article text with the given front-matter fields."""
    return make_article


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """A content directory holding three articles, one of them a draft."""
    root = tmp_path / "content"
    root.mkdir()
    (root / "popover-api.md").write_text(POPOVER_ARTICLE, encoding="utf-8")
    (root / "promise-try.md").write_text(make_article("Promise.try()", menu_order=1), encoding="utf-8")
    (root / "structured-clone.md").write_text(
        make_article("structuredClone()", menu_order=3, status="draft"), encoding="utf-8"
    )
    return root


@pytest.fixture
def popover_article() -> str:
    return POPOVER_ARTICLE
