"""Tests for the folio command line interface."""

import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from folio.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch):
    """Run in an empty directory and restore the root logger afterwards."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FOLIO_PATHS__CONTENT_DIR", raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_list_shows_published_in_menu_order(content_dir: Path):
    result = runner.invoke(app, ["list", str(content_dir)])

    assert result.exit_code == 0
    assert "Published documents" in result.stdout
    assert result.stdout.index("promise-try") < result.stdout.index("popover-api")
    assert "structured-clone" not in result.stdout


def test_list_all_includes_drafts(content_dir: Path):
    result = runner.invoke(app, ["list", str(content_dir), "--all"])

    assert result.exit_code == 0
    assert "structured-clone" in result.stdout
    assert "draft" in result.stdout


def test_list_filters_by_tag(content_dir: Path):
    result = runner.invoke(app, ["list", str(content_dir), "--tag", "popover"])

    assert result.exit_code == 0
    assert "popover-api" in result.stdout
    assert "promise-try" not in result.stdout


def test_list_uses_configured_content_dir(content_dir: Path, tmp_path: Path):
    result = runner.invoke(app, ["list"])

    assert content_dir == tmp_path / "content"
    assert result.exit_code == 0
    assert "popover-api" in result.stdout


def test_list_reports_failures(content_dir: Path):
    (content_dir / "broken.md").write_text("no front-matter\n", encoding="utf-8")

    result = runner.invoke(app, ["list", str(content_dir)])

    assert result.exit_code == 0
    assert "broken.md" in result.stdout
    assert "MalformedDocumentError" in result.stdout


def test_check_reports_unreadable_files(content_dir: Path, monkeypatch):
    (content_dir / "locked.md").write_text("---\ntitle: Locked\npost_status: publish\n---\n", encoding="utf-8")
    read_text = Path.read_text

    def deny_locked(self, *args, **kwargs):
        if self.name == "locked.md":
            raise PermissionError(13, "Permission denied")
        return read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", deny_locked)

    result = runner.invoke(app, ["check", str(content_dir)])

    assert result.exit_code == 0
    assert "locked.md" in result.stdout
    assert "PermissionError" in result.stdout
    assert "3 document(s) parsed, 1 failure(s)." in result.stdout


def test_cli_prints_through_shared_console():
    from folio.cli.app import console as cli_console
    from folio.core.logging import console

    assert cli_console is console


def test_missing_content_dir_exits_with_error(tmp_path: Path):
    result = runner.invoke(app, ["list", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "not found" in result.stdout


def test_check_valid_content(content_dir: Path):
    result = runner.invoke(app, ["check", str(content_dir)])

    assert result.exit_code == 0
    assert "3 document(s) parsed, 0 failure(s)." in result.stdout


def test_check_tolerates_partial_failures_unless_strict(content_dir: Path):
    (content_dir / "broken.md").write_text("---\ntitle: never closed\n", encoding="utf-8")

    lenient = runner.invoke(app, ["check", str(content_dir)])
    strict = runner.invoke(app, ["check", str(content_dir), "--strict"])

    assert lenient.exit_code == 0
    assert "TruncatedMetadataError" in lenient.stdout
    assert strict.exit_code == 1


def test_check_fails_when_nothing_parses(tmp_path: Path):
    root = tmp_path / "empty"
    root.mkdir()
    (root / "broken.md").write_text("not an article\n", encoding="utf-8")

    result = runner.invoke(app, ["check", str(root)])

    assert result.exit_code == 1
    assert "No documents could be parsed." in result.stdout


def test_show_prints_metadata_and_body(content_dir: Path):
    result = runner.invoke(app, ["show", "popover-api", str(content_dir)])

    assert result.exit_code == 0
    assert "featured_image" in result.stdout
    assert "showPopover" in result.stdout


def test_show_unknown_slug(content_dir: Path):
    result = runner.invoke(app, ["show", "missing", str(content_dir)])

    assert result.exit_code == 1
    assert "No document with slug" in result.stdout
