import logging

import pytest
from rich.logging import RichHandler

from folio.core.logging import LOG_LEVEL_ENV, configure_logging, console, err_console, resolve_level


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _managed_handlers():
    return [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]


def test_configure_logging_installs_one_rich_handler():
    configure_logging()
    configure_logging()

    assert len(_managed_handlers()) == 1


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("FOLIO_LOG_LEVEL", "debug")

    configure_logging()

    assert logging.getLogger().level == logging.DEBUG


def test_explicit_level_wins_and_unknown_falls_back(monkeypatch):
    monkeypatch.setenv("FOLIO_LOG_LEVEL", "DEBUG")

    configure_logging("warning")
    assert logging.getLogger().level == logging.WARNING

    configure_logging("nonsense")
    assert logging.getLogger().level == logging.INFO


def test_existing_handlers_are_kept():
    other = logging.NullHandler()
    logging.getLogger().addHandler(other)

    handler = configure_logging()

    assert other in logging.getLogger().handlers
    assert handler in logging.getLogger().handlers


def test_handler_is_reinstalled_after_removal():
    first = configure_logging()
    logging.getLogger().removeHandler(first)

    second = configure_logging()

    assert second in logging.getLogger().handlers
    assert len(_managed_handlers()) == 1


@pytest.mark.parametrize(
    ("name", "expected"),
    [("debug", logging.DEBUG), ("ERROR", logging.ERROR), (None, logging.INFO), ("verbose", logging.INFO)],
)
def test_resolve_level(monkeypatch, name, expected):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

    assert resolve_level(name) == expected


def test_log_records_go_to_stderr_console():
    handler = configure_logging()

    assert handler.console is err_console
    assert err_console.stderr
    assert console is not err_console
