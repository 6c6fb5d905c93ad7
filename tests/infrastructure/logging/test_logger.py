"""Tests for the dashboard logging helpers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.infrastructure.logging import logger as logger_module


@pytest.fixture
def fresh_singletons():
    """Reset logger singletons around a test."""
    classes = (logger_module.AppLogger, logger_module.UsageLogger)
    saved = {cls: cls._instance for cls in classes}
    for cls in classes:
        cls._instance = None
    yield
    for cls, instance in saved.items():
        cls._instance = instance


def test_builder_defaults_write_app_logs(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240315"),
    )

    built = (
        logger_module.LoggerBuilder()
        .name("finance_dashboard.test_defaults")
        .build()
    )

    assert built.level == logging.INFO
    assert built.propagate is False
    assert len(built.handlers) == 1
    expected = tmp_path / "logs" / "app" / "20240315_app_logs.log"
    assert built.handlers[0].baseFilename == str(expected)
    built.handlers[0].close()


def test_builder_reuses_registered_logger(tmp_path, monkeypatch):
    """A second build must not stack another file handler."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    builder = (
        logger_module.LoggerBuilder()
        .name("finance_dashboard.test_reuse")
        .subdir("usage")
        .prefix("usage_logs")
        .console(True)
        .level(logging.WARNING)
    )

    first = builder.build()
    second = builder.build()

    assert second is first
    assert first.level == logging.WARNING
    assert [type(h) for h in first.handlers] == [
        logging.FileHandler,
        logging.StreamHandler,
    ]
    assert (tmp_path / "logs" / "usage").is_dir()
    for handler in first.handlers:
        handler.close()


def test_builder_uses_injected_factories(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    paths = []

    def _file_factory(path, formatter):
        paths.append((path.name, formatter))
        return file_handler

    built = (
        logger_module.LoggerBuilder()
        .name("finance_dashboard.test_factories")
        .prefix("audit")
        .formatter(lambda: fmt)
        .file_handler(_file_factory)
        .build()
    )

    assert built.handlers == [file_handler]
    assert paths[0][0].endswith("_audit.log")
    assert paths[0][1] is fmt


def test_log_format_names_the_logger():
    formatter = logger_module.LoggerBuilder._default_formatter()
    record = logging.LogRecord(
        "finance_dashboard.app", logging.WARNING, __file__, 1,
        "rate missing", None, None,
    )

    line = formatter.format(record)

    assert line.endswith("| finance_dashboard.app | WARNING | rate missing")


def test_usage_logger_writes_quietly_to_usage_folder():
    usage = logger_module.UsageLogger

    assert usage._subdir == "usage"
    assert usage._prefix == "usage_logs"
    assert usage._console is False
    assert logger_module.AppLogger._subdir == "app"
    assert logger_module.AppLogger._console is True


def test_get_app_logger_is_a_named_singleton(monkeypatch, fresh_singletons):
    built_names = []

    def _fake_build(self):
        built_names.append((self._name, self._subdir, self._prefix))
        return MagicMock(name=self._name)

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)

    first = logger_module.get_app_logger()
    second = logger_module.get_app_logger()
    usage = logger_module.get_usage_logger()

    assert first is second
    assert isinstance(first, logger_module.AppLogger)
    assert isinstance(usage, logger_module.UsageLogger)
    assert usage is not first
    assert built_names == [
        ("finance_dashboard.app", "app", "app_logs"),
        ("finance_dashboard.usage", "usage", "usage_logs"),
    ]


def test_app_logger_delegates_each_level(monkeypatch, fresh_singletons):
    wrapped = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: wrapped,
    )

    app_logger = logger_module.get_app_logger()
    app_logger.info("Dashboard summary computed")
    app_logger.warning("Falling back to USD")
    app_logger.error("Unknown currency: 'CHF'")
    app_logger.debug("rates loaded")
    app_logger.critical("rate table empty")

    wrapped.info.assert_called_once_with("Dashboard summary computed")
    wrapped.warning.assert_called_once_with("Falling back to USD")
    wrapped.error.assert_called_once_with("Unknown currency: 'CHF'")
    wrapped.debug.assert_called_once_with("rates loaded")
    wrapped.critical.assert_called_once_with("rate table empty")
