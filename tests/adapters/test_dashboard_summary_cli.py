"""Tests for the dashboard_summary_cli adapter."""

from unittest.mock import MagicMock

from src.adapters import dashboard_summary_cli
from src.infrastructure import container
from src.infrastructure import settings as settings_module


def test_main_prints_summary(monkeypatch, capsys):
    """The CLI should print the demo summary in the configured currency."""
    fake_logger = MagicMock()
    monkeypatch.setattr(dashboard_summary_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(container, "get_app_logger", lambda: fake_logger)
    monkeypatch.setenv("DASHBOARD_DISPLAY_CURRENCY", "USD")

    dashboard_summary_cli.main()

    out = capsys.readouterr().out
    assert "Dashboard summary (currency=USD)" in out
    assert "Net worth: $23,500.00" in out
    assert "Income: $5,500.00" in out
    assert "Expenses: $165.00" in out
    assert "Savings rate: 97.0%" in out
    assert "Budget Food: $350.00 of $600.00 (58%, ok)" in out
    fake_logger.error.assert_not_called()


def test_main_logs_unknown_currency(monkeypatch, capsys):
    fake_logger = MagicMock()
    monkeypatch.setattr(dashboard_summary_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)
    monkeypatch.setenv("DASHBOARD_DISPLAY_CURRENCY", "CHF")

    dashboard_summary_cli.main()

    fake_logger.error.assert_called_once()
    assert capsys.readouterr().out == ""
