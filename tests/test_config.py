"""Tests for settings parsing."""

import logging

import pytest

from macro_journal.config import Settings, parse_log_level


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, logging.INFO),
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("15", 15),
        ("chatty", logging.INFO),
    ],
)
def test_parse_log_level(raw: str | None, expected: int) -> None:
    assert parse_log_level(raw) == expected


def test_settings_defaults(settings) -> None:
    assert settings.log_level == "INFO"
    assert settings.summary_days == 7
    assert settings.recent_days_limit == 10


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "env-key")
    monkeypatch.setenv("RECENT_DAYS_LIMIT", "14")

    settings = Settings()

    assert settings.supabase_url == "https://env.supabase.co"
    assert settings.recent_days_limit == 14
