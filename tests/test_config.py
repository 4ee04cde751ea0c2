"""Tests for boxdown.config -- environment overrides."""

from __future__ import annotations

import logging

import pytest

from boxdown.config import DEFAULT_COLUMNS, RenderConfig, load_config
from boxdown.highlight import DEFAULT_THEME


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BOXDOWN_COLUMNS", raising=False)
    monkeypatch.delenv("BOXDOWN_THEME", raising=False)


class TestLoadConfig:
    def test_defaults(self) -> None:
        assert load_config() == RenderConfig(columns=DEFAULT_COLUMNS, theme=DEFAULT_THEME)

    def test_columns_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOXDOWN_COLUMNS", "120")
        assert load_config().columns == 120

    def test_theme_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOXDOWN_THEME", "friendly")
        assert load_config().theme == "friendly"

    @pytest.mark.parametrize("value", ["wide", "0", "-3"])
    def test_invalid_columns_are_ignored(
        self, value: str, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("BOXDOWN_COLUMNS", value)
        with caplog.at_level(logging.WARNING, logger="boxdown.config"):
            config = load_config()
        assert config.columns == DEFAULT_COLUMNS
        assert "BOXDOWN_COLUMNS" in caplog.text
