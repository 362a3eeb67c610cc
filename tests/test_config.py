"""Tests for lumina.config — settings file handling."""
from __future__ import annotations

import json
import logging

import pytest

from lumina.config import (
    Settings,
    StatusMessages,
    configure_logging,
    load_settings,
    save_settings,
)


class TestLoadSettings:
    def test_missing_file_gives_defaults(self, tmp_path) -> None:
        settings = load_settings(tmp_path / "missing.json")
        assert settings == Settings()
        assert settings.messages.no_results == "No results found."

    def test_overrides_and_unknown_keys(self, tmp_path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({
            "dark_mode": False,
            "log_level": "DEBUG",
            "match_color": "#00ff00",
            "zoom": 3.0,
            "messages": {"no_results": "Nothing here.", "bogus": "x"},
        }))

        settings = load_settings(path)

        assert settings.dark_mode is False
        assert settings.log_level == "DEBUG"
        assert settings.match_color == "#00ff00"
        assert settings.messages.no_results == "Nothing here."
        assert settings.messages.search_error == "Error occurred during search."

    def test_malformed_file_gives_defaults(self, tmp_path, caplog) -> None:
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="lumina.config"):
            settings = load_settings(path)

        assert settings == Settings()
        assert "Ignoring unreadable settings file" in caplog.text

    def test_non_object_json_gives_defaults(self, tmp_path) -> None:
        path = tmp_path / "settings.json"
        path.write_text("[1, 2]")
        assert load_settings(path) == Settings()

    def test_messages_of_wrong_type_are_ignored(self, tmp_path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"dark_mode": False, "messages": ["oops"]}))

        settings = load_settings(path)

        assert settings.dark_mode is False
        assert settings.messages == StatusMessages()

    def test_non_string_log_level_is_ignored(self, tmp_path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"log_level": 5}))
        assert load_settings(path).log_level == "INFO"

    def test_saved_settings_load_back(self, tmp_path) -> None:
        path = tmp_path / "settings.json"
        settings = Settings(dark_mode=False, messages=StatusMessages(indexing="Reading..."))

        assert save_settings(settings, path)
        assert load_settings(path) == settings


class TestStatusMessages:
    def test_found_formats_count(self) -> None:
        assert StatusMessages().found(5) == "5 result(s) found."

    @pytest.mark.parametrize("template", ["{n} hits", "{0} hits", "{count", "{count.real.x}"])
    def test_bad_template_falls_back_to_default(self, template, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="lumina.config"):
            assert StatusMessages(results_found=template).found(3) == "3 result(s) found."
        assert "Bad results_found template" in caplog.text


class TestConfigureLogging:
    def test_accepts_non_string_level(self, monkeypatch) -> None:
        monkeypatch.delenv("LUMINA_LOG_LEVEL", raising=False)
        configure_logging(5)  # type: ignore[arg-type]
