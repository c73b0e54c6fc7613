"""Tests for application settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from toolbridge.config.settings import Settings
from toolbridge.tools.base.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TOOLBRIDGE_TAVILY__API_KEY", "TOOLBRIDGE_TAVILY__MAX_RESULTS", "TOOLBRIDGE_HTTP__TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


class TestSettingsDefaults:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.tavily.api_key == ""
        assert settings.tavily.max_results is None
        assert settings.http.timeout == 30.0
        assert settings.observability.log_level == "info"

    def test_default_tavily_config_fails_validation(self) -> None:
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        with pytest.raises(ConfigurationError):
            settings.tavily.to_config().validated()


class TestSettingsFromEnv:
    def test_nested_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOOLBRIDGE_TAVILY__API_KEY", "tvly-env")
        monkeypatch.setenv("TOOLBRIDGE_TAVILY__MAX_RESULTS", "8")
        monkeypatch.setenv("TOOLBRIDGE_HTTP__TIMEOUT", "4.5")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.tavily.api_key == "tvly-env"
        assert settings.tavily.max_results == 8
        assert settings.http.timeout == 4.5

    def test_domains_from_comma_separated_string(self) -> None:
        settings = Settings(_env_file=None, tavily={"include_domains": "arxiv.org, nature.com"})  # type: ignore[call-arg]
        assert settings.tavily.include_domains == ["arxiv.org", "nature.com"]

    def test_domains_from_json_string(self) -> None:
        settings = Settings(_env_file=None, tavily={"exclude_domains": '["a.com", "b.com"]'})  # type: ignore[call-arg]
        assert settings.tavily.exclude_domains == ["a.com", "b.com"]


class TestSettingsFromYaml:
    def test_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "toolbridge.yaml"
        path.write_text(
            "tavily:\n"
            "  api_key: tvly-yaml\n"
            "  topic: news\n"
            "  include_answer: false\n"
            "http:\n"
            "  headers:\n"
            "    User-Agent: toolbridge-test\n"
            "observability:\n"
            "  log_format: json\n"
        )

        settings = Settings.from_yaml(path)

        assert settings.tavily.api_key == "tvly-yaml"
        assert settings.tavily.topic == "news"
        assert settings.tavily.include_answer is False
        assert settings.http.headers == {"User-Agent": "toolbridge-test"}
        assert settings.observability.log_format == "json"

    def test_missing_yaml_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "missing.yaml")


class TestToolConfigs:
    def test_tavily_to_config(self) -> None:
        settings = Settings(  # type: ignore[call-arg]
            _env_file=None,
            tavily={"api_key": "k", "country": "china", "include_answer": True, "timeout": 10},
        )
        cfg = settings.tavily.to_config().validated()
        assert cfg.api_key == "k"
        assert cfg.country == "china"
        assert cfg.include_answer is True
        assert cfg.include_images is None
        assert cfg.timeout == 10
        assert cfg.headers is not None and cfg.headers["Authorization"] == "Bearer k"

    def test_http_to_delete_config(self) -> None:
        settings = Settings(_env_file=None, http={"headers": {"X-Token": "t"}, "timeout": 3})  # type: ignore[call-arg]
        cfg = settings.http.to_delete_config().validated()
        assert cfg.tool_name == "requests_delete"
        assert cfg.headers == {"X-Token": "t"}
        assert cfg.timeout == 3
