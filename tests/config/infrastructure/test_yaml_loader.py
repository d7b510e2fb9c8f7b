"""Tests for YAML config loading infrastructure."""

from pathlib import Path

import pytest

from search_compare.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from search_compare.config.infrastructure.yaml_loader import YamlConfigLoader
from tests.config.fake_observer import FakeConfigObserver

# __file__ is tests/config/infrastructure/test_yaml_loader.py
FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


def _fixture(name: str) -> Path:
    return FIXTURES / name


def _make_loader() -> tuple[YamlConfigLoader, FakeConfigObserver]:
    observer = FakeConfigObserver()
    return YamlConfigLoader(observer=observer), observer


class TestValidConfigLoading:
    """A valid YAML config loads with every section populated."""

    def test_loads_all_sections(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SC_TEST_ANTHROPIC_KEY", "sk-test")
        loader, _ = _make_loader()

        cfg = loader.load(path=_fixture("valid_config.yaml"))

        assert cfg.query_timeout_seconds == 120
        assert cfg.judge.model == "openai/gpt-4o-mini"
        assert cfg.judge.max_tokens == 1024
        assert cfg.link_check.timeout_seconds == 2.5
        assert list(cfg.providers) == ["claude", "gemini", "grok"]

    def test_interpolates_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SC_TEST_ANTHROPIC_KEY", "sk-test")
        loader, _ = _make_loader()

        cfg = loader.load(path=_fixture("valid_config.yaml"))

        assert cfg.providers["claude"].api_key == "sk-test"
        assert cfg.providers["gemini"].api_key is None
        assert cfg.providers["grok"].timeout_seconds == 60

    def test_emits_config_loaded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SC_TEST_ANTHROPIC_KEY", "sk-test")
        loader, observer = _make_loader()

        loader.load(path=_fixture("valid_config.yaml"))

        assert observer.loaded[0].providers == ["claude", "gemini", "grok"]
        assert observer.loaded[0].path.endswith("valid_config.yaml")
        assert observer.temperature_warnings == []

    def test_omitted_sections_use_defaults(self) -> None:
        loader, _ = _make_loader()

        cfg = loader.load(path=_fixture("minimal_config.yaml"))

        assert list(cfg.providers) == ["grok"]
        assert cfg.judge.temperature == 0.0
        assert cfg.link_check.timeout_seconds == 5.0

    def test_empty_file_yields_defaults(self) -> None:
        loader, _ = _make_loader()

        

    def test_warm_judge_emits_temperature_warning(self) -> None:
        loader, observer = _make_loader()

        loader.load(path=_fixture("warm_judge_config.yaml"))

        assert observer.temperature_warnings == [pytest.approx(0.7)]


class TestConfigLoadFailures:
    def test_missing_env_vars_are_all_reported(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("SC_TEST_MISSING_ONE", raising=False)
        monkeypatch.delenv("SC_TEST_MISSING_TWO", raising=False)
        loader, _ = _make_loader()

        with pytest.raises(MissingEnvVarsError) as exc_info:
            loader.load(path=_fixture("missing_env_vars_config.yaml"))

        assert sorted(exc_info.value.missing_vars) == [
            "SC_TEST_MISSING_ONE",
            "SC_TEST_MISSING_TWO",
        ]
        assert exc_info.value.used_by["SC_TEST_MISSING_ONE"] == [
            "providers.claude.api_key",
            "providers.grok.api_key",
        ]
        assert "SC_TEST_MISSING_TWO (used by providers.grok.api_key)" in str(
            exc_info.value
        )

    def test_schema_violation_raises_validation_error(self) -> None:
        loader, observer = _make_loader()

        with pytest.raises(ConfigValidationError):
            loader.load(path=_fixture("invalid_config.yaml"))

        assert observer.loaded == []

    def test_missing_file_raises_load_error(self) -> None:
        loader, _ = _make_loader()

        with pytest.raises(ConfigLoadError, match="file not found"):
            loader.load(path=_fixture("does_not_exist.yaml"))

    def test_malformed_yaml_raises_load_error(self) -> None:
        loader, _ = _make_loader()

        with pytest.raises(ConfigLoadError, match="invalid YAML"):
            loader.load(path=_fixture("malformed_config.yaml"))
